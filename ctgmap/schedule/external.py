"""A scheduler which changes the core types of an existing mapping graph
according to the output of an external design space explorer.

When searching for optimal system-on-chip configurations with a tool such as
FADSE, each candidate solution is described by a string naming a core type
for every core instance of every CTG (see :py:mod:`ctgmap.solution`). This
scheduler turns a mapping graph produced by another scheduler (the template)
into the mapping graph described by such a solution.
"""

import logging

from ctgmap.exceptions import UnknownCoreError, UnknownTaskError

from ctgmap.mapping import task_instance

from ctgmap.model import MappingGraph, CoreInstance, find_by_id

from ctgmap.schedule import Scheduler, mapping_graph_id

from ctgmap.solution import parse_solution, find_core_id


logger = logging.getLogger(__name__.split(".")[-1])


def rewrite(template, solution, ctg_id, tasks, cores):
    """Replace the core type of every core instance of a mapping graph.

    Task membership of core instances and their UIDs are preserved; only the
    core types change. The execution time and power of every task instance
    are looked up afresh from the new core's profile for the task's type.

    Parameters
    ----------
    template : :py:class:`ctgmap.model.MappingGraph`
        The mapping graph to rewrite. It is not modified.
    solution : str or {uid: core_id, ...}
        The external solution string or the entries of one already decoded
        with :py:func:`ctgmap.solution.parse_solution` for `ctg_id`.
    ctg_id : str
        The ID of the CTG the template maps.
    tasks : [:py:class:`ctgmap.model.Task`, ...]
        The tasks of the CTG, needed to find the type of each task instance.
    cores : [:py:class:`ctgmap.model.Core`, ...]
        The core library.

    Returns
    -------
    :py:class:`ctgmap.model.MappingGraph`
        With ID ``"<ctg_id>_3"``.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.MalformedSolutionEncodingError`
    :py:exc:`ctgmap.exceptions.SolutionEntryNotFoundError`
        If the solution names no core for one of the template's UIDs.
    :py:exc:`ctgmap.exceptions.UnknownCoreError`
        If the solution names a core absent from `cores`.
    :py:exc:`ctgmap.exceptions.UnknownTaskError`
        If the template contains a task absent from `tasks`.
    :py:exc:`ctgmap.exceptions.NoCoreSupportsTaskTypeError`
        If a new core has no profile for the type of a task it hosts.
    """
    logger.debug("External solution based scheduling of mapping graph %s "
                 "started", template.id)

    if isinstance(solution, str):
        logger.debug("External solution is %s", solution)
        core_ids = parse_solution(solution, ctg_id)
    else:
        core_ids = solution

    new_cores = []
    for core_instance in template.cores:
        core_id = find_core_id(core_ids, ctg_id, core_instance.uid)
        logger.debug("Found for CTG %s and core UID %s core ID %s",
                     ctg_id, core_instance.uid, core_id)
        core = find_by_id(cores, core_id)
        if core is None:
            raise UnknownCoreError(core_id)

        task_instances = []
        for old_task_instance in core_instance.tasks:
            task = find_by_id(tasks, old_task_instance.task_id)
            if task is None:
                raise UnknownTaskError(old_task_instance.task_id)
            task_instances.append(task_instance(task, core))

        new_cores.append(
            CoreInstance(core.id, core_instance.uid, task_instances))

    logger.debug("External solution based scheduling finished")
    return MappingGraph(mapping_graph_id(ctg_id, Scheduler.external),
                        ctg_id, new_cores)
