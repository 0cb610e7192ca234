"""Construction of mapping graphs from task-to-core assignments."""

import logging

from collections import OrderedDict

from enum import Enum

from ctgmap.model import MappingGraph, CoreInstance, TaskInstance

from ctgmap.profiles import require_profile


logger = logging.getLogger(__name__.split(".")[-1])


class UidStyle(Enum):
    """How core instances are formed and how their UIDs are chosen."""

    core_id = 0
    """Tasks assigned to the same core share one core instance whose UID is
    the core's ID."""

    counter = 1
    """Tasks assigned to the same core share one core instance. UIDs are
    consecutive integers starting from 0, in the order core instances are
    first encountered."""

    task_id = 2
    """Every task gets its own core instance whose UID is the task's ID, even
    when several tasks were assigned the same core."""


def task_instance(task, core):
    """Produce the :py:class:`~ctgmap.model.TaskInstance` of a task hosted on
    a core, copying the execution time and power from the core's profile.
    """
    profile = require_profile(core, task.type)
    return TaskInstance(task.id, profile.exec_time, profile.power)


def build_mapping_graph(assignment, mapping_id, ctg_id,
                        uid_style=UidStyle.counter):
    """Turn an assignment into a :py:class:`~ctgmap.model.MappingGraph`.

    Parameters
    ----------
    assignment : {:py:class:`~ctgmap.model.Task`: \
                  :py:class:`~ctgmap.model.Core`, ...}
        Every task with the core it was scheduled to, as produced by a
        scheduler. Core instances are emitted in the order their first task
        appears in this mapping and tasks within a core instance in their
        assignment order. Tasks share a core instance only when assigned the
        very same core object: equal entries of a core library remain
        distinct cores.
    mapping_id : str
        The ID of the new mapping graph.
    ctg_id : str
        The ID of the scheduled communication task graph.
    uid_style : :py:class:`.UidStyle`

    Raises
    ------
    :py:exc:`ctgmap.exceptions.NoCoreSupportsTaskTypeError`
        If a task was assigned to a core with no profile for its type.
    """
    logger.debug("Generating mapping graph %s for CTG %s", mapping_id, ctg_id)

    if uid_style is UidStyle.task_id:
        cores = [CoreInstance(core.id, task.id, [task_instance(task, core)])
                 for task, core in assignment.items()]
    else:
        # {id(core): (core, [task, ...]), ...} in order of discovery
        core_tasks = OrderedDict()
        for task, core in assignment.items():
            core_tasks.setdefault(id(core), (core, []))[1].append(task)

        cores = []
        for uid, (core, tasks) in enumerate(core_tasks.values()):
            if uid_style is UidStyle.core_id:
                uid = core.id
            cores.append(CoreInstance(
                core.id, str(uid),
                [task_instance(task, core) for task in tasks]))

    return MappingGraph(mapping_id, ctg_id, cores)
