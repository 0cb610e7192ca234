"""A greedy scheduler choosing the fastest core for every task."""

import logging

from collections import OrderedDict

from ctgmap.exceptions import NoCoreSupportsTaskTypeError

from ctgmap.profiles import require_profile


logger = logging.getLogger(__name__.split(".")[-1])


def fastest_core(cores, task_type):
    """Find the core which executes a task type in the smallest time.

    Notes
    -----
    * Cores with a zero execution time for the type are ignored since zero
      means the core never ran that type of task.
    * Where several cores share the smallest execution time, the first
      encountered in `cores` is chosen.
    * If every core has a zero execution time, the first core is chosen.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.NoCoreSupportsTaskTypeError`
        If `cores` is empty or any core has no profile for `task_type`.
    """
    if len(cores) == 0:
        raise NoCoreSupportsTaskTypeError(task_type)

    logger.debug("Searching for the core that executes task type %s in the "
                 "fastest time", task_type)
    best_core = None
    best_time = None
    for core in cores:
        exec_time = require_profile(core, task_type).exec_time
        if exec_time > 0 and (best_time is None or exec_time < best_time):
            best_core = core
            best_time = exec_time

    if best_core is None:
        best_core = cores[0]
        logger.debug("No core with non zero execution time was found for "
                     "task type %s. Assigned core %s (the first available "
                     "core)", task_type, best_core.id)

    return best_core


def schedule(tasks, cores):
    """Assign to every task the core which executes it fastest.

    Every task is chosen independently (see :py:func:`.fastest_core`) so the
    same core may be chosen for several tasks. Mapping graphs built from this
    assignment should give every task its own core instance
    (:py:attr:`ctgmap.mapping.UidStyle.task_id`).
    """
    logger.debug("Minimum execution time scheduling started")

    cores = list(cores)

    assignment = OrderedDict()
    for task in tasks:
        core = fastest_core(cores, task.type)
        logger.info("Task %s is scheduled to core %s (ID %s)",
                    task.id, core.name, core.id)
        assignment[task] = core

    logger.debug("Minimum execution time scheduling finished")
    return assignment
