"""A trivial scheduler pairing every task with the core of the same ID."""

import logging

from collections import OrderedDict

from ctgmap.exceptions import MissingCoreForTaskError

from ctgmap.model import find_by_id


logger = logging.getLogger(__name__.split(".")[-1])


def schedule(tasks, cores):
    """Directly assign task 0 to core 0, task 1 to core 1 and so on.

    This scheduler requires a core whose ID is identical to the ID of each
    task; the first such core is used. As a consequence every core hosts at
    most one task. It is primarily useful for producing a template mapping
    graph for :py:func:`ctgmap.schedule.external.rewrite`.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.MissingCoreForTaskError`
        If a task has no core with the same ID.
    """
    logger.debug("Direct scheduling started")

    assignment = OrderedDict()
    for task in tasks:
        logger.debug("Searching for a core with ID %s", task.id)
        core = find_by_id(cores, task.id)
        if core is None:
            raise MissingCoreForTaskError(task.id)

        logger.info("Task %s is scheduled to core %s", task.id, core.id)
        assignment[task] = core

    logger.debug("Direct scheduling finished")
    return assignment
