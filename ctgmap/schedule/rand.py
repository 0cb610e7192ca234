"""A trivial random scheduler."""

import logging

# This is renamed to ensure that the random module isn't accidentally used
# directly.
import random as default_random

from collections import OrderedDict

from ctgmap.exceptions import InsufficientCoresError


logger = logging.getLogger(__name__.split(".")[-1])


def schedule(tasks, cores, random=default_random, without_replacement=True):
    """A random scheduler.

    This algorithm assigns every task to a uniformly chosen core, completely
    ignoring the performance of the core. It exists primarily as a baseline
    and as a way of producing template mapping graphs.

    Parameters
    ----------
    random : :py:class:`random.Random`
        Defaults to ``import random`` but can be set to your own instance of
        :py:class:`random.Random` to allow you to control the seed and produce
        deterministic results.
    without_replacement : bool
        If True (the default), every task is assigned to a different core:
        each chosen core is removed from the pool of candidates. Otherwise a
        core is drawn from all cores for every task and may end up hosting
        many tasks.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.InsufficientCoresError`
        If there are no cores or, without replacement, fewer cores than
        tasks.
    """
    logger.debug("Random scheduling started")

    tasks = list(tasks)
    cores = list(cores)

    # The cores which may still be chosen
    pool = list(cores)

    assignment = OrderedDict()
    for task in tasks:
        if len(pool) == 0:
            raise InsufficientCoresError(len(tasks), len(cores))

        index = random.randrange(len(pool))
        logger.info("Task %s is scheduled to core %s", task.id, pool[index].id)
        if without_replacement:
            assignment[task] = pool.pop(index)
        else:
            assignment[task] = pool[index]

    logger.debug("Random scheduling finished")
    return assignment
