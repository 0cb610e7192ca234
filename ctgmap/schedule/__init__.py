"""A collection of schedulers which assign the tasks of a communication task
graph (CTG) to cores from a core library.

Schedulers have the function prototype::

    schedule(tasks, cores, **kwargs) -> assignment

Where:

* `tasks` is a sequence of :py:class:`~ctgmap.model.Task` with unique IDs.
* `cores` is a sequence of :py:class:`~ctgmap.model.Core`. Several schedulers
  break ties by the order of this sequence so it should be stable between
  runs for results to be reproducible.
* `**kwargs` may be any additional (and optional) implementation-specific
  arguments.

The resulting `assignment` is a :py:class:`collections.OrderedDict` `{task:
core, ...}` which gives, in the order of `tasks`, the core chosen for every
task. A scheduler either assigns every task or raises a
:py:exc:`~ctgmap.exceptions.SchedulingError`.

Assignments are turned into mapping graphs with
:py:func:`ctgmap.mapping.build_mapping_graph`, using the
:py:class:`~ctgmap.mapping.UidStyle` each scheduler expects (see
:py:data:`.UID_STYLES`).

The one exception to this prototype is :py:func:`.external.rewrite` which,
rather than scheduling from scratch, changes the core types of an existing
mapping graph according to the output of an external design space explorer.
"""

from enum import IntEnum

from ctgmap.mapping import UidStyle

from ctgmap.schedule import direct, rand, min_exec_time


class Scheduler(IntEnum):
    """The available schedulers. Values are the scheduler IDs which appear in
    mapping graph IDs and file names (``apcg-<ctg_id>_<scheduler_id>.xml``).
    """

    random = 0
    direct = 1
    min_exec_time = 2
    external = 3


"""{scheduler: schedule function, ...} for every from-scratch scheduler."""
SCHEDULE_FUNCTIONS = {
    Scheduler.random: rand.schedule,
    Scheduler.direct: direct.schedule,
    Scheduler.min_exec_time: min_exec_time.schedule,
}


"""{scheduler: :py:class:`~ctgmap.mapping.UidStyle`, ...}"""
UID_STYLES = {
    Scheduler.random: UidStyle.counter,
    Scheduler.direct: UidStyle.core_id,
    Scheduler.min_exec_time: UidStyle.task_id,
}


def mapping_graph_id(ctg_id, scheduler):
    """The ID given to a mapping graph of a CTG produced by a scheduler."""
    return "{}_{}".format(ctg_id, int(scheduler))
