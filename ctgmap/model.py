"""Immutable datastructures describing tasks, cores and mapping graphs.

All of these types are :py:func:`collections.namedtuple` subclasses and hence
compare by value, hash sensibly and may be used as dictionary keys (as they
are in assignments).
"""

import collections


class Profile(collections.namedtuple("Profile",
                                     "task_type exec_time power")):
    """The performance of a core when executing one type of task.

    Parameters
    ----------
    task_type : str
        The task type this profile applies to.
    exec_time : float
        Execution time of the task type on the core. A value of zero means
        the core *cannot* execute this task type (it was never measured).
    power : float
        Power consumed whilst executing the task type.
    """


class Task(collections.namedtuple("Task", "id type")):
    """A computational task of a communication task graph (CTG).

    Parameters
    ----------
    id : str
        Unique (within one task set) identifier of the task.
    type : str
        The task type, which selects the :py:class:`.Profile` of a core which
        applies to this task.
    """


class Core(collections.namedtuple("Core", "id name profiles")):
    """A candidate processing core from the core library.

    Parameters
    ----------
    id : str
        The core (type) identifier.
    name : str
        A human readable name, e.g. ``"AMD K6-2E 400MHz"``.
    profiles : (:py:class:`.Profile`, ...)
        Performance profiles in the order they were declared. At most one
        profile per task type is expected; if not, the first one is used.
    """

    def __new__(cls, id, name, profiles=()):
        return super(Core, cls).__new__(cls, id, name, tuple(profiles))


class TaskInstance(collections.namedtuple("TaskInstance",
                                          "task_id exec_time power")):
    """A task hosted by a :py:class:`.CoreInstance`.

    Parameters
    ----------
    task_id : str
    exec_time : float
        Copied from the profile of the hosting core for the task's type.
    power : float
        Copied from the profile of the hosting core for the task's type.
    """


class CoreInstance(collections.namedtuple("CoreInstance",
                                          "core_id uid tasks")):
    """One physical instance of a core type within a mapping graph.

    Parameters
    ----------
    core_id : str
        The ID of the :py:class:`.Core` (type) this is an instance of.
    uid : str
        Identifier of this instance, unique within its mapping graph.
    tasks : (:py:class:`.TaskInstance`, ...)
    """

    def __new__(cls, core_id, uid, tasks=()):
        return super(CoreInstance, cls).__new__(cls, core_id, uid,
                                                tuple(tasks))


class MappingGraph(collections.namedtuple("MappingGraph", "id ctg_id cores")):
    """The output of scheduling: tasks mapped onto core instances.

    Parameters
    ----------
    id : str
        The identifier of this mapping graph, typically
        ``"<ctg_id>_<scheduler_id>"``.
    ctg_id : str
        The ID of the communication task graph which was scheduled.
    cores : (:py:class:`.CoreInstance`, ...)
    """

    def __new__(cls, id, ctg_id, cores=()):
        return super(MappingGraph, cls).__new__(cls, id, ctg_id, tuple(cores))

    @property
    def task_ids(self):
        """A list of the IDs of every task instance, in graph order."""
        return [task.task_id for core in self.cores for task in core.tasks]


def find_by_id(items, id):
    """Return the first task or core in `items` whose ``id`` equals `id`, or
    None if there is no such item.
    """
    for item in items:
        if item.id == id:
            return item
    return None


def check_unique_ids(tasks):
    """Raise a :py:exc:`ValueError` if two tasks share an ID."""
    seen = set()
    for task in tasks:
        if task.id in seen:
            raise ValueError("Duplicate task ID {}".format(task.id))
        seen.add(task.id)
