"""Exceptions which schedulers can throw to indicate standard types of problem.

Every exception here is fatal to the scheduling run which raised it: no
partial mapping graph is ever produced.
"""


class SchedulingError(Exception):
    """Base class of all failures raised while producing a mapping graph."""
    pass


class MissingCoreForTaskError(SchedulingError):
    """The direct scheduler found no core whose ID equals a task's ID.

    Attributes
    ----------
    task_id : str
        The ID of the task which could not be paired with a core.
    """

    def __init__(self, task_id):
        self.task_id = task_id

    def __str__(self):
        return ("The direct scheduler requires a core to be available for "
                "each task. However, task {0.task_id} does not have a "
                "corresponding core {0.task_id}".format(self))


class InsufficientCoresError(SchedulingError):
    """The random scheduler ran out of cores to assign tasks to.

    Attributes
    ----------
    num_tasks : int
        The number of tasks which needed scheduling.
    num_cores : int
        The number of cores available.
    """

    def __init__(self, num_tasks, num_cores):
        self.num_tasks = num_tasks
        self.num_cores = num_cores

    def __str__(self):
        return ("Ran out of cores while scheduling {0.num_tasks} tasks onto "
                "{0.num_cores} cores".format(self))


class NoCoreSupportsTaskTypeError(SchedulingError):
    """A core declares no profile for the type of a task it must consider.

    Attributes
    ----------
    task_type : str
        The task type which was looked up.
    core_id : str or None
        The ID of the core lacking the profile. None when there were no cores
        to consider at all.
    """

    def __init__(self, task_type, core_id=None):
        self.task_type = task_type
        self.core_id = core_id

    def __str__(self):
        if self.core_id is None:
            return "No core available for task type {}".format(self.task_type)
        else:
            return ("The task type {0.task_type} was not found in the "
                    "specification of core with ID {0.core_id}".format(self))


class SolutionEntryNotFoundError(SchedulingError):
    """An external solution has no entry for a core instance.

    Attributes
    ----------
    ctg_id : str
        The ID of the CTG being rewritten.
    uid : str
        The UID of the core instance which was looked up.
    """

    def __init__(self, ctg_id, uid):
        self.ctg_id = ctg_id
        self.uid = uid

    def __str__(self):
        return ("Could not find core with UID {0.uid}, for CTG {0.ctg_id} "
                "in the external solution".format(self))


class MalformedSolutionEncodingError(SchedulingError):
    """An external solution string contains an entry which is not of the form
    ``core-<ctgId>_<uid>=<coreId>``.

    Attributes
    ----------
    entry : str
        The offending entry.
    """

    def __init__(self, entry):
        self.entry = entry

    def __str__(self):
        return "Malformed external solution entry {!r}".format(self.entry)


class UnknownCoreError(SchedulingError):
    """A core ID was referenced which is not in the core library.

    Attributes
    ----------
    core_id : str
    """

    def __init__(self, core_id):
        self.core_id = core_id

    def __str__(self):
        return "No core with ID {} in the core library".format(self.core_id)


class UnknownTaskError(SchedulingError):
    """A task ID was referenced which is not in the task set.

    Attributes
    ----------
    task_id : str
    """

    def __init__(self, task_id):
        self.task_id = task_id

    def __str__(self):
        return "No task with ID {} in the task set".format(self.task_id)


class DocumentError(SchedulingError):
    """An XML document could not be interpreted.

    Attributes
    ----------
    filename : str or None
        The file being read, if known.
    reason : str
    """

    def __init__(self, reason, filename=None):
        self.reason = reason
        self.filename = filename

    def __str__(self):
        if self.filename is None:
            return self.reason
        else:
            return "{}: {}".format(self.filename, self.reason)
