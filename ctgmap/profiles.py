"""Lookup of the performance profile a core offers for a task type."""

import sentinel

from ctgmap.exceptions import NoCoreSupportsTaskTypeError


"""Returned by :py:func:`.resolve` when a core has no profile for a type."""
NotFound = sentinel.create("NotFound")


def resolve(core, task_type):
    """Get the profile of a core for a given task type.

    Profiles are scanned in declaration order and the first match is
    returned.

    Parameters
    ----------
    core : :py:class:`ctgmap.model.Core`
    task_type : str

    Returns
    -------
    :py:class:`ctgmap.model.Profile` or :py:data:`.NotFound`
    """
    for profile in core.profiles:
        if profile.task_type == task_type:
            return profile
    return NotFound


def require_profile(core, task_type):
    """Like :py:func:`.resolve` but treats a missing profile as fatal.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.NoCoreSupportsTaskTypeError`
        If the core declares no profile for `task_type`.
    """
    profile = resolve(core, task_type)
    if profile is NotFound:
        raise NoCoreSupportsTaskTypeError(task_type, core.id)
    return profile
