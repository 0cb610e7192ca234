"""Decoding of external solution strings.

External design space explorers (e.g. FADSE) describe a system-on-chip
configuration with a string such as::

    core-0_0=12|core-0_1=32|core-1_0=5|core-1_1=26|

Each item ``core-x_y=z`` states that, for the CTG with ID ``x``, the core
instance with UID ``y`` in the mapping graph should be a core of type ``z``.
"""

import re

from ctgmap.exceptions import \
    MalformedSolutionEncodingError, SolutionEntryNotFoundError


ENTRY_SEPARATOR = "|"

# Whitespace is allowed around an entry and its "=" but not within a field
re_entry = re.compile(r"^\s*core-(?P<ctg_id>[^_|=\s]+)_(?P<uid>[^|=\s]+)"
                      r"\s*=\s*(?P<core_id>[^|=\s]+)\s*$")


def parse_solution(solution, ctg_id):
    """Decode the entries of an external solution which refer to one CTG.

    Parameters
    ----------
    solution : str
        The external solution string.
    ctg_id : str
        Only entries for this CTG are returned, all others are ignored
        (though they must still be well formed).

    Returns
    -------
    {uid: core_id, ...}
        Where a UID appears more than once, the first entry wins.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.MalformedSolutionEncodingError`
        If any non-empty entry is not of the form ``core-<ctg>_<uid>=<core>``
        (surrounding whitespace aside).
    """
    core_ids = {}
    for entry in solution.split(ENTRY_SEPARATOR):
        # Empty entries arise from trailing (or doubled) separators
        if entry.strip() == "":
            continue

        match = re_entry.match(entry)
        if match is None:
            raise MalformedSolutionEncodingError(entry)

        if match.group("ctg_id") == ctg_id:
            core_ids.setdefault(match.group("uid"), match.group("core_id"))

    return core_ids


def find_core_id(core_ids, ctg_id, uid):
    """Look up the core ID for a core instance in a decoded solution.

    Parameters
    ----------
    core_ids : {uid: core_id, ...}
        As produced by :py:func:`.parse_solution` for `ctg_id`.
    ctg_id : str
    uid : str

    Raises
    ------
    :py:exc:`ctgmap.exceptions.SolutionEntryNotFoundError`
    """
    try:
        return core_ids[uid]
    except KeyError:
        raise SolutionEntryNotFoundError(ctg_id, uid)
