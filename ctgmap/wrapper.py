"""High-level wrapper around the schedulers and the mapping graph builder.
"""

from ctgmap.mapping import build_mapping_graph

from ctgmap.model import check_unique_ids

from ctgmap.schedule import \
    Scheduler, SCHEDULE_FUNCTIONS, UID_STYLES, mapping_graph_id


def schedule_mapping_graph(tasks, cores, ctg_id, scheduler, **kwargs):
    """Wrapper for scheduling a CTG and building its mapping graph in the
    common case.

    Parameters
    ----------
    tasks : [:py:class:`ctgmap.model.Task`, ...]
        The tasks of the CTG. IDs must be unique.
    cores : [:py:class:`ctgmap.model.Core`, ...]
        The core library, in a stable order.
    ctg_id : str
        The ID of the CTG.
    scheduler : :py:class:`ctgmap.schedule.Scheduler`
        Which scheduler to use. :py:attr:`~.Scheduler.external` is not
        accepted: use :py:func:`ctgmap.schedule.external.rewrite` instead.
    **kwargs
        Scheduler-specific arguments, e.g. ``random`` and
        ``without_replacement`` for :py:func:`ctgmap.schedule.rand.schedule`.

    Returns
    -------
    :py:class:`ctgmap.model.MappingGraph`
        With ID ``"<ctg_id>_<scheduler_id>"``.

    Raises
    ------
    ValueError
        If task IDs are not unique or the scheduler cannot build a mapping
        graph from scratch.
    :py:exc:`ctgmap.exceptions.SchedulingError`
        If scheduling fails.
    """
    scheduler = Scheduler(scheduler)
    if scheduler not in SCHEDULE_FUNCTIONS:
        raise ValueError(
            "Scheduler {} requires a template mapping graph".format(
                scheduler.name))

    tasks = list(tasks)
    check_unique_ids(tasks)

    assignment = SCHEDULE_FUNCTIONS[scheduler](tasks, cores, **kwargs)
    return build_mapping_graph(assignment,
                               mapping_graph_id(ctg_id, scheduler),
                               ctg_id,
                               UID_STYLES[scheduler])
