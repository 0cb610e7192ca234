"""A command-line utility which schedules every CTG of one or more benchmark
applications and saves the resulting mapping graphs.

Installed as "ctgmap-schedule" by setuptools.
"""

import sys
import argparse
import logging
import random

import ctgmap

from ctgmap import benchmark

from ctgmap.documents import load_tasks, load_cores, write_mapping_graph

from ctgmap.exceptions import SchedulingError

from ctgmap.schedule import Scheduler

from ctgmap.wrapper import schedule_mapping_graph


logger = logging.getLogger(__name__.split(".")[-1])


"""Command line names of the schedulers this tool may use."""
SCHEDULERS = {
    "random": Scheduler.random,
    "direct": Scheduler.direct,
    "min-exec-time": Scheduler.min_exec_time,
}


def configure_logging(verbosity):
    """Log to stderr at WARNING, INFO or DEBUG level depending on how many
    times --verbose was given.
    """
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity,
                                                     logging.DEBUG)
    logging.basicConfig(level=level,
                        format="%(levelname)s %(name)s: %(message)s")


def schedule_application(application, scheduler, **kwargs):
    """Schedule every CTG of an application, writing a mapping graph for
    each.

    Generates
    ---------
    (ctg_id, filename)
        For every CTG as its mapping graph is saved.

    Raises
    ------
    :py:exc:`ctgmap.exceptions.SchedulingError`
        On the first CTG which could not be scheduled. No mapping graph is
        written for that CTG.
    """
    cores = load_cores(benchmark.cores_dir(application))
    for ctg_id in benchmark.ctg_ids(application):
        logger.info("Scheduling CTG %s of %s with the %s scheduler",
                    ctg_id, application, scheduler.name)
        tasks = load_tasks(benchmark.tasks_dir(application, ctg_id))
        mapping_graph = schedule_mapping_graph(tasks, cores, ctg_id,
                                               scheduler, **kwargs)

        filename = benchmark.mapping_graph_path(application, ctg_id,
                                                scheduler)
        logger.info("Saving the mapping graph %s", filename)
        write_mapping_graph(mapping_graph, filename)
        yield (ctg_id, filename)


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Map the tasks of every CTG in benchmark applications "
                    "onto cores")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(ctgmap.__version__))

    parser.add_argument("scheduler", choices=sorted(SCHEDULERS),
                        help="the scheduling algorithm to use")
    parser.add_argument("application", nargs="+",
                        help="benchmark application directory (containing "
                             "'cores' and 'ctg-*' directories)")

    parser.add_argument("--seed", "-s", type=int,
                        help="seed for the random scheduler")
    parser.add_argument("--with-replacement", action="store_true",
                        help="allow the random scheduler to assign many "
                             "tasks to the same core")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="log progress (repeat for more detail)")

    args = parser.parse_args(args)

    scheduler = SCHEDULERS[args.scheduler]
    if scheduler is Scheduler.random:
        kwargs = {"random": random.Random(args.seed),
                  "without_replacement": not args.with_replacement}
    elif args.seed is not None or args.with_replacement:
        parser.error("--seed and --with-replacement only apply to the "
                     "random scheduler")
    else:
        kwargs = {}

    configure_logging(args.verbose)

    return_code = 0
    for application in args.application:
        try:
            for ctg_id, filename in schedule_application(application,
                                                         scheduler, **kwargs):
                print(filename)
        except (SchedulingError, ValueError, OSError) as e:
            sys.stderr.write("{}: error: {}: {}\n".format(
                parser.prog, application, e))
            return_code = 1

    return return_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
