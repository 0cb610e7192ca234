"""A command-line utility which rewrites previously generated mapping graphs
of a benchmark application according to an external solution string.

Installed as "ctgmap-rewrite" by setuptools.
"""

import sys
import argparse

import ctgmap

from ctgmap import benchmark

from ctgmap.documents import \
    load_tasks, load_cores, read_mapping_graph, write_mapping_graph

from ctgmap.exceptions import SchedulingError

from ctgmap.schedule import Scheduler

from ctgmap.schedule.external import rewrite

from ctgmap.scripts.ctgmap_schedule import configure_logging


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Change the core types of the mapping graphs of a "
                    "benchmark application using an external solution")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(ctgmap.__version__))

    parser.add_argument("application",
                        help="benchmark application directory (containing "
                             "'cores' and 'ctg-*' directories)")
    parser.add_argument("template", type=int,
                        help="ID of the scheduler which produced the "
                             "template mapping graphs")
    parser.add_argument("solution",
                        help="external solution, e.g. "
                             "'core-0_0=12|core-0_1=32|core-1_0=5'")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="log progress (repeat for more detail)")

    args = parser.parse_args(args)

    configure_logging(args.verbose)

    try:
        cores = load_cores(benchmark.cores_dir(args.application))
        for ctg_id in benchmark.ctg_ids(args.application):
            tasks = load_tasks(benchmark.tasks_dir(args.application, ctg_id))
            template = read_mapping_graph(benchmark.mapping_graph_path(
                args.application, ctg_id, args.template))

            mapping_graph = rewrite(template, args.solution, ctg_id,
                                    tasks, cores)

            filename = benchmark.mapping_graph_path(
                args.application, ctg_id, Scheduler.external)
            write_mapping_graph(mapping_graph, filename)
            print(filename)
    except (SchedulingError, ValueError, OSError) as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, e))
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
