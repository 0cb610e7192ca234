"""File layout of E3S-style benchmark applications.

An application directory (e.g. ``e3s/telecom-mocsyn.tgff``) contains::

    cores/*.xml                             the core library
    ctg-<ctg_id>/tasks/*.xml                the tasks of each CTG
    ctg-<ctg_id>/apcg-<ctg_id>_<sid>.xml    mapping graphs, by scheduler ID

Directories for merged CTGs (named like ``ctg-0+1``) are not scheduled
individually and are ignored.
"""

import os

CTG_PREFIX = "ctg-"


def ctg_ids(application):
    """List the IDs of the (non-merged) CTGs of an application, sorted."""
    return sorted(
        name[len(CTG_PREFIX):] for name in os.listdir(application)
        if (name.startswith(CTG_PREFIX) and "+" not in name and
            os.path.isdir(os.path.join(application, name))))


def ctg_dir(application, ctg_id):
    return os.path.join(application, CTG_PREFIX + ctg_id)


def tasks_dir(application, ctg_id):
    return os.path.join(ctg_dir(application, ctg_id), "tasks")


def cores_dir(application):
    return os.path.join(application, "cores")


def mapping_graph_path(application, ctg_id, scheduler_id):
    """The file name of the mapping graph of a CTG made by a scheduler."""
    return os.path.join(ctg_dir(application, ctg_id),
                        "apcg-{}_{}.xml".format(ctg_id, int(scheduler_id)))
