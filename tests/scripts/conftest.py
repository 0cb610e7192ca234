import pytest


TASK_XML = "<task><ID>{}</ID><type>{}</type></task>"

PROFILE_XML = ("<task><type>{}</type><execTime>{}</execTime>"
               "<power>{}</power></task>")


def core_xml(id, profiles):
    return "<core><ID>{}</ID><name>core {}</name>{}</core>".format(
        id, id, "".join(PROFILE_XML.format(*p) for p in profiles))


@pytest.fixture
def application(tmpdir):
    """A small benchmark application with two CTGs (and a merged CTG which
    should be ignored) and three cores.
    """
    app = tmpdir.mkdir("app.tgff")

    cores = app.mkdir("cores")
    cores.join("0.xml").write(core_xml("0", [("a", 3.0, 1.0),
                                             ("b", 1.0, 2.0)]))
    cores.join("1.xml").write(core_xml("1", [("a", 1.0, 3.0),
                                             ("b", 0.0, 0.0)]))
    cores.join("2.xml").write(core_xml("2", [("a", 2.0, 4.0),
                                             ("b", 2.0, 5.0)]))

    for ctg_id, tasks in [("0", [("0", "a"), ("1", "b")]),
                          ("1", [("0", "b"), ("1", "a"), ("2", "a")]),
                          ("0+1", [])]:
        tasks_dir = app.mkdir("ctg-" + ctg_id).mkdir("tasks")
        for task_id, task_type in tasks:
            tasks_dir.join(task_id + ".xml").write(
                TASK_XML.format(task_id, task_type))

    return app
