import os

from ctgmap import benchmark


def test_ctg_ids(tmpdir):
    for name in ["ctg-0", "ctg-1", "ctg-0+1", "ctg-10", "cores"]:
        tmpdir.mkdir(name)
    tmpdir.join("ctg-2").write("not a directory")
    assert benchmark.ctg_ids(str(tmpdir)) == ["0", "1", "10"]


def test_paths():
    app = os.path.join("e3s", "telecom-mocsyn.tgff")
    assert benchmark.cores_dir(app) == os.path.join(app, "cores")
    assert benchmark.tasks_dir(app, "3") == \
        os.path.join(app, "ctg-3", "tasks")
    assert benchmark.mapping_graph_path(app, "3", 2) == \
        os.path.join(app, "ctg-3", "apcg-3_2.xml")
    assert benchmark.mapping_graph_path(app, "3", "1") == \
        os.path.join(app, "ctg-3", "apcg-3_1.xml")
