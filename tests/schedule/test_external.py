import pytest

from ctgmap.exceptions import \
    SolutionEntryNotFoundError, MalformedSolutionEncodingError, \
    UnknownCoreError, UnknownTaskError, NoCoreSupportsTaskTypeError

from ctgmap.model import \
    Task, Core, Profile, MappingGraph, CoreInstance, TaskInstance

from ctgmap.schedule.external import rewrite


TASKS = [Task("0", "fft"), Task("1", "idct"), Task("2", "fft")]

CORES = [
    Core("5", "dsp", [Profile("fft", 1.0, 10.0), Profile("idct", 2.0, 20.0)]),
    Core("12", "arm", [Profile("fft", 3.0, 30.0),
                       Profile("idct", 4.0, 40.0)]),
    Core("32", "risc", [Profile("idct", 0.0, 0.0)]),
]

TEMPLATE = MappingGraph("0_1", "0", [
    CoreInstance("5", "0", [TaskInstance("0", 1.0, 10.0)]),
    CoreInstance("5", "1", [TaskInstance("1", 2.0, 20.0),
                            TaskInstance("2", 1.0, 10.0)]),
])


def test_rewrite():
    mg = rewrite(TEMPLATE, "core-0_0=5|core-0_1=12", "0", TASKS, CORES)
    assert mg == MappingGraph("0_3", "0", [
        CoreInstance("5", "0", [TaskInstance("0", 1.0, 10.0)]),
        CoreInstance("12", "1", [TaskInstance("1", 4.0, 40.0),
                                 TaskInstance("2", 3.0, 30.0)]),
    ])

    # The template is left alone
    assert TEMPLATE.cores[1].core_id == "5"


def test_rewrite_other_ctgs_ignored():
    solution = "core-1_0=32|core-0_1=12|core-1_1=32|core-0_0=12|"
    mg = rewrite(TEMPLATE, solution, "0", TASKS, CORES)
    assert [c.core_id for c in mg.cores] == ["12", "12"]
    assert [c.uid for c in mg.cores] == ["0", "1"]


def test_rewrite_decoded_solution():
    mg = rewrite(TEMPLATE, {"0": "12", "1": "12"}, "0", TASKS, CORES)
    assert mg.id == "0_3"
    assert [c.core_id for c in mg.cores] == ["12", "12"]


def test_rewrite_zero_profile():
    template = MappingGraph("0_1", "0", [
        CoreInstance("5", "0", [TaskInstance("1", 2.0, 20.0)])])
    mg = rewrite(template, "core-0_0=32", "0", TASKS, CORES)
    assert mg.cores[0] == CoreInstance("32", "0", [TaskInstance("1", 0, 0)])


def test_missing_entry():
    with pytest.raises(SolutionEntryNotFoundError) as excinfo:
        rewrite(TEMPLATE, "core-0_0=12|core-1_1=12", "0", TASKS, CORES)
    assert excinfo.value.ctg_id == "0"
    assert excinfo.value.uid == "1"


def test_malformed():
    with pytest.raises(MalformedSolutionEncodingError):
        rewrite(TEMPLATE, "core-0_0=12|core-0_1", "0", TASKS, CORES)


def test_unknown_core():
    with pytest.raises(UnknownCoreError) as excinfo:
        rewrite(TEMPLATE, "core-0_0=12|core-0_1=99", "0", TASKS, CORES)
    assert excinfo.value.core_id == "99"


def test_unknown_task():
    with pytest.raises(UnknownTaskError) as excinfo:
        rewrite(TEMPLATE, "core-0_0=12|core-0_1=12", "0", TASKS[:1], CORES)
    assert excinfo.value.task_id == "1"


def test_unsupported_task_type():
    # Core 32 cannot run fft
    with pytest.raises(NoCoreSupportsTaskTypeError) as excinfo:
        rewrite(TEMPLATE, "core-0_0=32|core-0_1=12", "0", TASKS, CORES)
    assert excinfo.value.core_id == "32"
    assert excinfo.value.task_type == "fft"
