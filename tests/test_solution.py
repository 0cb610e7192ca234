import pytest

from ctgmap.exceptions import \
    MalformedSolutionEncodingError, SolutionEntryNotFoundError

from ctgmap.solution import parse_solution, find_core_id


FADSE_OUTPUT = ("core-0_0=12|core-0_1=32|core-0_2=33|core-0_3=29|"
                "core-1_0=5|core-1_1=26|core-1_2=33|core-1_3=32|core-1_4=8|"
                "core-11_0=7|")


@pytest.mark.parametrize("ctg_id,expected",
                         [("0", {"0": "12", "1": "32", "2": "33", "3": "29"}),
                          ("1", {"0": "5", "1": "26", "2": "33", "3": "32",
                                 "4": "8"}),
                          ("11", {"0": "7"}),
                          ("2", {})])
def test_parse_solution(ctg_id, expected):
    assert parse_solution(FADSE_OUTPUT, ctg_id) == expected


def test_parse_solution_end_of_string():
    # The last entry need not be followed by a separator
    assert parse_solution("core-0_0=12|core-0_1=32", "0") == \
        {"0": "12", "1": "32"}
    assert parse_solution("core-0_1=12", "0") == {"1": "12"}


def test_parse_solution_empty():
    assert parse_solution("", "0") == {}
    assert parse_solution("||", "0") == {}


def test_parse_solution_whitespace():
    # Surrounding whitespace, e.g. a trailing newline, is not part of a value
    assert parse_solution("core-0_0=12 | core-0_1 = 32\n", "0") == \
        {"0": "12", "1": "32"}
    assert parse_solution(" core-0_0=12\t|  |", "0") == {"0": "12"}


def test_parse_solution_first_entry_wins():
    assert parse_solution("core-0_1=12|core-0_1=13", "0") == {"1": "12"}


@pytest.mark.parametrize("solution",
                         ["core-0_0",
                          "core-0_0=",
                          "core-0_0= ",
                          "core-0_0=1 2",
                          "core-0_0 1=12",
                          "core-0_0=1=2",
                          "cpu-0_0=12",
                          "core-0=12",
                          "core-_0=12",
                          "core-0_=12",
                          "core-0_0=12|garbage",
                          # Malformed entries for other CTGs are still fatal
                          "core-0_0=12|core-1_0"])
def test_parse_solution_malformed(solution):
    with pytest.raises(MalformedSolutionEncodingError):
        parse_solution(solution, "0")


def test_find_core_id():
    core_ids = {"0": "12", "1": "32"}
    assert find_core_id(core_ids, "0", "1") == "32"

    with pytest.raises(SolutionEntryNotFoundError) as excinfo:
        find_core_id(core_ids, "0", "2")
    assert excinfo.value.ctg_id == "0"
    assert excinfo.value.uid == "2"
