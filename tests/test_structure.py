import json

import pytest

from gremlins.mutator import MutatorType
from gremlins.structure import (
    Mutation,
    MutatorStatistics,
    OutputFile,
    OutputResult,
)


def _sample_result():
    stats = MutatorStatistics()
    stats.increment(MutatorType.CONDITIONALS_NEGATION)
    stats.increment(MutatorType.ARITHMETIC_BASE)
    stats.increment(MutatorType.ARITHMETIC_BASE)
    return OutputResult(
        go_module="example.com/go/module",
        files=[
            OutputFile(
                "file1.go",
                [
                    Mutation("CONDITIONALS_NEGATION", "KILLED", 10, 3),
                    Mutation("ARITHMETIC_BASE", "LIVED", 20, 8),
                ],
            ),
            OutputFile("file2.go", [Mutation("ARITHMETIC_BASE", "NOT COVERED", 40, 7)]),
        ],
        test_efficacy=50.0,
        mutations_coverage=66.5,
        mutants_total=2,
        mutants_killed=1,
        mutants_lived=1,
        mutants_not_viable=0,
        mutants_not_covered=1,
        elapsed_time=142.0,
        mutator_statistics=stats,
    )


def test_mutation_dict_keys():
    data = Mutation("INVERT_BITWISE", "LIVED", 100, 3).to_dict()
    assert data == {"type": "INVERT_BITWISE", "status": "LIVED", "line": 100, "column": 3}


def test_mutation_round_trip():
    m = Mutation("INVERT_LOGICAL", "KILLED", 11, 4)
    assert Mutation.from_dict(m.to_dict()) == m


def test_output_file_uses_file_name_key():
    data = OutputFile("file3.go", [Mutation("INVERT_NEGATIVES", "NOT VIABLE", 200, 4)]).to_dict()
    assert data["file_name"] == "file3.go"
    assert data["mutations"][0]["status"] == "NOT VIABLE"


def test_output_file_round_trip():
    f = OutputFile("file3.go", [Mutation("REMOVE_SELF_ASSIGNMENTS", "KILLED", 100, 4)])
    assert OutputFile.from_dict(f.to_dict()) == f


def test_output_file_null_mutations():
    assert OutputFile.from_dict({"file_name": "a.go", "mutations": None}).mutations == []


@pytest.mark.parametrize("mutator_type", list(MutatorType))
def test_statistics_increment_each_type(mutator_type):
    stats = MutatorStatistics()
    stats.increment(mutator_type)
    stats.increment(mutator_type)
    data = stats.to_dict()
    assert list(data.values()) == [2]
    assert sum(MutatorStatistics.from_dict(data).to_dict().values()) == 2


def test_statistics_json_names():
    stats = MutatorStatistics()
    stats.increment(MutatorType.INVERT_BITWISE_ASSIGNMENTS)
    stats.increment(MutatorType.INVERT_LOOP_CTRL)
    assert stats.to_dict() == {"invert_bitwise_assignments": 1, "invert_loop_ctrl": 1}


def test_statistics_omit_zero_counters():
    assert MutatorStatistics().to_dict() == {}


def test_statistics_from_empty_dict_is_all_zero():
    assert MutatorStatistics.from_dict({}) == MutatorStatistics()


def test_output_result_round_trip_through_dict():
    result = _sample_result()
    assert OutputResult.from_dict(result.to_dict()) == result


def test_output_result_round_trip_through_json():
    result = _sample_result()
    assert OutputResult.from_dict(json.loads(result.to_json())) == result


def test_output_result_json_keys():
    data = json.loads(_sample_result().to_json())
    assert set(data) == {
        "go_module",
        "files",
        "test_efficacy",
        "mutations_coverage",
        "mutants_total",
        "mutants_killed",
        "mutants_lived",
        "mutants_not_viable",
        "mutants_not_covered",
        "elapsed_time",
        "mutator_statistics",
    }
    assert data["go_module"] == "example.com/go/module"


def test_output_result_json_is_compact():
    text = _sample_result().to_json()
    assert ", " not in text
    assert ": " not in text


def test_output_result_from_partial_dict():
    result = OutputResult.from_dict({"go_module": "example.com/go/module", "files": None})
    assert result.files == []
    assert result.mutator_statistics == MutatorStatistics()
    assert result.mutants_total == 0