from pathlib import Path

import pytest

from partisanvm.output import result_directory, write_rows, write_single_vector


def _read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def test_result_directory_nests_and_creates(tmp_path):
    directory = result_directory(tmp_path, ["a", "b", "epsilon=0.1"])
    assert directory == tmp_path / "a" / "b" / "epsilon=0.1"
    assert directory.is_dir()


def test_result_directory_is_idempotent(tmp_path):
    first = result_directory(tmp_path, ["x"])
    second = result_directory(tmp_path, ["x"])
    assert first == second
    assert second.is_dir()


def test_single_vector_round_trip(tmp_path):
    values = [0.0, 0.25, 1e-12, 3.0]
    path = write_single_vector(values, tmp_path, ["run"], "q")
    assert path.parent == tmp_path / "run"
    assert [float(line) for line in _read_lines(path)] == values


def test_rows_round_trip(tmp_path):
    rows = [(0.1, 2.5), (0.2, 7.0)]
    path = write_rows(rows, tmp_path, ["p", "r"], "times")
    parsed = [tuple(float(v) for v in line.split(",")) for line in _read_lines(path)]
    assert parsed == rows


def test_overwrites_existing_file(tmp_path):
    write_single_vector([1.0, 2.0, 3.0], tmp_path, [], "v")
    path = write_single_vector([4.0], tmp_path, [], "v")
    assert [float(line) for line in _read_lines(path)] == [4.0]


@pytest.mark.parametrize("name", ["", "a/b"])
def test_invalid_name_rejected(tmp_path, name):
    with pytest.raises(ValueError):
        write_single_vector([1.0], tmp_path, [], name)