import random

import pytest

from partisanvm.partisan import (
    average_fixation_times_against_z,
    fixation_time,
    integer_linspace,
    write_average_fixation_times,
)


def test_linspace_consecutive():
    assert integer_linspace(1, 5, 5) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("start,stop,num", [(1, 50, 25), (3, 17, 4), (1, 2, 25)])
def test_linspace_endpoints_and_order(start, stop, num):
    values = integer_linspace(start, stop, num)
    assert len(values) == num
    assert values[0] == start
    assert values[-1] == stop
    assert values == sorted(values)


def test_linspace_single_and_empty():
    assert integer_linspace(7, 9, 1) == [7]
    assert integer_linspace(7, 9, 0) == []


def test_linspace_negative_count():
    with pytest.raises(ValueError):
        integer_linspace(1, 2, -1)


def test_fixation_time_reproducible_and_positive():
    a = fixation_time(0.1, 20, 3, 1e7, random.Random(5))
    b = fixation_time(0.1, 20, 3, 1e7, random.Random(5))
    assert a == b
    assert a > 0.0


def test_fixation_time_zero_horizon():
    assert fixation_time(0.1, 20, 3, 0.0, random.Random(1)) is None


@pytest.mark.parametrize("n,zealots", [(10, 10), (10, -1), (1, 0)])
def test_fixation_time_invalid(n, zealots):
    with pytest.raises(ValueError):
        fixation_time(0.1, n, zealots, 10.0, random.Random(0))


def test_average_shape_and_densities():
    n = 40
    results = average_fixation_times_against_z(0.2, n, number_of_sims=3, seed=11)
    assert len(results) == 25
    densities = [d for d, _ in results]
    assert densities[0] == 1 / n
    assert densities[-1] == (n // 2) / n
    assert all(time > 0.0 for _, time in results)


def test_average_reproducible():
    first = average_fixation_times_against_z(0.0, 12, number_of_sims=2, seed=4)
    second = average_fixation_times_against_z(0.0, 12, number_of_sims=2, seed=4)
    assert first == second


def test_average_zero_when_never_fixed():
    results = average_fixation_times_against_z(0.1, 12, number_of_sims=2, max_time=0.0, seed=0)
    assert all(time == 0.0 for _, time in results)


def test_write_average(tmp_path):
    path = write_average_fixation_times(0.5, 10, tmp_path, number_of_sims=2, seed=3)
    assert path == (
        tmp_path / "partisan" / "average_fixation_times_against_z"
        / "epsilon=0.5" / "average_fixation_times.txt"
    )
    rows = [
        tuple(float(v) for v in line.split(","))
        for line in path.read_text(encoding="utf-8").splitlines()
    ]
    assert rows == average_fixation_times_against_z(0.5, 10, number_of_sims=2, seed=3)