"""Fixation times of the partisan voter model with zealots."""

from __future__ import annotations

import math
import random
from os import PathLike
from pathlib import Path

from partisanvm.output import write_rows

_Z_POINTS = 25


def integer_linspace(start: int, stop: int, num: int) -> list[int]:
    """Return ``num`` integers evenly spaced from ``start`` to ``stop`` inclusive."""
    if num < 0:
        raise ValueError(f"number of points must not be negative, got {num}")
    if num == 0:
        return []
    if num == 1:
        return [start]
    step = (stop - start) / (num - 1)
    return [int(round(start + index * step)) for index in range(num)]


def _uniform(rng: random.Random) -> float:
    """Uniform draw in (0, 1], safe to take the logarithm of."""
    return 1.0 - rng.random()


def fixation_time(
    epsilon: float, n: int, zealots: int, max_time: float, rng: random.Random
) -> float | None:
    """Run one Gillespie simulation; return the fixation time or ``None``.

    All zealots hold the + state. Free agents start in the - state, split as
    evenly as possible between + and - preference. ``None`` means no
    fixation happened before ``max_time``.
    """
    if n < 2:
        raise ValueError(f"population size must be at least 2, got {n}")
    if not 0 <= zealots < n:
        raise ValueError(f"zealot count must lie in [0, {n}), got {zealots}")

    susceptible = n - zealots
    plus_pref = susceptible // 2
    minus_pref = susceptible - plus_pref
    n_inv = 1.0 / (n - 1.0)
    up = n_inv * (1 + epsilon) * 0.5
    down = n_inv * (1 - epsilon) * 0.5

    npp = 0  # + state, prefers +
    npm = 0  # + state, prefers -
    nmp = plus_pref
    nmm = minus_pref

    def rates() -> tuple[float, float, float, float]:
        plus_total = npp + npm + zealots
        minus_total = nmp + nmm
        return (
            nmp * plus_total * up,
            npp * minus_total * down,
            npm * minus_total * up,
            nmm * plus_total * down,
        )

    r_pp, r_mp, r_pm, r_mm = rates()
    total = r_pp + r_mp + r_pm + r_mm
    t = 0.0
    while t < max_time:
        t += -math.log(_uniform(rng)) / total

        r2 = _uniform(rng) * total
        if r2 <= r_pp:
            npp += 1
            nmp -= 1
        elif r2 <= r_pp + r_mp:
            npp -= 1
            nmp += 1
        elif r2 <= r_pp + r_mp + r_pm:
            nmm += 1
            npm -= 1
        else:
            nmm -= 1
            npm += 1

        if npp + npm == susceptible:
            return t

        r_pp, r_mp, r_pm, r_mm = rates()
        total = r_pp + r_mp + r_pm + r_mm
        if total <= 0.0:
            return None
    return None


def average_fixation_times_against_z(
    epsilon: float,
    n: int,
    number_of_sims: int = 10_000,
    max_time: float = 1e7,
    seed: int | None = None,
) -> list[tuple[float, float]]:
    """Average fixation time for 25 zealot counts between 1 and n/2.

    Returns ``(zealots / n, average time)`` pairs; the average is 0 when no
    run reached fixation.
    """
    master = random.Random(seed)
    results: list[tuple[float, float]] = []
    for zealots in integer_linspace(1, int(n / 2), _Z_POINTS):
        rng = random.Random(master.getrandbits(64))
        times = [
            time
            for time in (
                fixation_time(epsilon, n, zealots, max_time, rng)
                for _ in range(number_of_sims)
            )
            if time is not None
        ]
        average = sum(times) / len(times) if times else 0.0
        results.append((zealots / n, average))
    return results


def write_average_fixation_times(
    epsilon: float,
    n: int,
    base: str | PathLike[str],
    number_of_sims: int = 10_000,
    max_time: float = 1e7,
    seed: int | None = None,
) -> Path:
    """Compute average fixation times against zealot density and write them."""
    rows = average_fixation_times_against_z(epsilon, n, number_of_sims, max_time, seed)
    folder_names = ["partisan", "average_fixation_times_against_z", f"epsilon={epsilon:g}"]
    return write_rows(rows, base, folder_names, "average_fixation_times")