"""Quasi-stationary distribution of the partisan voter model without zealots.

States are indexed by ``j = N(delta + 1/2)`` from 0 to N; 0 and N absorb.
"""

from __future__ import annotations

import math
import random
from collections import Counter
from itertools import accumulate
from os import PathLike
from typing import NamedTuple

from partisanvm.output import write_single_vector

_FOLDER = ("partisan_no_zealots", "quasi_stationary_distribution")


class RecursiveResult(NamedTuple):
    """Outcome of the recursive solve."""

    distribution: list[float]
    iterations: int
    converged: bool


def _check_size(n: int) -> int:
    size = int(n)
    if size < 2:
        raise ValueError(f"population size must be at least 2, got {n}")
    return size


def calculate_all_wplus(n: int, epsilon: float) -> list[float]:
    """Rate of moving up from each state j = 0..N."""
    size = _check_size(n)
    eps2 = epsilon**2
    return [
        (1.0 - j / size) * j * (1.0 - 2.0 * eps2 * j / size) for j in range(size + 1)
    ]


def calculate_all_wminus(n: int, epsilon: float) -> list[float]:
    """Rate of moving down from each state j = 0..N."""
    size = _check_size(n)
    eps2 = epsilon**2
    return [
        (1.0 - j / size) * j * (1.0 - 2.0 * eps2 * (1.0 - j / size))
        for j in range(size + 1)
    ]


def _normalised_interior(values: list[float], size: int) -> list[float]:
    norm = sum(values[1:size])
    return [0.0] + [v / norm for v in values[1:size]] + [0.0]


def recursive_quasi_stationary(
    q: list[float],
    wplus: list[float],
    wminus: list[float],
    max_iter: int,
    tolerance: float,
    n: int,
) -> RecursiveResult:
    """Iterate the exact recursion from the initial distribution ``q``.

    Stops when the L1 change drops to ``tolerance`` or after ``max_iter``
    iterations; at least one iteration is always done.
    """
    size = _check_size(n)
    if len(q) != size + 1:
        raise ValueError(f"distribution must have {size + 1} entries, got {len(q)}")
    interior = range(1, size)
    alpha = {k: wplus[k - 1] / wminus[k] for k in interior}
    beta = {k: wminus[1] / wminus[k] for k in interior}
    gamma = {k: wplus[size - 1] / wminus[k] for k in interior}

    current = list(q)
    iterations = 0
    while True:
        cum = list(accumulate(current))
        edge = current[size - 1]
        raw = [0.0] * (size + 1)
        for k in interior:
            raw[k] = (
                alpha[k] * current[k - 1]
                - gamma[k] * edge
                + (beta[k] * current[1] + gamma[k] * edge) * (1.0 - cum[k - 1])
            )
        updated = _normalised_interior(raw, size)
        diff = sum(abs(new - old) for new, old in zip(updated[:size], current[:size]))
        current = updated
        iterations += 1
        if not (diff > tolerance and iterations < max_iter):
            break
    return RecursiveResult(current, iterations, iterations < max_iter)


def nifty_quasi_stationary(wplus: list[float], wminus: list[float], n: int) -> list[float]:
    """Approximate the distribution by the product of successive rate ratios."""
    size = _check_size(n)
    raw = [0.0] * (size + 1)
    product = 1.0
    for k in range(1, size):
        if k > 1:
            product *= wplus[k - 1] / wminus[k]
        raw[k] = product
    return _normalised_interior(raw, size)


def quasi_stationary_dist_analytic(
    epsilon: float, n: int, base: str | PathLike[str]
) -> tuple[list[float], list[float]]:
    """Solve recursively and by the product approximation, write both, return both."""
    size = _check_size(n)
    folder_names = [*_FOLDER, f"epsilon={epsilon:g}"]
    flat = [0.0] + [1.0 / (size - 1.0)] * (size - 1) + [0.0]
    wplus = calculate_all_wplus(size, epsilon)
    wminus = calculate_all_wminus(size, epsilon)

    result = recursive_quasi_stationary(flat, wplus, wminus, 10_000, 1e-10, size)
    print("Recursive converged!" if result.converged else "Recursive failed to converge")

    q_nifty = nifty_quasi_stationary(wplus, wminus, size)
    write_single_vector(result.distribution, base, folder_names, "q_recursive_partisan_no_zealots")
    write_single_vector(q_nifty, base, folder_names, "q_nifty_partisan_no_zealots")
    return result.distribution, q_nifty


def simulate_quasi_stationary(
    epsilon: float,
    n: int,
    number_of_sims: int = 100_000,
    max_time: float = 1000.0,
    seed: int | None = None,
) -> list[float]:
    """Estimate the distribution from runs that survive until ``max_time``.

    Each run starts at j = N/2. Returns frequencies over j = 0..N of the
    final state among surviving runs (all zeros if none survive).
    """
    size = _check_size(n)
    wplus = calculate_all_wplus(size, epsilon)
    wminus = calculate_all_wminus(size, epsilon)
    rng = random.Random(seed)
    survivors: Counter[int] = Counter()

    for _ in range(number_of_sims):
        state = size // 2
        t = 0.0
        while t < max_time:
            up, down = wplus[state], wminus[state]
            total = up + down
            t += -math.log(1.0 - rng.random()) / total
            state += 1 if (1.0 - rng.random()) <= up / total else -1
            if state in (0, size):
                break
        if 0 < state < size:
            survivors[state] += 1

    survived = sum(survivors.values())
    return [survivors[k] / survived if 0 < k < size and survived else 0.0 for k in range(size + 1)]


def quasi_stationary_dist_simulation(
    epsilon: float,
    n: int,
    base: str | PathLike[str],
    number_of_sims: int = 100_000,
    max_time: float = 1000.0,
    seed: int | None = None,
) -> list[float]:
    """Estimate the distribution by simulation, write it and return it."""
    dist = simulate_quasi_stationary(epsilon, n, number_of_sims, max_time, seed)
    folder_names = [*_FOLDER, f"epsilon={epsilon:g}"]
    write_single_vector(dist, base, folder_names, "q_sim_partisan_no_zealots")
    return dist