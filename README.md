# partisanvm

Tools for studying the partisan voter model in finite populations: stochastic
simulations of fixation with zealots, and the quasi-stationary distribution of
the model without zealots, computed by an exact recursion, by a product
approximation, and by simulation.

The package uses only the Python standard library and is meant to be used
from Python.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Fixation times with zealots

`partisanvm.partisan` simulates the model with `zealots` agents fixed in the
`+` state. Every other agent starts in the `-` state, split as evenly as
possible between `+` and `-` preference. A run ends when all of them hold `+`.

```python
import random
from partisanvm.partisan import (
    fixation_time,
    average_fixation_times_against_z,
    write_average_fixation_times,
)

rng = random.Random(1)
t = fixation_time(epsilon=0.1, n=50, zealots=5, max_time=1e7, rng=rng)
# t is the fixation time, or None if fixation did not happen before max_time

# Average over many runs for 25 zealot counts between 1 and n/2;
# a list of (zealots / n, average time) pairs, the average 0.0 if no run fixed
results = average_fixation_times_against_z(
    epsilon=0.1, n=50, number_of_sims=200, max_time=1e7, seed=1
)

# The same, written to
# <base>/partisan/average_fixation_times_against_z/epsilon=0.1/average_fixation_times.txt
path = write_average_fixation_times(
    epsilon=0.1, n=50, base="data", number_of_sims=200, max_time=1e7, seed=1
)
```

The defaults are `number_of_sims=10_000` and `max_time=1e7`.
`integer_linspace(start, stop, num)` gives the evenly spaced, inclusive
integer grid used for the zealot counts.

## Quasi-stationary distribution without zealots

`partisanvm.partisan_no_zealots` works with the one-step rates `W+` and `W-`
for every state `j = 0 … N`; the states 0 and N absorb.

```python
from partisanvm.partisan_no_zealots import (
    calculate_all_wplus,
    calculate_all_wminus,
    recursive_quasi_stationary,
    nifty_quasi_stationary,
    quasi_stationary_dist_analytic,
    simulate_quasi_stationary,
    quasi_stationary_dist_simulation,
)

n, eps = 100, 0.05
wplus = calculate_all_wplus(n, eps)
wminus = calculate_all_wminus(n, eps)

flat = [0.0] + [1.0 / (n - 1)] * (n - 1) + [0.0]
result = recursive_quasi_stationary(flat, wplus, wminus, 10_000, 1e-10, n)
q_exact = result.distribution      # also result.iterations, result.converged

q_approx = nifty_quasi_stationary(wplus, wminus, n)

q_sim = simulate_quasi_stationary(eps, n, number_of_sims=1000, max_time=1000, seed=2)
```

`recursive_quasi_stationary` stops once the L1 change between iterations is at
most `tolerance`, or after `max_iter` iterations. `simulate_quasi_stationary`
starts each run at `j = N/2` and returns the frequencies of the final state
among runs that have not been absorbed by `max_time` (all zeros if none
survive); its defaults are `number_of_sims=100_000` and `max_time=1000.0`.

`quasi_stationary_dist_analytic(epsilon, n, base)` runs the recursion from a
flat start (10 000 iterations at most, tolerance `1e-10`) and the product
approximation, prints whether the recursion converged, writes both and returns
both. `quasi_stationary_dist_simulation(epsilon, n, base, ...)` writes and
returns the simulated estimate. Files go under
`<base>/partisan_no_zealots/quasi_stationary_distribution/epsilon=<eps>/`
as `q_recursive_partisan_no_zealots.txt`, `q_nifty_partisan_no_zealots.txt`
and `q_sim_partisan_no_zealots.txt`.

## Output

`partisanvm.output` creates nested result folders (`result_directory`) and
writes plain `.txt` data files: `write_single_vector` puts one value per line
and `write_rows` one row per line with values separated by `, `. Both return
the path of the written file.

## Random-number helpers

`partisanvm.pcgbits` holds integer utilities of the kind used by permuted
congruential generators, with the word width passed in bits: rotations
(`rotl`, `rotr`), `unxorshift`, `uneven_copy` between word sizes, unbiased
`bounded_rand` and in-place `shuffle`, 128-bit formatting and parsing
(`format_uint128`, `parse_uint128`), a text-derived `arbitrary_seed`, and
`SeedSeqFrom`, a seed sequence fed by another generator.

## What the package does not do

There is no command-line program; everything is called from Python. The
simulations run one after another in a single process, with no progress
display, and draw their random numbers from Python's `random.Random`;
`partisanvm.pcgbits` offers helper routines but no complete generator.