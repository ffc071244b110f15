"""Exact ESF(n, α) quantities and vectorised cycle-count sampling.

These functions describe the distribution the samplers target.  They
are reference values for callers who want to check a batch of samples;
nothing in the sampling path calls them.

Cycle count
-----------
Under the Feller Coupling the cycle count is K = Σ_{i<n} B_i with
independent B_i ~ Bernoulli(α / (α + i)), hence

    E[K]   = Σ_{i<n} α / (α + i)
    Var[K] = Σ_{i<n} α·i / (α + i)²

and the pmf of K is the convolution of the n two-point laws.  At α = 1
the mean is the harmonic number H_n.

Ewens Sampling Formula
----------------------
For a cycle type with a_j cycles of length j (Σ j·a_j = n),

    P = n! / α^(n) · Π_j (α / j)^{a_j} / a_j!

where α^(n) = α(α+1)···(α+n−1) is the rising factorial.  The product
is evaluated in log space with ``scipy.special.gammaln`` so large n
neither overflows nor underflows prematurely.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

import numpy as np
from scipy.special import gammaln

from ._config import resolve_rng
from ._errors import check_alpha, check_size
from ._typing import RandomState

# Upper bound on uniforms drawn per vectorised chunk.
_CHUNK_ELEMENTS = 1 << 22


def harmonic_number(n: int) -> float:
    """Return H_n = Σ_{k=1}^{n} 1/k (0 for n = 0)."""
    n = check_size(n)
    return float(np.sum(1.0 / np.arange(1, n + 1)))


def _trial_probabilities(n: int, alpha: float) -> np.ndarray:
    return alpha / (alpha + np.arange(n, dtype=float))


def expected_cycle_count(n: int, alpha: float) -> float:
    """Mean number of cycles of an ESF(n, α) permutation."""
    n = check_size(n)
    alpha = check_alpha(alpha)
    return float(np.sum(_trial_probabilities(n, alpha)))


def cycle_count_variance(n: int, alpha: float) -> float:
    """Variance of the number of cycles of an ESF(n, α) permutation."""
    n = check_size(n)
    alpha = check_alpha(alpha)
    p = _trial_probabilities(n, alpha)
    return float(np.sum(p * (1.0 - p)))


def cycle_count_distribution(n: int, alpha: float) -> np.ndarray:
    """Exact pmf of the cycle count.

    Returns:
        Array of shape ``(n + 1,)`` whose entry k is P(K = k).  Entry 0
        is 1 for n = 0 and 0 otherwise.
    """
    n = check_size(n)
    alpha = check_alpha(alpha)
    pmf = np.ones(1)
    for p in _trial_probabilities(n, alpha):
        pmf = np.convolve(pmf, [1.0 - p, p])
    return pmf


def sample_cycle_counts(
    n: int,
    alpha: float,
    size: int,
    random_state: RandomState = None,
) -> np.ndarray:
    """Draw the cycle counts of *size* independent ESF(n, α) permutations.

    Runs the Feller trials for many samples at once: a ``(rows, n)``
    block of uniforms is compared against the trial probabilities and
    the successes are summed per row.  Only the counts are produced,
    not the permutations.

    Args:
        n: Number of elements (``>= 0``).
        alpha: ESF parameter (``> 0``, finite).
        size: Number of samples (``>= 0``).
        random_state: ``numpy.random.Generator``, integer seed, or
            ``None`` for the process-wide generator.

    Returns:
        Integer array of shape ``(size,)``.

    Raises:
        TypeError: If *random_state* resolves to something other than a
            ``numpy.random.Generator``.
    """
    n = check_size(n)
    alpha = check_alpha(alpha)
    size = check_size(size, name="size")
    rng = resolve_rng(random_state)
    if not isinstance(rng, np.random.Generator):
        raise TypeError(
            "Vectorised sampling needs a numpy.random.Generator, "
            f"got {type(rng).__name__}."
        )

    probs = _trial_probabilities(n, alpha)
    counts = np.empty(size, dtype=np.intp)
    rows = max(1, _CHUNK_ELEMENTS // max(n, 1))
    for start in range(0, size, rows):
        stop = min(start + rows, size)
        draws = rng.random((stop - start, n)) < probs
        counts[start:stop] = draws.sum(axis=1)
    return counts


def cycle_type(cycle_lengths: Sequence[int]) -> tuple[int, ...]:
    """Return the cycle lengths in decreasing order."""
    return tuple(sorted(cycle_lengths, reverse=True))


def esf_probability(cycle_lengths: Sequence[int], alpha: float) -> float:
    """Probability that an ESF(n, α) permutation has the given cycle type.

    Args:
        cycle_lengths: Cycle lengths in any order; n is their sum.
        alpha: ESF parameter (``> 0``, finite).

    Returns:
        The ESF probability of the cycle type (1.0 for the empty type).

    Raises:
        ValueError: If a length is not a positive integer.
    """
    alpha = check_alpha(alpha)
    if any(
        isinstance(j, bool) or not isinstance(j, (int, np.integer)) or j <= 0
        for j in cycle_lengths
    ):
        raise ValueError(
            f"Cycle lengths must be positive integers, got {list(cycle_lengths)}."
        )
    n = int(sum(cycle_lengths))
    multiplicities = Counter(int(j) for j in cycle_lengths)

    log_p = gammaln(n + 1) + gammaln(alpha) - gammaln(alpha + n)
    for j, a_j in multiplicities.items():
        log_p += a_j * (math.log(alpha) - math.log(j)) - gammaln(a_j + 1)
    return float(np.exp(log_p))
