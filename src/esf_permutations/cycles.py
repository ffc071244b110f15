"""Cycle-length sampling via the Feller Coupling.

The Ewens Sampling Formula ESF(n, α) assigns each permutation of
``{1, …, n}`` a probability proportional to α^K, where K is its number
of cycles.  Small α favours few long cycles; large α favours many short
ones; α = 1 is the uniform distribution on S_n.

Feller Coupling
---------------
Run n independent trials.  Trial i (0-based, counting the trials
already completed) succeeds with probability

    p_i = α / (α + i)

A success opens a new cycle of length 1; a failure extends the most
recently opened cycle by one element.  Trial 0 has p_0 = 1, so the
first trial always opens the first cycle.  The lengths, in order of
discovery, form a composition of n whose cycle type is ESF(n, α)
distributed, and the cycle count K is a sum of independent
Bernoulli(p_i) variables with mean Σ_i α / (α + i).

The index in the denominator must stay 0-based.  Shifting it to
``i + 1`` yields a different (and wrong) distribution.
"""

from __future__ import annotations

from ._config import resolve_rng
from ._errors import check_alpha, check_size
from ._typing import RandomState


def sample_cycle_lengths(
    n: int,
    alpha: float,
    random_state: RandomState = None,
) -> list[int]:
    """Sample the cycle lengths of an ESF(n, α) permutation.

    Args:
        n: Number of elements (``>= 0``).
        alpha: ESF parameter (``> 0``, finite).
        random_state: Random source, integer seed, or ``None`` for the
            process-wide generator.

    Returns:
        Positive integers summing to *n*, in order of discovery.
        Empty when ``n == 0``; exactly ``[1]`` when ``n == 1``.

    Raises:
        InvalidSizeError: If *n* is negative.
        InvalidParameterError: If *alpha* is not a positive finite real.
    """
    n = check_size(n)
    alpha = check_alpha(alpha)
    rng = resolve_rng(random_state)

    lengths: list[int] = []
    for i in range(n):
        # p_0 == 1 and random() < 1, so lengths is non-empty before
        # the first extension.
        if rng.random() < alpha / (alpha + i):
            lengths.append(1)
        else:
            lengths[-1] += 1
    return lengths
