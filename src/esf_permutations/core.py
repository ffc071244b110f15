"""Sampling of ESF-distributed permutations.

A permutation is built in three independent steps:

1. **Cycle lengths** — the Feller Coupling draws an ordered
   composition of n whose cycle type follows ESF(n, α)
   (:func:`~esf_permutations.cycles.sample_cycle_lengths`).
2. **Labels** — a Fisher–Yates shuffle draws a uniform arrangement of
   ``1..n`` (:func:`~esf_permutations.permutations.uniform_permutation`).
3. **Cycles** — the arrangement is cut, left to right, into groups of
   the sampled lengths and written in disjoint-cycle notation
   (:func:`~esf_permutations.notation.format_cycle_notation`).

Cutting a uniform arrangement into consecutive groups gives every
labelling of a fixed cycle type the same probability, so the resulting
permutation is ESF(n, α) distributed as a whole, not only in its cycle
type.

Steps 1 and 2 draw from the same random source but share no other
state; step 3 is deterministic.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd

from ._config import resolve_rng
from ._errors import check_alpha, check_size
from ._results import ESFPermutation
from ._typing import RandomState
from .cycles import sample_cycle_lengths
from .diagnostics import expected_cycle_count
from .notation import format_cycle_notation
from .permutations import uniform_permutation

_logger = logging.getLogger(__name__)


def generate_esf_permutation(
    n: int,
    alpha: float,
    random_state: RandomState = None,
) -> ESFPermutation:
    """Sample one permutation of ``1..n`` from ESF(n, α).

    Args:
        n: Number of elements (``>= 0``).
        alpha: ESF parameter (``> 0``, finite).  Larger values favour
            more, shorter cycles.
        random_state: Random source (anything with ``random()`` and
            ``integers(high)``, e.g. ``numpy.random.Generator``), an
            integer seed, or ``None`` for the process-wide generator
            (see :func:`~esf_permutations.set_random_state`).

    Returns:
        An :class:`ESFPermutation`; ``str(result)`` is the cycle
        notation, e.g. ``"(3 1)(5 2 4)"``, and ``"()"`` for n = 0.

    Raises:
        InvalidSizeError: If *n* is negative.
        InvalidParameterError: If *alpha* is not a positive finite real.
    """
    n = check_size(n)
    alpha = check_alpha(alpha)
    rng = resolve_rng(random_state)

    cycle_lengths = sample_cycle_lengths(n, alpha, rng)
    labels = uniform_permutation(n, rng)
    notation = format_cycle_notation(cycle_lengths, labels)

    _logger.debug(
        "Sampled ESF permutation n=%s alpha=%s cycles=%s",
        n,
        alpha,
        len(cycle_lengths),
    )
    return ESFPermutation(
        n=n,
        alpha=alpha,
        cycle_lengths=tuple(cycle_lengths),
        labels=tuple(labels),
        notation=notation,
    )


def generate_esf_permutations(
    n: int,
    alpha: float,
    size: int,
    random_state: RandomState = None,
) -> list[ESFPermutation]:
    """Sample *size* independent ESF(n, α) permutations from one source.

    Arguments are validated once, before any sampling.  With an integer
    seed the whole batch is reproducible.
    """
    n = check_size(n)
    alpha = check_alpha(alpha)
    size = check_size(size, name="size")
    rng = resolve_rng(random_state)
    return [generate_esf_permutation(n, alpha, rng) for _ in range(size)]


def default_alpha_grid() -> list[float]:
    """Twenty descending parameters ``2.0, 1.9, …, 0.1``."""
    return (2.0 - np.arange(20) / 10.0).round(1).tolist()


def alpha_sweep(
    n: int,
    alphas: Sequence[float] | None = None,
    random_state: RandomState = None,
) -> pd.DataFrame:
    """Sample one permutation per α and tabulate the results.

    Args:
        n: Number of elements (``>= 0``).
        alphas: Parameters to sweep, in output order.  Defaults to
            :func:`default_alpha_grid`.
        random_state: Random source, integer seed, or ``None``.

    Returns:
        DataFrame with one row per α and columns ``alpha``,
        ``n_cycles``, ``expected_cycles`` and ``permutation``.

    Raises:
        InvalidSizeError: If *n* is negative.
        InvalidParameterError: If any α is invalid; raised before any
            sampling takes place.
    """
    n = check_size(n)
    if alphas is None:
        alphas = default_alpha_grid()
    alphas = [check_alpha(a) for a in alphas]
    rng = resolve_rng(random_state)

    _logger.debug("Sweeping %s parameters at n=%s", len(alphas), n)
    results = [generate_esf_permutation(n, a, rng) for a in alphas]
    return pd.DataFrame(
        {
            "alpha": alphas,
            "n_cycles": [r.n_cycles for r in results],
            "expected_cycles": [expected_cycle_count(n, a) for a in alphas],
            "permutation": [r.notation for r in results],
        },
        columns=["alpha", "n_cycles", "expected_cycles", "permutation"],
    )
