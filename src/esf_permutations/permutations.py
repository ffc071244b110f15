"""Uniform random arrangements of the labels ``1..n``.

Fisher–Yates shuffle: at step i the element for position i is chosen
uniformly from the suffix ``i..n-1`` still in play.  The draw range
shrinks by one each step, so each of the n! orderings has probability

    1/n · 1/(n−1) · ··· · 1/1 = 1/n!

Drawing over the whole array at every step instead (the "naive"
shuffle) produces n^n equally likely swap sequences, which cannot map
evenly onto n! orderings for n >= 3.
"""

from __future__ import annotations

from ._config import resolve_rng
from ._errors import check_size
from ._typing import RandomState


def uniform_permutation(n: int, random_state: RandomState = None) -> list[int]:
    """Return a uniformly random arrangement of ``1..n``.

    Args:
        n: Number of labels (``>= 0``).
        random_state: Random source, integer seed, or ``None`` for the
            process-wide generator.

    Returns:
        List containing each of ``1..n`` exactly once.

    Raises:
        InvalidSizeError: If *n* is negative.
    """
    n = check_size(n)
    rng = resolve_rng(random_state)

    labels = list(range(1, n + 1))
    for i in range(n):
        k = int(rng.integers(n - i))
        labels[i], labels[i + k] = labels[i + k], labels[i]
    return labels
