"""Shared type aliases for the esf_permutations package."""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Uniform draws consumed by the samplers.

    ``numpy.random.Generator`` satisfies this protocol.  Tests may pass
    any object with the same two methods to script the draws.
    """

    def random(self) -> float:
        """Return a uniform real in ``[0, 1)``."""
        ...

    def integers(self, high: int) -> int:
        """Return a uniform integer in ``[0, high)``."""
        ...


# Seed-like inputs accepted by the public API.
RandomState = int | np.random.Generator | RandomSource | None
