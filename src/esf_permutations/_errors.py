"""Error taxonomy and input validation.

Two kinds of error are reported to callers:

* :class:`InvalidSizeError` — the permutation size *n* is negative.
* :class:`InvalidParameterError` — the ESF parameter α is not a
  positive finite real.  At α = 0 the first Feller trial divides by
  zero; for α < 0 the trial probabilities leave ``[0, 1]``.

A third kind, :class:`PreconditionViolationError`, marks a defect in
composing code: cycle lengths and labels that do not describe the
same *n*.  It cannot be triggered through
:func:`~esf_permutations.core.generate_esf_permutation`.

Both user-facing errors subclass ``ValueError`` so existing
``except ValueError`` handlers keep working.
"""

from __future__ import annotations

import math
import numbers

import numpy as np


class InvalidSizeError(ValueError):
    """Raised when the permutation size is negative."""


class InvalidParameterError(ValueError):
    """Raised when α is zero, negative, NaN, or infinite."""


class PreconditionViolationError(RuntimeError):
    """Raised when cycle lengths and labels describe different sizes."""


def check_size(n: int, *, name: str = "n") -> int:
    """Validate a non-negative integer size and return it as ``int``.

    Raises:
        TypeError: If *n* is not an integer (``bool`` is rejected).
        InvalidSizeError: If *n* is negative.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"'{name}' must be an integer, got {type(n).__name__}.")
    if n < 0:
        raise InvalidSizeError(f"'{name}' must be non-negative, got {n}.")
    return int(n)


def check_alpha(alpha: float) -> float:
    """Validate the ESF parameter and return it as ``float``.

    Raises:
        TypeError: If *alpha* is not a real number.
        InvalidParameterError: If *alpha* is not a positive finite real.
    """
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise TypeError(f"'alpha' must be a real number, got {type(alpha).__name__}.")
    alpha = float(alpha)
    if not math.isfinite(alpha) or alpha <= 0.0:
        raise InvalidParameterError(
            f"'alpha' must be a positive finite number, got {alpha}."
        )
    return alpha
