"""Typed result object for sampled permutations.

:class:`ESFPermutation` is a frozen dataclass that provides:

* **Attribute access** — ``result.notation``, ``result.n_cycles``, etc.
* **Dict-like access** — ``result["notation"]``, ``result.get("key")``,
  ``"key" in result`` for consumers that prefer bracket syntax.
* **Serialisation** — ``.to_dict()`` returns a plain ``dict[str, Any]``
  with all NumPy types converted to native Python.

The result is a snapshot of one completed sampling call and is never
mutated after creation.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar

import numpy as np

from .notation import cycles_to_one_line, split_cycles

# ------------------------------------------------------------------ #
# Serialisation helper
# ------------------------------------------------------------------ #


def _numpy_to_python(obj: Any) -> Any:
    """Recursively convert NumPy scalars/arrays to Python-native types.

    Handles nested dicts, lists, tuples, np.ndarray, np.integer and
    np.floating so that :meth:`to_dict` returns a fully
    JSON-serialisable structure.
    """
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.integer, np.bool_)):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, dict):
        return {k: _numpy_to_python(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        converted = [_numpy_to_python(item) for item in obj]
        return type(obj)(converted)
    return obj


# ------------------------------------------------------------------ #
# Dict-compatibility mixin
# ------------------------------------------------------------------ #


class _DictAccessMixin:
    """Dict-like access convenience for result dataclasses.

    Supports three access patterns:

    1. ``result["key"]``      — raises ``KeyError`` on miss
    2. ``result.get(key, d)`` — returns *d* on miss (default ``None``)
    3. ``"key" in result``    — membership test

    Subclasses may override ``_SERIALIZERS`` to register conversion
    functions for individual fields.  Serializers compose with
    :func:`_numpy_to_python`.
    """

    _SERIALIZERS: ClassVar[dict[str, Any]] = {}

    def __getitem__(self, key: str) -> Any:
        """Attribute lookup via bracket syntax."""
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def get(self, key: str, default: Any = None) -> Any:
        """Attribute lookup with a fallback default."""
        return getattr(self, key, default)

    def __contains__(self, key: object) -> bool:
        """Membership test: ``"key" in result``."""
        if not isinstance(key, str):
            return False
        return hasattr(self, key)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary of the dataclass fields."""
        result: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            val = getattr(self, f.name)
            if f.name in self._SERIALIZERS:
                val = self._SERIALIZERS[f.name](val)
            result[f.name] = _numpy_to_python(val)
        return result


# ------------------------------------------------------------------ #
# ESFPermutation
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class ESFPermutation(_DictAccessMixin):
    """One permutation sampled from ESF(n, α).

    Returned by :func:`~esf_permutations.core.generate_esf_permutation`.
    ``str(result)`` is the cycle notation.
    """

    _SERIALIZERS: ClassVar[dict[str, Any]] = {
        "cycle_lengths": list,
        "labels": list,
    }

    n: int
    """Number of elements permuted."""

    alpha: float
    """ESF parameter the cycle lengths were drawn with."""

    cycle_lengths: tuple[int, ...]
    """Cycle lengths in order of discovery; sums to ``n``."""

    labels: tuple[int, ...]
    """Uniform arrangement of ``1..n`` the cycles are cut from."""

    notation: str
    """Disjoint-cycle notation, e.g. ``"(3 1)(5 2 4)"``."""

    def __str__(self) -> str:
        return self.notation

    @property
    def n_cycles(self) -> int:
        """Number of cycles."""
        return len(self.cycle_lengths)

    @property
    def cycles(self) -> tuple[tuple[int, ...], ...]:
        """The cycles as label tuples, in notation order."""
        return tuple(split_cycles(self.cycle_lengths, self.labels))

    @property
    def one_line(self) -> tuple[int, ...]:
        """Image of each label ``1..n`` (``one_line[j - 1]`` is σ(j))."""
        return tuple(cycles_to_one_line(self.cycles, self.n))

    @property
    def cycle_type(self) -> tuple[int, ...]:
        """Cycle lengths sorted in decreasing order."""
        return tuple(sorted(self.cycle_lengths, reverse=True))
