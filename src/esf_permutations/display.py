"""Formatted ASCII table display for sampled permutations.

Two tables are provided:

* :func:`print_permutation_table` — one sampled permutation with its
  cycle structure next to the ESF reference values for the same
  (n, α).
* :func:`print_sweep_table` — the output of
  :func:`~esf_permutations.core.alpha_sweep`, one row per α, with the
  sampled cycle count beside its expectation.

Long cycle-notation strings are wrapped at group boundaries where
possible so a reader can follow individual cycles.
"""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

from .diagnostics import cycle_count_variance, expected_cycle_count

if TYPE_CHECKING:
    import pandas as pd

    from ._results import ESFPermutation

W = 80


def _truncate(name: str, max_len: int) -> str:
    """Truncate *name* to *max_len*, appending ``'...'`` if needed."""
    if len(name) <= max_len:
        return name
    return name[: max_len - 3] + "..."


def _wrap_notation(notation: str, width: int) -> list[str]:
    """Split *notation* into lines of at most *width* characters.

    Breaks between groups first (``")("`` boundaries), then between
    labels inside a group that is itself too long.
    """
    groups = notation.replace(")(", ")\0(").split("\0")
    lines: list[str] = []
    current = ""
    for group in groups:
        if len(current) + len(group) <= width:
            current += group
            continue
        if current:
            lines.append(current)
        if len(group) <= width:
            current = group
        else:
            pieces = textwrap.wrap(group, width=width, break_long_words=True)
            lines.extend(pieces[:-1])
            current = pieces[-1]
    if current or not lines:
        lines.append(current)
    return lines


def _print_title(title: str) -> None:
    print("=" * W)
    for line in textwrap.wrap(title, width=W - 2):
        print(f"{line:^{W}}")
    print("=" * W)


def print_permutation_table(
    result: ESFPermutation,
    *,
    title: str | None = None,
) -> None:
    """Print one sampled permutation with its ESF reference values.

    Args:
        result: A sampled :class:`ESFPermutation`.
        title: Optional override for the table title.  Defaults to
            ``"ESF Permutation (n=<n>, alpha=<alpha>)"``.
    """
    lw = 22  # label column width
    if title is None:
        title = f"ESF Permutation (n={result.n}, alpha={result.alpha:g})"

    _print_title(title)

    expected = expected_cycle_count(result.n, result.alpha)
    sd = cycle_count_variance(result.n, result.alpha) ** 0.5
    cycle_type = " ".join(str(j) for j in result.cycle_type) or "-"

    print(f"  {'Size:':<{lw}}{result.n}")
    print(f"  {'Alpha:':<{lw}}{result.alpha:g}")
    print(f"  {'Cycles:':<{lw}}{result.n_cycles}")
    print(f"  {'Expected Cycles:':<{lw}}{expected:.4f} (sd {sd:.4f})")
    print(f"  {'Cycle Type:':<{lw}}{_truncate(cycle_type, W - lw - 2)}")

    print("-" * W)
    print("  Cycle Notation")
    print("-" * W)
    for line in _wrap_notation(result.notation, W - 4):
        print(f"    {line}")
    print("=" * W)


def print_sweep_table(
    frame: pd.DataFrame,
    *,
    title: str | None = None,
    n: int | None = None,
) -> None:
    """Print an α-sweep as a table, one row per parameter.

    Args:
        frame: Output of :func:`~esf_permutations.core.alpha_sweep`.
        title: Optional override for the table title.
        n: Permutation size, shown in the default title when given.
    """
    if title is None:
        size = f"n={n}, " if n is not None else ""
        title = f"ESF Permutations ({size}{len(frame)} parameters)"

    _print_title(title)

    lead = 32  # width of the numeric columns
    print(f"  {'Alpha':>8}  {'Cycles':>8}  {'E[Cycles]':>10}  Permutation")
    print("-" * W)
    for row in frame.itertuples(index=False):
        lines = _wrap_notation(row.permutation, W - lead)
        print(
            f"  {row.alpha:>8.3f}  {row.n_cycles:>8d}  "
            f"{row.expected_cycles:>10.4f}  {lines[0]}"
        )
        for line in lines[1:]:
            print(f"{'':<{lead}}{line}")
    print("=" * W)
