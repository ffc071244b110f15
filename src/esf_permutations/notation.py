"""Disjoint-cycle notation.

A permutation is written as a product of disjoint cycles, e.g.
``(3 1)(5 2 4)`` sends 3→1→3 and 5→2→4→5.  Groups are emitted in the
order the cycle lengths were discovered and labels in the order they
appear in the arrangement; no separator sits between groups.  The
empty permutation (n = 0) is written ``()``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from ._errors import PreconditionViolationError

EMPTY_PERMUTATION = "()"

_GROUP = re.compile(r"\(([^()]*)\)")


def _check_composition(cycle_lengths: Sequence[int], labels: Sequence[int]) -> None:
    if any(length <= 0 for length in cycle_lengths):
        raise PreconditionViolationError(
            f"Cycle lengths must be positive, got {list(cycle_lengths)}."
        )
    total = sum(cycle_lengths)
    if total != len(labels):
        raise PreconditionViolationError(
            f"Cycle lengths sum to {total} but {len(labels)} labels were given."
        )


def format_cycle_notation(
    cycle_lengths: Sequence[int],
    labels: Sequence[int],
) -> str:
    """Render *labels* split into groups of *cycle_lengths* as cycle notation.

    Args:
        cycle_lengths: Positive group sizes, in output order.
        labels: The arrangement to split; consumed left to right.

    Returns:
        A string starting with ``(`` and ending with ``)`` holding
        ``len(cycle_lengths)`` groups, or ``"()"`` when both inputs
        are empty.

    Raises:
        PreconditionViolationError: If a length is not positive or the
            lengths do not sum to ``len(labels)``.
    """
    _check_composition(cycle_lengths, labels)
    if not labels:
        return EMPTY_PERMUTATION

    parts = ["("]
    group = 0
    remaining = cycle_lengths[0]
    last = len(labels) - 1
    for i, label in enumerate(labels):
        parts.append(str(label))
        remaining -= 1
        if remaining == 0:
            parts.append(")")
            if i != last:
                group += 1
                remaining = cycle_lengths[group]
                parts.append("(")
        else:
            parts.append(" ")
    return "".join(parts)


def split_cycles(
    cycle_lengths: Sequence[int],
    labels: Sequence[int],
) -> list[tuple[int, ...]]:
    """Split *labels* into consecutive groups of *cycle_lengths*.

    Same precondition as :func:`format_cycle_notation`.
    """
    _check_composition(cycle_lengths, labels)
    cycles: list[tuple[int, ...]] = []
    start = 0
    for length in cycle_lengths:
        cycles.append(tuple(labels[start : start + length]))
        start += length
    return cycles


def parse_cycle_notation(text: str) -> list[tuple[int, ...]]:
    """Parse a cycle-notation string back into its cycles.

    >>> parse_cycle_notation("(3 1)(5 2 4)")
    [(3, 1), (5, 2, 4)]
    >>> parse_cycle_notation("()")
    []

    Raises:
        ValueError: If *text* is not well-formed notation or repeats a
            label.
    """
    text = text.strip()
    if text == EMPTY_PERMUTATION:
        return []

    cycles: list[tuple[int, ...]] = []
    pos = 0
    for match in _GROUP.finditer(text):
        body = match.group(1)
        tokens = body.split(" ")
        if match.start() != pos or not all(t.isdigit() for t in tokens):
            raise ValueError(f"Malformed cycle notation: {text!r}.")
        cycles.append(tuple(int(t) for t in tokens))
        pos = match.end()

    if not cycles or pos != len(text):
        raise ValueError(f"Malformed cycle notation: {text!r}.")

    seen = [label for cycle in cycles for label in cycle]
    if len(set(seen)) != len(seen):
        raise ValueError(f"Repeated label in cycle notation: {text!r}.")
    return cycles


def cycles_to_one_line(
    cycles: Sequence[Sequence[int]],
    n: int | None = None,
) -> list[int]:
    """Return the image of each label ``1..n`` under the cycle product.

    Each cycle ``(a b c)`` maps a→b, b→c and c→a.  Labels of ``1..n``
    that appear in no cycle are fixed points.

    Args:
        cycles: Disjoint cycles over labels ``1..n``.
        n: Domain size.  Defaults to the total number of labels in
            *cycles*.

    Returns:
        ``images`` with ``images[j - 1]`` the image of label ``j``.

    Raises:
        ValueError: If a label falls outside ``1..n`` or repeats.
    """
    if n is None:
        n = sum(len(cycle) for cycle in cycles)
    images = list(range(1, n + 1))
    seen: set[int] = set()
    for cycle in cycles:
        for j, label in enumerate(cycle):
            if not 1 <= label <= n or label in seen:
                raise ValueError(
                    f"Label {label} is repeated or outside 1..{n}."
                )
            seen.add(label)
            images[label - 1] = cycle[(j + 1) % len(cycle)]
    return images
