"""Jaro similarity: match table, transposition count, base score.

For two sequences ``left`` (length m) and ``right`` (length n) the score is::

    jaro = (matches / m + matches / n + (matches - transpositions) / matches) / 3

Architecture:
- Two elements *match* when they are equal and their positions differ by at
  most ``match_window(m, n) = max(0, max(m, n) // 2 - 1)``.  Each ``left[i]``
  claims the first unclaimed equal element of ``right`` inside its window.
- Claimed positions are tracked in two local numpy ``bool`` buffers, one
  per input, allocated per call and dropped on return.
- *Transpositions* are half the number of positions at which the matched
  elements of ``left`` and ``right`` (each taken in its own index order)
  disagree, rounded down.

Degenerate inputs are decided before the match table is built, in this
order: both empty -> 1.0, one empty -> 0.0, both of length one -> exact
equality.  The function is total over finite sequence pairs; nothing here
raises for empty input.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

import numpy as np

from jaro_similarity.algorithm.sequence import as_sequence

__all__ = [
    "MatchSummary",
    "jaro_breakdown",
    "jaro_score",
    "jaro_similarity",
    "match_sequences",
    "match_window",
]


class MatchSummary(NamedTuple):
    """Counts produced by the matching scan."""

    matches: int
    transpositions: int


def match_window(left_length: int, right_length: int) -> int:
    """Return the match window radius for sequences of the given lengths."""
    return max(0, max(left_length, right_length) // 2 - 1)


def match_sequences(
    left: Sequence[Any] | np.ndarray,
    right: Sequence[Any] | np.ndarray,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> MatchSummary:
    """Build the match table for ``left`` and ``right`` and count transpositions.

    Args:
        left:     First sequence.
        right:    Second sequence.
        comparer: Element equality; defaults to ``operator.eq``.

    Returns:
        ``MatchSummary(matches, transpositions)``.  Both are 0 when nothing
        matches (including when either input is empty).
    """
    eq = comparer if comparer is not None else operator.eq
    left_length = len(left)
    right_length = len(right)
    window = match_window(left_length, right_length)

    left_flags = np.zeros(left_length, dtype=bool)
    right_flags = np.zeros(right_length, dtype=bool)
    matches = 0

    for i in range(left_length):
        lower = max(0, i - window)
        upper = min(right_length, i + window + 1)
        for j in range(lower, upper):
            if right_flags[j] or not eq(left[i], right[j]):
                continue
            left_flags[i] = True
            right_flags[j] = True
            matches += 1
            break

    if matches == 0:
        return MatchSummary(0, 0)

    # Walk both matched subsequences in lockstep
    disagreements = 0
    for i, j in zip(
        np.flatnonzero(left_flags).tolist(),
        np.flatnonzero(right_flags).tolist(),
        strict=True,
    ):
        if not eq(left[i], right[j]):
            disagreements += 1

    return MatchSummary(matches, disagreements // 2)


def jaro_score(summary: MatchSummary, left_length: int, right_length: int) -> float:
    """Apply the Jaro formula to a ``MatchSummary``.

    Returns 0.0 when there are no matches.
    """
    matches, transpositions = summary
    if matches == 0:
        return 0.0
    return (
        matches / left_length
        + matches / right_length
        + (matches - transpositions) / matches
    ) / 3.0


def jaro_breakdown(
    left: Any,
    right: Any,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> tuple[float, MatchSummary]:
    """Compute the Jaro score together with the counts it was derived from.

    Args:
        left:     First sequence (str, list, tuple, 1-D ndarray, ...).
        right:    Second sequence.
        comparer: Element equality; defaults to ``operator.eq``.

    Returns:
        ``(score, summary)`` where ``score`` is in [0.0, 1.0].

    Raises:
        TypeError:  Either input is not a finite, indexable sequence.
        ValueError: Either input is a multi-dimensional numpy array.
    """
    left = as_sequence(left, "left")
    right = as_sequence(right, "right")
    left_length = len(left)
    right_length = len(right)

    if comparer is None and isinstance(left, str) and isinstance(right, str):
        if left == right:
            return (1.0, MatchSummary(left_length, 0))

    if left_length == 0 and right_length == 0:
        return (1.0, MatchSummary(0, 0))
    if left_length == 0 or right_length == 0:
        return (0.0, MatchSummary(0, 0))

    eq = comparer if comparer is not None else operator.eq

    if left_length == 1 and right_length == 1:
        if eq(left[0], right[0]):
            return (1.0, MatchSummary(1, 0))
        return (0.0, MatchSummary(0, 0))

    summary = match_sequences(left, right, eq)
    return (jaro_score(summary, left_length, right_length), summary)


def jaro_similarity(
    left: Any,
    right: Any,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> float:
    """Return the Jaro similarity of two sequences.

    Args:
        left:     First sequence (str, list, tuple, 1-D ndarray, ...).
        right:    Second sequence.
        comparer: Element equality; defaults to ``operator.eq``.

    Returns:
        Float in [0.0, 1.0]: 1.0 means identical, 0.0 means nothing matched.
    """
    score, _ = jaro_breakdown(left, right, comparer)
    return score
