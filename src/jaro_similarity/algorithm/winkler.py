"""Winkler prefix bonus on top of a Jaro score.

Formula::

    jaro_winkler = min(1, jaro + L * scaling_factor * (1 - jaro))

where ``L`` is the length of the common prefix of the two sequences,
optionally capped at ``max_prefix``.  When ``boost_threshold`` is set, the
bonus is skipped for Jaro scores at or below it.

The correction term is never negative, so the result is never below the
input Jaro score.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from jaro_similarity.algorithm.sequence import as_sequence

__all__ = ["common_prefix_length", "prefix_bonus", "winkler_adjustment"]


def common_prefix_length(
    left: Any,
    right: Any,
    max_prefix: int | None = None,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> int:
    """Return the number of leading positions at which both sequences agree.

    Args:
        left:       First sequence.
        right:      Second sequence.
        max_prefix: Stop counting after this many elements.  None scans the
                    whole shared length.
        comparer:   Element equality; defaults to ``operator.eq``.
    """
    left = as_sequence(left, "left")
    right = as_sequence(right, "right")
    eq = comparer if comparer is not None else operator.eq

    shared_length = min(len(left), len(right))
    if max_prefix is not None:
        shared_length = min(shared_length, max_prefix)

    for index in range(shared_length):
        if not eq(left[index], right[index]):
            return index
    return shared_length


def prefix_bonus(
    jaro_score: float,
    prefix_length: int,
    scaling_factor: float = 0.1,
    boost_threshold: float | None = None,
) -> float:
    """Apply the Winkler correction to ``jaro_score`` for a known prefix length."""
    if boost_threshold is not None and jaro_score <= boost_threshold:
        return jaro_score
    adjusted = jaro_score + prefix_length * scaling_factor * (1.0 - jaro_score)
    return min(adjusted, 1.0)


def winkler_adjustment(
    left: Any,
    right: Any,
    jaro_score: float,
    scaling_factor: float = 0.1,
    max_prefix: int | None = None,
    boost_threshold: float | None = None,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> float:
    """Turn a Jaro score for ``left``/``right`` into a Jaro-Winkler score.

    Args:
        left:            First sequence (the one ``jaro_score`` was computed on).
        right:           Second sequence.
        jaro_score:      Base Jaro similarity in [0, 1].
        scaling_factor:  Weight of each common-prefix element.
        max_prefix:      Cap on the prefix length; None for no cap.
        boost_threshold: Skip the bonus when ``jaro_score`` is at or below
                         this value; None always applies it.
        comparer:        Element equality; defaults to ``operator.eq``.

    Returns:
        Float in [jaro_score, 1.0].
    """
    if boost_threshold is not None and jaro_score <= boost_threshold:
        return jaro_score
    prefix_length = common_prefix_length(left, right, max_prefix, comparer)
    return prefix_bonus(jaro_score, prefix_length, scaling_factor)
