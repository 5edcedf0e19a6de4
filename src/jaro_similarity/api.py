"""Public API functions for jaro-similarity.

This module provides the user-facing functions: jaro, jaro_winkler, compare,
is_similar and similarity_matrix.  Each call creates a fresh JaroComparator
to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

import numpy as np

from jaro_similarity.algorithm.config import JaroConfig, SimilarityMetric
from jaro_similarity.algorithm.jaro import jaro_similarity
from jaro_similarity.algorithm.sequence import as_sequence
from jaro_similarity.comparator import JaroComparator
from jaro_similarity.result import SimilarityResult

__all__ = ["compare", "is_similar", "jaro", "jaro_winkler", "similarity_matrix"]

logger = logging.getLogger(__name__)


def jaro(
    left: Any,
    right: Any,
    use_winkler: bool = False,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> float:
    """Return the Jaro (or, with ``use_winkler``, Jaro-Winkler) similarity.

    Args:
        left:        First sequence (str, list, tuple, 1-D ndarray, ...).
        right:       Second sequence.
        use_winkler: Apply the common-prefix bonus with default parameters.
        comparer:    Element equality; defaults to the elements' ``==``.

    Returns:
        A float in [0.0, 1.0].  1.0 means identical; 0.0 means nothing matched.
    """
    if use_winkler:
        return jaro_winkler(left, right, comparer=comparer)
    return jaro_similarity(left, right, comparer)


def jaro_winkler(
    left: Any,
    right: Any,
    config: JaroConfig | None = None,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> float:
    """Return the Jaro-Winkler similarity of two sequences.

    Args:
        left:     First sequence.
        right:    Second sequence.
        config:   Prefix-bonus parameters.  Its ``metric`` field is ignored;
                  this function always reports Jaro-Winkler.  Defaults to
                  ``JaroConfig()`` when None.
        comparer: Element equality; defaults to the elements' ``==``.

    Returns:
        A float in [0.0, 1.0], never below ``jaro(left, right)``.
    """
    base = config if config is not None else JaroConfig()
    winkler_config = dataclasses.replace(base, metric=SimilarityMetric.JARO_WINKLER)
    return JaroComparator(config=winkler_config, comparer=comparer).score(left, right)


def compare(
    left: Any,
    right: Any,
    config: JaroConfig | None = None,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> SimilarityResult:
    """Compare two sequences and return a rich SimilarityResult.

    Creates a fresh ``JaroComparator`` per call.

    Args:
        left:     First sequence.
        right:    Second sequence.
        config:   Scoring parameters.  Defaults to ``JaroConfig()`` when None.
        comparer: Element equality; defaults to the elements' ``==``.

    Returns:
        A ``SimilarityResult`` with the score, the base Jaro score, match
        counts, prefix length, input lengths and computation_time_ms populated.
    """
    comparator = JaroComparator(config=config, comparer=comparer)
    return comparator.compare(left, right)


def is_similar(
    left: Any,
    right: Any,
    threshold: float = 0.85,
    config: JaroConfig | None = None,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> bool:
    """Return True if the two sequences score at or above ``threshold``.

    Args:
        left:      First sequence.
        right:     Second sequence.
        threshold: Minimum similarity score in [0.0, 1.0].  Defaults to 0.85.
        config:    Scoring parameters.  Defaults to ``JaroConfig()`` when None.
        comparer:  Element equality; defaults to the elements' ``==``.

    Returns:
        True if ``compare(left, right, config).similarity_score >= threshold``.

    Raises:
        ValueError: ``threshold`` is outside [0, 1].
    """
    if not 0.0 <= threshold <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise ValueError(msg)
    result = compare(left, right, config=config, comparer=comparer)
    return result.similarity_score >= threshold


def similarity_matrix(
    left_items: Any,
    right_items: Any,
    config: JaroConfig | None = None,
    comparer: Callable[[Any, Any], bool] | None = None,
) -> np.ndarray:
    """Score every item of ``left_items`` against every item of ``right_items``.

    A single ``JaroComparator`` is reused for all pairs.

    Args:
        left_items:  Sequence of sequences (e.g. a list of names).
        right_items: Sequence of sequences.
        config:      Scoring parameters.  Defaults to ``JaroConfig()`` when None.
        comparer:    Element equality; defaults to the elements' ``==``.

    Returns:
        Shape ``(len(left_items), len(right_items))`` float64 array where cell
        ``[i, j]`` is the similarity of ``left_items[i]`` and ``right_items[j]``.
    """
    left_items = as_sequence(left_items, "left_items")
    right_items = as_sequence(right_items, "right_items")
    comparator = JaroComparator(config=config, comparer=comparer)

    scores = np.zeros((len(left_items), len(right_items)), dtype=np.float64)
    for i, left in enumerate(left_items):
        for j, right in enumerate(right_items):
            scores[i, j] = comparator.score(left, right)

    logger.debug("similarity_matrix: shape=%s metric=%s", scores.shape, comparator.config.metric)
    return scores
