"""SimilarityResult dataclass for comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from jaro_similarity.algorithm.config import SimilarityMetric

__all__ = ["SimilarityResult"]


@dataclass(frozen=True, slots=True)
class SimilarityResult:
    """Rich result of a compare() call.

    Attributes:
        similarity_score: Score for ``metric`` in [0.0, 1.0].  1.0 is identical.
        jaro_score: Base Jaro similarity, before any prefix bonus.
        metric: Which metric ``similarity_score`` reports.
        matches: Number of matched element pairs.
        transpositions: Half the number of out-of-order matched pairs.
        prefix_length: Common-prefix length used for the Winkler bonus
            (0 when ``metric`` is JARO).
        left_length: Number of elements in the left input.
        right_length: Number of elements in the right input.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    similarity_score: float
    jaro_score: float
    metric: SimilarityMetric
    matches: int
    transpositions: int
    prefix_length: int
    left_length: int
    right_length: int
    computation_time_ms: float
