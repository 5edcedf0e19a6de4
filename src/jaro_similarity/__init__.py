"""Jaro similarity - Jaro and Jaro-Winkler scores for any pair of sequences."""

from __future__ import annotations

from jaro_similarity.algorithm.config import JaroConfig, SimilarityMetric
from jaro_similarity.algorithm.jaro import MatchSummary
from jaro_similarity.api import (
    compare,
    is_similar,
    jaro,
    jaro_winkler,
    similarity_matrix,
)
from jaro_similarity.comparator import JaroComparator
from jaro_similarity.result import SimilarityResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "JaroComparator",
    "JaroConfig",
    "MatchSummary",
    "SimilarityMetric",
    "SimilarityResult",
    "compare",
    "is_similar",
    "jaro",
    "jaro_winkler",
    "similarity_matrix",
]
