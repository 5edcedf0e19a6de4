"""algorithm subpackage: the Jaro and Jaro-Winkler scoring primitives.

Provides the base Jaro computation, the Winkler prefix bonus, and the
configuration that selects between them.  Import from this module (not
from sub-modules directly) to stay on the stable public interface.

Example::

    from jaro_similarity.algorithm import jaro_similarity, winkler_adjustment

    base = jaro_similarity("martha", "marhta")                  # 0.944...
    boosted = winkler_adjustment("martha", "marhta", base)      # 0.961...
"""

from __future__ import annotations

from jaro_similarity.algorithm.config import (
    CLASSIC_BOOST_THRESHOLD,
    CLASSIC_MAX_PREFIX,
    JaroConfig,
    SimilarityMetric,
)
from jaro_similarity.algorithm.jaro import (
    MatchSummary,
    jaro_breakdown,
    jaro_score,
    jaro_similarity,
    match_sequences,
    match_window,
)
from jaro_similarity.algorithm.sequence import as_sequence
from jaro_similarity.algorithm.winkler import (
    common_prefix_length,
    prefix_bonus,
    winkler_adjustment,
)

__all__ = [
    "CLASSIC_BOOST_THRESHOLD",
    "CLASSIC_MAX_PREFIX",
    "JaroConfig",
    "MatchSummary",
    "SimilarityMetric",
    "as_sequence",
    "common_prefix_length",
    "jaro_breakdown",
    "jaro_score",
    "jaro_similarity",
    "match_sequences",
    "match_window",
    "prefix_bonus",
    "winkler_adjustment",
]
