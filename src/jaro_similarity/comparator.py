"""JaroComparator: orchestrator that wires JaroCore + WinklerAdjustment + JaroConfig.

This is the central wiring layer between the raw scoring primitives and
the public API.  It converts a raw float score into a rich SimilarityResult
with match counts, prefix length and timing data.

Architecture:
- compare() starts a wall-clock timer, validates both inputs, runs the
  Jaro matching scan once, and, when the configured metric is
  JARO_WINKLER, scans the common prefix and applies the bonus.
- The comparator holds only immutable configuration.  One instance can be
  shared across threads and reused for any number of comparisons.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from jaro_similarity.algorithm.config import JaroConfig, SimilarityMetric
from jaro_similarity.algorithm.jaro import jaro_breakdown
from jaro_similarity.algorithm.sequence import as_sequence
from jaro_similarity.algorithm.winkler import common_prefix_length, prefix_bonus
from jaro_similarity.result import SimilarityResult

__all__ = ["JaroComparator"]

logger = logging.getLogger(__name__)


class JaroComparator:
    """Orchestrator for Jaro / Jaro-Winkler comparison.

    Example::

        from jaro_similarity.algorithm.config import JaroConfig, SimilarityMetric
        from jaro_similarity.comparator import JaroComparator

        cmp = JaroComparator(JaroConfig(metric=SimilarityMetric.JARO_WINKLER))
        result = cmp.compare("martha", "marhta")
        print(result.similarity_score)   # 0.961...
        print(result.jaro_score)         # 0.944...
        print(result.prefix_length)      # 3
    """

    def __init__(
        self,
        config: JaroConfig | None = None,
        comparer: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config:   Scoring parameters.  Defaults to ``JaroConfig()`` (plain
                Jaro) when None.
            comparer: Element equality used for every comparison.  Defaults
                to the elements' natural ``==``.
        """
        self._config: JaroConfig = config if config is not None else JaroConfig()
        self._comparer = comparer

    @property
    def config(self) -> JaroConfig:
        """The configuration this comparator scores with."""
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> SimilarityResult:
        """Compare two sequences and return a rich SimilarityResult.

        Args:
            left:  First sequence (str, list, tuple, 1-D ndarray, ...).
            right: Second sequence.

        Returns:
            A ``SimilarityResult`` with all fields populated.

        Raises:
            TypeError:  Either input is not a finite, indexable sequence.
            ValueError: Either input is a multi-dimensional numpy array.
        """
        t0 = time.perf_counter()

        left = as_sequence(left, "left")
        right = as_sequence(right, "right")
        config = self._config

        jaro, summary = jaro_breakdown(left, right, self._comparer)

        prefix_length = 0
        score = jaro
        if config.metric == SimilarityMetric.JARO_WINKLER:
            gated = config.boost_threshold is not None and jaro <= config.boost_threshold
            if not gated:
                prefix_length = common_prefix_length(
                    left, right, config.max_prefix, self._comparer
                )
            score = prefix_bonus(
                jaro, prefix_length, config.scaling_factor, config.boost_threshold
            )

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "%s: len=%d/%d matches=%d transpositions=%d prefix=%d score=%.4f",
            config.metric,
            len(left),
            len(right),
            summary.matches,
            summary.transpositions,
            prefix_length,
            score,
        )

        return SimilarityResult(
            similarity_score=score,
            jaro_score=jaro,
            metric=config.metric,
            matches=summary.matches,
            transpositions=summary.transpositions,
            prefix_length=prefix_length,
            left_length=len(left),
            right_length=len(right),
            computation_time_ms=elapsed_ms,
        )

    def score(self, left: Any, right: Any) -> float:
        """Return only the similarity score for ``left`` and ``right``."""
        return self.compare(left, right).similarity_score
