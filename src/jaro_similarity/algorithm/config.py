"""JaroConfig and SimilarityMetric for scoring configuration.

JaroConfig is a frozen (immutable) dataclass holding the metric selection
and the Winkler prefix-bonus parameters.  SimilarityMetric selects between
plain Jaro and Jaro-Winkler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

CLASSIC_MAX_PREFIX: int = 4
CLASSIC_BOOST_THRESHOLD: float = 0.7


class SimilarityMetric(StrEnum):
    """Which similarity metric a comparison reports.

    - JARO:         Base Jaro similarity (matches and transpositions only).
    - JARO_WINKLER: Jaro similarity plus the common-prefix bonus.
    """

    JARO = auto()
    JARO_WINKLER = auto()


@dataclass(frozen=True, slots=True)
class JaroConfig:
    """Immutable configuration for Jaro / Jaro-Winkler scoring.

    By default the common prefix is not capped and the bonus applies
    regardless of the base Jaro score.  Use
    :meth:`classic` for Winkler's original four-element cap and 0.7 gate.

    Attributes:
        metric: Which metric ``similarity_score`` reports.
        scaling_factor: Weight of each common-prefix element in [0, 1].
        max_prefix: Cap on the common-prefix length, or None for no cap.
        boost_threshold: When set, the prefix bonus is applied only if the
            base Jaro score is strictly greater than this value.  None applies
            the bonus unconditionally.
    """

    metric: SimilarityMetric = SimilarityMetric.JARO
    scaling_factor: float = 0.1
    max_prefix: int | None = None
    boost_threshold: float | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.scaling_factor <= 1.0:
            msg = f"scaling_factor must be in [0, 1], got {self.scaling_factor}"
            raise ValueError(msg)
        if self.max_prefix is not None:
            if self.max_prefix < 0:
                msg = f"max_prefix must be >= 0, got {self.max_prefix}"
                raise ValueError(msg)
            if self.scaling_factor * self.max_prefix > 1.0:
                msg = (
                    "scaling_factor * max_prefix must be <= 1.0, "
                    f"got {self.scaling_factor * self.max_prefix}"
                )
                raise ValueError(msg)
        if self.boost_threshold is not None and not 0.0 <= self.boost_threshold <= 1.0:
            msg = f"boost_threshold must be in [0, 1], got {self.boost_threshold}"
            raise ValueError(msg)

    @classmethod
    def classic(cls, metric: SimilarityMetric = SimilarityMetric.JARO_WINKLER) -> JaroConfig:
        """Return Winkler's original parameters: prefix capped at 4, gated at 0.7."""
        return cls(
            metric=metric,
            max_prefix=CLASSIC_MAX_PREFIX,
            boost_threshold=CLASSIC_BOOST_THRESHOLD,
        )
