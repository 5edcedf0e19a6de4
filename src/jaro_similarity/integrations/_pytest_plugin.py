"""pytest plugin for jaro-similarity.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from jaro_similarity import JaroConfig, SimilarityMetric, compare


@pytest.fixture(scope="session")
def assert_similar() -> Any:
    """Fixture that returns a callable fuzzy-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JaroComparator per call).
    Scores with Jaro-Winkler unless a config says otherwise.

    Usage in tests::

        def test_typo(assert_similar):
            assert_similar("martha", "marhta")

        def test_unrelated(assert_similar):
            with pytest.raises(AssertionError, match=r"similarity="):
                assert_similar("martha", "xyz")

    Returns:
        A callable ``_assert(actual, expected, threshold=0.85, config=None) -> None``
        that raises ``AssertionError`` when the similarity score is below threshold.
    """

    def _assert(
        actual: Any,
        expected: Any,
        threshold: float = 0.85,
        config: JaroConfig | None = None,
    ) -> None:
        """Assert that two sequences are similar enough.

        Args:
            actual:    The value produced by the code under test.
            expected:  The reference value.
            threshold: Minimum similarity score.  Defaults to 0.85.
            config:    Optional JaroConfig.  Defaults to Jaro-Winkler with
                       default parameters.

        Raises:
            AssertionError: When similarity_score < threshold, with a message
                including the score, threshold, metric, both values, and the
                match and transposition counts.
        """
        if config is None:
            config = JaroConfig(metric=SimilarityMetric.JARO_WINKLER)
        result = compare(actual, expected, config=config)
        if result.similarity_score < threshold:
            raise AssertionError(
                f"sequences not similar: "
                f"similarity={result.similarity_score:.4f} < threshold={threshold}\n"
                f"  metric:   {result.metric}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  matches: {result.matches}\n"
                f"  transpositions: {result.transpositions}"
            )

    return _assert
