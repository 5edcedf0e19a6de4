"""Unit tests for the public API functions: jaro, jaro_winkler, compare, is_similar."""

from __future__ import annotations

import pytest

from jaro_similarity import (
    JaroComparator,
    JaroConfig,
    MatchSummary,
    SimilarityMetric,
    SimilarityResult,
    compare,
    is_similar,
    jaro,
    jaro_winkler,
    similarity_matrix,
)


class TestJaro:
    """Tests for the jaro() function."""

    def test_identical_returns_1(self) -> None:
        assert jaro("jaro", "jaro") == pytest.approx(1.0)

    def test_plain_score(self) -> None:
        assert jaro("dwayne", "duane") == pytest.approx(0.822, abs=0.001)

    def test_use_winkler_adds_prefix_bonus(self) -> None:
        assert jaro("dwayne", "duane", use_winkler=True) == pytest.approx(0.84, abs=0.001)

    def test_use_winkler_matches_jaro_winkler(self) -> None:
        assert jaro("dixon", "dicksonx", use_winkler=True) == jaro_winkler("dixon", "dicksonx")

    def test_comparer_passthrough(self) -> None:
        score = jaro("ABC", "abc", comparer=lambda left, right: left.lower() == right.lower())
        assert score == pytest.approx(1.0)

    def test_returns_float(self) -> None:
        assert isinstance(jaro([1, 2, 3], [1, 3, 2]), float)


class TestJaroWinkler:
    """Tests for the jaro_winkler() function."""

    def test_default_parameters(self) -> None:
        assert jaro_winkler("martha", "marhta") == pytest.approx(0.961, abs=0.001)

    def test_config_metric_is_ignored(self) -> None:
        # A config left at metric=JARO still gets the prefix bonus here
        score = jaro_winkler("martha", "marhta", JaroConfig(metric=SimilarityMetric.JARO))
        assert score == pytest.approx(0.961, abs=0.001)

    def test_classic_config(self) -> None:
        score = jaro_winkler("cheeseburger", "cheese fries", JaroConfig.classic())
        assert score == pytest.approx(0.867, abs=0.001)

    def test_max_prefix_passthrough(self) -> None:
        score = jaro_winkler("cheeseburger", "cheese fries", JaroConfig(max_prefix=2))
        base = jaro("cheeseburger", "cheese fries")
        assert score == pytest.approx(base + 2 * 0.1 * (1 - base))

    def test_zero_scaling_factor_gives_jaro(self) -> None:
        score = jaro_winkler("martha", "marhta", JaroConfig(scaling_factor=0.0))
        assert score == pytest.approx(jaro("martha", "marhta"))

    def test_comparer_passthrough(self) -> None:
        score = jaro_winkler(
            "MARTHA", "marhta", comparer=lambda left, right: left.lower() == right.lower()
        )
        assert score == pytest.approx(0.961, abs=0.001)


class TestCompare:
    """Tests for the compare() function."""

    def test_returns_similarity_result(self) -> None:
        result = compare("martha", "marhta")
        assert isinstance(result, SimilarityResult)
        assert result.metric == SimilarityMetric.JARO

    def test_result_has_all_fields(self) -> None:
        result = compare("martha", "marhta", JaroConfig(metric=SimilarityMetric.JARO_WINKLER))
        assert result.similarity_score == pytest.approx(0.961, abs=0.001)
        assert result.jaro_score == pytest.approx(0.944, abs=0.001)
        assert result.matches == 6
        assert result.transpositions == 1
        assert result.prefix_length == 3
        assert result.left_length == 6
        assert result.right_length == 6
        assert result.computation_time_ms >= 0

    def test_no_global_state_between_calls(self) -> None:
        r1 = compare("dixon", "dicksonx")
        r2 = compare("dixon", "dicksonx")
        assert r1.similarity_score == r2.similarity_score


class TestIsSimilar:
    """Tests for the is_similar() function."""

    def test_identical_is_similar(self) -> None:
        assert is_similar("jaro", "jaro") is True

    def test_above_default_threshold(self) -> None:
        assert is_similar("martha", "marhta") is True

    def test_below_default_threshold(self) -> None:
        assert is_similar("dwayne", "duane") is False

    def test_custom_threshold(self) -> None:
        assert is_similar("dwayne", "duane", threshold=0.8) is True
        assert is_similar("jaro", "jaro", threshold=1.0) is True
        assert is_similar("a", "b", threshold=0.0) is True

    def test_config_passthrough(self) -> None:
        winkler = JaroConfig(metric=SimilarityMetric.JARO_WINKLER)
        assert is_similar("dixon", "dicksonx", threshold=0.8) is False
        assert is_similar("dixon", "dicksonx", threshold=0.8, config=winkler) is True

    def test_returns_bool_type(self) -> None:
        assert isinstance(is_similar("a", "b"), bool)

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range(self, threshold: float) -> None:
        with pytest.raises(ValueError, match="threshold"):
            is_similar("a", "b", threshold=threshold)


class TestTopLevelImports:
    """Tests that the public symbols are importable from the package root."""

    def test_all_symbols_importable(self) -> None:
        import jaro_similarity

        for name in (
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
        ):
            assert hasattr(jaro_similarity, name)

    def test_same_objects_as_submodules(self) -> None:
        from jaro_similarity.algorithm.jaro import MatchSummary as MS
        from jaro_similarity.comparator import JaroComparator as JC

        assert MS is MatchSummary
        assert JC is JaroComparator
        assert callable(similarity_matrix)
