"""Tests for domain models."""

import pytest

from sql_query_advisor.domain import (
    ComplexityLevel,
    PerformanceRecommendation,
    QueryAnalysisResult,
    QueryComplexity,
    QueryMetrics,
    Severity,
)


class TestSeverity:
    def test_severity_ordering(self) -> None:
        assert Severity.CRITICAL > Severity.WARNING > Severity.INFO

    def test_rank_puts_critical_first(self) -> None:
        assert Severity.CRITICAL.rank == 0
        assert Severity.WARNING.rank == 1
        assert Severity.INFO.rank == 2

    def test_label_is_lower_case_name(self) -> None:
        assert Severity.CRITICAL.label == "critical"
        assert Severity.INFO.label == "info"


class TestComplexityLevel:
    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (0, ComplexityLevel.LOW),
            (29, ComplexityLevel.LOW),
            (30, ComplexityLevel.MEDIUM),
            (59, ComplexityLevel.MEDIUM),
            (60, ComplexityLevel.HIGH),
            (100, ComplexityLevel.HIGH),
        ],
    )
    def test_from_score_thresholds(self, score: int, level: ComplexityLevel) -> None:
        assert ComplexityLevel.from_score(score) is level

    def test_values_are_lower_case(self) -> None:
        assert [level.value for level in ComplexityLevel] == ["low", "medium", "high"]


class TestQueryMetrics:
    def test_defaults_are_all_zero(self) -> None:
        metrics = QueryMetrics()
        assert metrics.table_count == 0
        assert metrics.join_count == 0
        assert metrics.column_count == 0
        assert metrics.is_select_star is False
        assert metrics.has_where is False

    def test_metrics_immutability(self) -> None:
        metrics = QueryMetrics(table_count=2)
        with pytest.raises(AttributeError):
            metrics.table_count = 3  # type: ignore[misc]


class TestQueryComplexity:
    def test_level_follows_score(self) -> None:
        assert QueryComplexity(score=45).level is ComplexityLevel.MEDIUM
        assert QueryComplexity(score=75).level is ComplexityLevel.HIGH

    @pytest.mark.parametrize("score", [-1, 101])
    def test_out_of_range_score_rejected(self, score: int) -> None:
        with pytest.raises(ValueError):
            QueryComplexity(score=score)

    def test_default_metrics(self) -> None:
        assert QueryComplexity(score=0).metrics == QueryMetrics()


class TestQueryAnalysisResult:
    def test_defaults_to_no_recommendations(self) -> None:
        result = QueryAnalysisResult(complexity=QueryComplexity(score=10))
        assert result.recommendations == ()

    def test_recommendation_suggestion_optional(self) -> None:
        rec = PerformanceRecommendation(
            id="x",
            severity=Severity.INFO,
            title="Title",
            description="Description",
        )
        assert rec.suggestion is None
