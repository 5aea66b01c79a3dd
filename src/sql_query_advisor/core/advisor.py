import logging

from sql_query_advisor.complexity import (
    calculate_complexity_score,
    extract_query_metrics,
)
from sql_query_advisor.domain import (
    PerformanceRecommendation,
    QueryAnalysisResult,
    QueryComplexity,
    QueryMetrics,
)
from sql_query_advisor.exceptions import InvalidQueryError
from sql_query_advisor.rules import RuleContext, RuleRegistry, default_registry

logger = logging.getLogger(__name__)

SQL_PREVIEW_LENGTH = 50


def _preview(sql: str) -> str:
    if len(sql) > SQL_PREVIEW_LENGTH:
        return sql[:SQL_PREVIEW_LENGTH] + "..."
    return sql


def _require_sql(sql: object) -> str:
    if sql is None:
        return ""
    if not isinstance(sql, str):
        logger.warning("Rejected query argument of type %s", type(sql).__name__)
        raise InvalidQueryError(sql)
    return sql


class QueryAdvisor:
    """Computes complexity and recommendations for SQL text.

    Holds no per-query state; a single instance may serve concurrent callers
    as long as its registry is not modified meanwhile.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def analyze_complexity(self, sql: str | None) -> QueryComplexity:
        text = _require_sql(sql)
        if not text.strip():
            return QueryComplexity(score=0)
        metrics = extract_query_metrics(text)
        return QueryComplexity(score=calculate_complexity_score(metrics), metrics=metrics)

    def recommend(
        self, sql: str | None, metrics: QueryMetrics
    ) -> tuple[PerformanceRecommendation, ...]:
        text = _require_sql(sql)
        if not text.strip():
            return ()
        return self._registry.evaluate(RuleContext.from_sql(text, metrics))

    def analyze(self, sql: str | None) -> QueryAnalysisResult:
        text = _require_sql(sql)
        complexity = self.analyze_complexity(text)
        recommendations = self.recommend(text, complexity.metrics)
        logger.debug(
            "Analyzed %r: score=%d level=%s recommendations=%s",
            _preview(text),
            complexity.score,
            complexity.level.value,
            [rec.id for rec in recommendations],
        )
        return QueryAnalysisResult(complexity=complexity, recommendations=recommendations)


_default_advisor = QueryAdvisor()


def analyze_query(sql: str | None) -> QueryAnalysisResult:
    return _default_advisor.analyze(sql)


def analyze_query_complexity(sql: str | None) -> QueryComplexity:
    return _default_advisor.analyze_complexity(sql)


def generate_recommendations(
    sql: str | None, metrics: QueryMetrics
) -> tuple[PerformanceRecommendation, ...]:
    return _default_advisor.recommend(sql, metrics)
