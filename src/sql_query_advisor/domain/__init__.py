"""Domain models for query complexity analysis and recommendations."""

from sql_query_advisor.domain.models import (
    ComplexityLevel,
    PerformanceRecommendation,
    QueryAnalysisResult,
    QueryComplexity,
    QueryMetrics,
    Severity,
)

__all__ = [
    "ComplexityLevel",
    "PerformanceRecommendation",
    "QueryAnalysisResult",
    "QueryComplexity",
    "QueryMetrics",
    "Severity",
]
