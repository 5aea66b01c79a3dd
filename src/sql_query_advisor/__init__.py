__version__ = "0.1.0"

from sql_query_advisor.core import (
    QueryAdvisor,
    analyze_query,
    analyze_query_complexity,
    generate_recommendations,
)
from sql_query_advisor.domain import (
    ComplexityLevel,
    PerformanceRecommendation,
    QueryAnalysisResult,
    QueryComplexity,
    QueryMetrics,
    Severity,
)
from sql_query_advisor.exceptions import (
    DuplicateRuleError,
    InvalidQueryError,
    QueryAdvisorError,
    UnknownRuleError,
)
from sql_query_advisor.output import ConsoleReportOutput, result_to_dict, result_to_json
from sql_query_advisor.rules import RuleRegistry, default_registry

__all__ = [
    "__version__",
    "analyze_query",
    "analyze_query_complexity",
    "generate_recommendations",
    "QueryAdvisor",
    "QueryAnalysisResult",
    "QueryComplexity",
    "QueryMetrics",
    "PerformanceRecommendation",
    "ComplexityLevel",
    "Severity",
    "RuleRegistry",
    "default_registry",
    "QueryAdvisorError",
    "InvalidQueryError",
    "DuplicateRuleError",
    "UnknownRuleError",
    "ConsoleReportOutput",
    "result_to_dict",
    "result_to_json",
]
