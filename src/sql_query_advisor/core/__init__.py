from sql_query_advisor.core.advisor import (
    QueryAdvisor,
    analyze_query,
    analyze_query_complexity,
    generate_recommendations,
)

__all__ = [
    "QueryAdvisor",
    "analyze_query",
    "analyze_query_complexity",
    "generate_recommendations",
]
