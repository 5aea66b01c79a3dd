from sql_query_advisor.complexity.metrics import extract_query_metrics
from sql_query_advisor.complexity.scoring import calculate_complexity_score, get_complexity_level

__all__ = [
    "calculate_complexity_score",
    "extract_query_metrics",
    "get_complexity_level",
]
