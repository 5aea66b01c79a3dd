from sql_query_advisor.domain import ComplexityLevel, QueryMetrics
from sql_query_advisor.domain.models import MAX_COMPLEXITY_SCORE

# (metric, points per unit, cap)
COUNT_WEIGHTS: tuple[tuple[str, int, int], ...] = (
    ("table_count", 5, 20),
    ("join_count", 5, 15),
    ("subquery_depth", 10, 20),
    ("aggregation_count", 3, 10),
)

FLAG_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("has_distinct", 5),
    ("has_group_by", 5),
    ("has_order_by", 3),
    ("is_select_star", 10),
)

# (column count strictly above, points), widest tier first
COLUMN_TIERS: tuple[tuple[int, int], ...] = (
    (20, 10),
    (10, 5),
)


def _column_points(column_count: int) -> int:
    for floor, points in COLUMN_TIERS:
        if column_count > floor:
            return points
    return 0


def calculate_complexity_score(metrics: QueryMetrics) -> int:
    score = 0
    for attribute, points, cap in COUNT_WEIGHTS:
        score += min(getattr(metrics, attribute) * points, cap)
    for attribute, points in FLAG_WEIGHTS:
        if getattr(metrics, attribute):
            score += points
    score += _column_points(metrics.column_count)
    return max(0, min(score, MAX_COMPLEXITY_SCORE))


def get_complexity_level(score: int) -> ComplexityLevel:
    return ComplexityLevel.from_score(score)
