from collections.abc import Callable
from dataclasses import dataclass

from sql_query_advisor.domain import PerformanceRecommendation, QueryMetrics, Severity
from sql_query_advisor.rules.base import RuleContext

EXCESSIVE_JOIN_THRESHOLD = 2
MAX_SUBQUERY_DEPTH = 2
WIDE_DISTINCT_COLUMNS = 5
MANY_AGGREGATIONS = 5
MANY_COLUMNS = 20


@dataclass(frozen=True, slots=True)
class MetricRule:
    """A rule that fires on a predicate over the query metrics.

    ``description`` is either fixed text or built from the metrics.
    """

    id: str
    severity: Severity
    title: str
    description: str | Callable[[QueryMetrics], str]
    suggestion: str | None
    predicate: Callable[[QueryMetrics], bool]

    def evaluate(self, context: RuleContext) -> PerformanceRecommendation | None:
        metrics = context.metrics
        if not self.predicate(metrics):
            return None
        description = self.description if isinstance(self.description, str) else self.description(metrics)
        return PerformanceRecommendation(
            id=self.id,
            severity=self.severity,
            title=self.title,
            description=description,
            suggestion=self.suggestion,
        )


SELECT_STAR = MetricRule(
    id="select-star",
    severity=Severity.CRITICAL,
    title="SELECT * Usage Detected",
    description=(
        "Query uses SELECT * which retrieves all columns from the table, "
        "increasing I/O and memory usage."
    ),
    suggestion=(
        "Select only the columns you need. This reduces data transfer, improves cache "
        "efficiency, and speeds up queries significantly."
    ),
    predicate=lambda m: m.is_select_star,
)

ORDER_WITHOUT_LIMIT = MetricRule(
    id="order-without-limit",
    severity=Severity.CRITICAL,
    title="ORDER BY Without LIMIT",
    description=(
        "Sorting the entire result set without LIMIT requires loading all data into "
        "memory before returning results."
    ),
    suggestion=(
        "Add LIMIT clause to reduce memory usage and return results faster. If you need "
        "all sorted data, consider using external sorting or pagination."
    ),
    predicate=lambda m: m.has_order_by and not m.has_limit,
)

LARGE_JOIN = MetricRule(
    id="large-join",
    severity=Severity.CRITICAL,
    title="Multiple Table Joins",
    description=lambda m: (
        f"Query joins {m.join_count + 1} tables. Each additional join multiplies the "
        "potential result set and increases memory usage."
    ),
    suggestion=(
        "Consider denormalization, materialized views, or splitting into multiple queries. "
        "Use GLOBAL joins only when necessary."
    ),
    predicate=lambda m: m.join_count > EXCESSIVE_JOIN_THRESHOLD,
)

DEEP_SUBQUERY = MetricRule(
    id="deep-subquery",
    severity=Severity.CRITICAL,
    title="Deeply Nested Subqueries",
    description=lambda m: (
        f"Query has {m.subquery_depth} levels of nested subqueries, which can prevent "
        "query optimization."
    ),
    suggestion="Rewrite using CTEs (WITH clause) or JOINs for better query planning and readability.",
    predicate=lambda m: m.subquery_depth > MAX_SUBQUERY_DEPTH,
)

PREWHERE_OPPORTUNITY = MetricRule(
    id="prewhere-opportunity",
    severity=Severity.WARNING,
    title="PREWHERE Optimization Available",
    description=(
        "PREWHERE filters data before reading all columns, reducing I/O significantly "
        "for selective queries."
    ),
    suggestion=(
        "Move highly selective filter conditions to PREWHERE clause. Best for columns in "
        "the primary key or with low cardinality."
    ),
    predicate=lambda m: m.has_where and not m.has_prewhere,
)

MISSING_LIMIT = MetricRule(
    id="missing-limit",
    severity=Severity.WARNING,
    title="No LIMIT Clause",
    description=(
        "Query may return millions of rows without a LIMIT clause, causing high memory "
        "usage and slow response."
    ),
    suggestion=(
        "Add LIMIT for exploratory queries. For exports, consider using async queries or "
        "chunked downloads."
    ),
    predicate=lambda m: not m.has_limit and not m.has_group_by and m.aggregation_count == 0,
)

DISTINCT_MANY_COLUMNS = MetricRule(
    id="distinct-many-columns",
    severity=Severity.WARNING,
    title="DISTINCT with Many Columns",
    description=lambda m: (
        f"DISTINCT on {m.column_count} columns requires hashing all values, using "
        "significant memory."
    ),
    suggestion="Reduce columns in SELECT or use GROUP BY with specific columns for better performance.",
    predicate=lambda m: m.has_distinct and m.column_count > WIDE_DISTINCT_COLUMNS,
)

MANY_AGGREGATIONS_RULE = MetricRule(
    id="many-aggregations",
    severity=Severity.WARNING,
    title="Many Aggregation Functions",
    description=lambda m: (
        f"Query uses {m.aggregation_count} aggregation functions, increasing computation time."
    ),
    suggestion=(
        "Consider splitting into multiple queries or using materialized views for "
        "pre-computed aggregates."
    ),
    predicate=lambda m: m.aggregation_count > MANY_AGGREGATIONS,
)

MANY_COLUMNS_RULE = MetricRule(
    id="many-columns",
    severity=Severity.WARNING,
    title="Many Columns Selected",
    description=lambda m: (
        f"Query selects {m.column_count} columns, increasing data transfer and processing time."
    ),
    suggestion=(
        "Review if all columns are necessary. Consider using column aliases or computed "
        "columns only when needed."
    ),
    predicate=lambda m: m.column_count > MANY_COLUMNS,
)

CARTESIAN_PRODUCT = MetricRule(
    id="cartesian-product",
    severity=Severity.WARNING,
    title="Potential Cartesian Product",
    description=(
        "Multiple tables without explicit JOIN conditions may create a Cartesian product "
        "(all possible row combinations)."
    ),
    suggestion=(
        "Add explicit JOIN conditions or WHERE clauses to link tables. Use CROSS JOIN only "
        "when intentional."
    ),
    predicate=lambda m: m.table_count > 1 and m.join_count == 0,
)

AGGREGATE_WITHOUT_GROUP_BY = MetricRule(
    id="aggregate-without-groupby",
    severity=Severity.INFO,
    title="Aggregation Without GROUP BY",
    description="Query has both aggregate functions and non-aggregated columns without GROUP BY.",
    suggestion=(
        "Add GROUP BY for non-aggregated columns, or wrap non-aggregated columns in "
        "aggregate functions like any() or max()."
    ),
    predicate=lambda m: (
        m.aggregation_count > 0 and not m.has_group_by and m.column_count > m.aggregation_count
    ),
)
