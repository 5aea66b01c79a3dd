import re

from sql_query_advisor.domain import QueryMetrics
from sql_query_advisor.parsing import (
    count_aggregations,
    count_joins,
    count_select_columns,
    count_subquery_depth,
    extract_cte_names,
    extract_main_query,
    extract_table_names,
    neutralize_string_literals,
    remove_comments,
)

_CLAUSE_FLAGS: dict[str, re.Pattern[str]] = {
    "has_distinct": re.compile(r"\bSELECT\s+DISTINCT\b", re.IGNORECASE),
    "has_group_by": re.compile(r"\bGROUP\s+BY\b", re.IGNORECASE),
    "has_order_by": re.compile(r"\bORDER\s+BY\b", re.IGNORECASE),
    "has_limit": re.compile(r"\bLIMIT\b", re.IGNORECASE),
    "has_prewhere": re.compile(r"\bPREWHERE\b", re.IGNORECASE),
    "has_where": re.compile(r"\bWHERE\b", re.IGNORECASE),
    "is_select_star": re.compile(r"\bSELECT\s+\*", re.IGNORECASE),
}


def extract_query_metrics(sql: str) -> QueryMetrics:
    """Measure a query without parsing it.

    Tables are collected over the whole statement minus CTE names; every
    other metric comes from the main query only.
    """
    without_comments = remove_comments(sql)
    cte_names = extract_cte_names(without_comments)
    main_query = extract_main_query(without_comments)
    main_without_strings = neutralize_string_literals(main_query)

    flags = {name: bool(pattern.search(main_without_strings)) for name, pattern in _CLAUSE_FLAGS.items()}

    return QueryMetrics(
        table_count=len(extract_table_names(without_comments, cte_names)),
        join_count=count_joins(main_query),
        subquery_depth=count_subquery_depth(main_query),
        aggregation_count=count_aggregations(main_query),
        column_count=count_select_columns(main_without_strings),
        **flags,
    )
