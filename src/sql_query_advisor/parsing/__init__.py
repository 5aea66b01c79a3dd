"""Best-effort structural heuristics over raw SQL text.

Nothing here is a grammar: every function scans or pattern-matches text and
falls back to an empty or zero answer when the input does not fit.
"""

from sql_query_advisor.parsing.cte import extract_cte_names, extract_main_query
from sql_query_advisor.parsing.extractors import (
    count_aggregations,
    count_joins,
    count_select_columns,
    count_subquery_depth,
    extract_table_names,
)
from sql_query_advisor.parsing.normalizer import neutralize_string_literals, remove_comments

__all__ = [
    "count_aggregations",
    "count_joins",
    "count_select_columns",
    "count_subquery_depth",
    "extract_cte_names",
    "extract_main_query",
    "extract_table_names",
    "neutralize_string_literals",
    "remove_comments",
]
