import re
from collections.abc import Collection
from dataclasses import dataclass

from sql_query_advisor.parsing.normalizer import LiteralTracker, neutralize_string_literals
from sql_query_advisor.parsing.vocabulary import (
    AGGREGATE_CALL_PATTERN,
    JOIN_PATTERN,
    TABLE_LIST_STOP_WORDS,
)

_QUALIFIED_NAME = r"([`\"]?\w+[`\"]?(?:\.[`\"]?\w+[`\"]?)?)"
_FROM_TABLE = re.compile(rf"\bFROM\s+(?!\s*\(){_QUALIFIED_NAME}", re.IGNORECASE)
_JOIN_TABLE = re.compile(rf"\bJOIN\s+(?!\s*\(){_QUALIFIED_NAME}", re.IGNORECASE)
_FROM_TABLE_LIST = re.compile(r"\bFROM\s+([^,\s]+(?:\s*,\s*[^,\s(]+)*)", re.IGNORECASE)
_IDENTIFIER_QUOTES = re.compile(r"[`\"]")
_LIST_ITEM_NAME = re.compile(rf"\s*{_QUALIFIED_NAME}")

_SUBQUERY_START = re.compile(r"\s*SELECT\b", re.IGNORECASE)
_SELECT_LIST_START = re.compile(r"\bSELECT\s+", re.IGNORECASE)
_FROM_WORD = re.compile(r"FROM\b", re.IGNORECASE)
_STAR_ONLY = re.compile(r"^\s*\*\s*$")


def _clean_table_name(raw: str) -> str:
    return _IDENTIFIER_QUOTES.sub("", raw).lower()


def _is_table_name(name: str, cte_names: Collection[str]) -> bool:
    return bool(name) and name not in cte_names and "(" not in name


def extract_table_names(sql: str, cte_names: Collection[str] = frozenset()) -> set[str]:
    """Collect distinct table names following FROM, JOIN and FROM comma lists.

    Names are lower-cased with identifier quotes removed. CTE names and
    subquery starts are skipped.
    """
    text = neutralize_string_literals(sql)
    tables: set[str] = set()

    for pattern in (_FROM_TABLE, _JOIN_TABLE):
        for match in pattern.finditer(text):
            name = _clean_table_name(match.group(1))
            if _is_table_name(name, cte_names):
                tables.add(name)

    for match in _FROM_TABLE_LIST.finditer(text):
        for item in match.group(1).split(","):
            item_name = _LIST_ITEM_NAME.match(item)
            if item_name is None:
                continue
            name = _clean_table_name(item_name.group(1))
            if _is_table_name(name, cte_names) and name not in TABLE_LIST_STOP_WORDS:
                tables.add(name)

    return tables


def count_joins(sql: str) -> int:
    """Count join introducers; ``LEFT OUTER JOIN`` and friends count once."""
    return len(JOIN_PATTERN.findall(neutralize_string_literals(sql)))


def count_aggregations(sql: str) -> int:
    return len(AGGREGATE_CALL_PATTERN.findall(neutralize_string_literals(sql)))


@dataclass(slots=True)
class SubqueryDepthCounter:
    """Nesting of parentheses that directly open a ``SELECT``.

    Any closing parenthesis unwinds one level, mirroring the scan it was
    written for: plain grouping parentheses never add depth.
    """

    depth: int = 0
    max_depth: int = 0

    def open_subquery(self) -> None:
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)

    def close_paren(self) -> None:
        if self.depth > 0:
            self.depth -= 1


def count_subquery_depth(sql: str) -> int:
    tracker = LiteralTracker()
    counter = SubqueryDepthCounter()
    for index, char in enumerate(sql):
        if not tracker.step(sql, index):
            continue
        if char == "(":
            if _SUBQUERY_START.match(sql, index + 1):
                counter.open_subquery()
        elif char == ")":
            counter.close_paren()
    return counter.max_depth


def _select_clause(sql: str) -> str | None:
    start = _SELECT_LIST_START.search(sql)
    if start is None:
        return None

    depth = 0
    for index in range(start.end(), len(sql)):
        char = sql[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif (
            depth == 0
            and index > start.end()
            and sql[index - 1].isspace()
            and _FROM_WORD.match(sql, index)
        ):
            return sql[start.end():index].rstrip()
    return None


def count_select_columns(sql: str) -> int:
    """Count top-level items between the first SELECT and its FROM.

    Returns 0 for ``SELECT *`` and for queries without a FROM clause.
    """
    clause = _select_clause(sql)
    if clause is None or _STAR_ONLY.match(clause):
        return 0

    count = 1
    depth = 0
    for char in clause:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            count += 1
    return count
