import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from sql_query_advisor.domain import PerformanceRecommendation, QueryMetrics, Severity
from sql_query_advisor.rules.base import RuleContext, TextSource

MANY_OR_CONDITIONS = 3
LARGE_IN_LIST_CHARS = 500


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A rule that fires when a pattern occurs in the query text.

    An optional ``guard`` over the metrics must also hold.
    """

    id: str
    severity: Severity
    title: str
    description: str
    suggestion: str | None
    pattern: re.Pattern[str]
    source: TextSource = TextSource.WITHOUT_STRINGS
    guard: Callable[[QueryMetrics], bool] | None = None

    def evaluate(self, context: RuleContext) -> PerformanceRecommendation | None:
        if self.guard is not None and not self.guard(context.metrics):
            return None
        if not self.pattern.search(context.text(self.source)):
            return None
        return PerformanceRecommendation(
            id=self.id,
            severity=self.severity,
            title=self.title,
            description=self.description,
            suggestion=self.suggestion,
        )


class OrConditionRule:
    id: str = "many-or-conditions"
    severity: Severity = Severity.INFO

    _pattern: ClassVar[re.Pattern[str]] = re.compile(r"\bOR\b", re.IGNORECASE)

    def evaluate(self, context: RuleContext) -> PerformanceRecommendation | None:
        count = len(self._pattern.findall(context.sql_without_strings))
        if count <= MANY_OR_CONDITIONS:
            return None
        return PerformanceRecommendation(
            id=self.id,
            severity=self.severity,
            title="Multiple OR Conditions",
            description=f"Query has {count} OR conditions which can prevent index optimization.",
            suggestion="Consider rewriting OR conditions on the same column as IN clause for better index usage.",
        )


LIKE_LEADING_WILDCARD = PatternRule(
    id="like-leading-wildcard",
    severity=Severity.INFO,
    title="LIKE with Leading Wildcard",
    description="LIKE patterns starting with % or _ cannot use indexes and require full table scans.",
    suggestion=(
        "Consider using full-text search indexes, tokenbf_v1 index, or restructuring data "
        "for prefix matching."
    ),
    pattern=re.compile(r"LIKE\s+['\"][%_]"),
    source=TextSource.UPPER,
)

NOT_IN_USAGE = PatternRule(
    id="not-in-usage",
    severity=Severity.INFO,
    title="NOT IN/NOT EXISTS Usage",
    description="NOT IN and NOT EXISTS can be slow on large datasets as they require checking every value.",
    suggestion="Consider using LEFT JOIN with IS NULL check or anti-join patterns for better performance.",
    pattern=re.compile(r"\bNOT\s+(?:IN|EXISTS)\b"),
    source=TextSource.UPPER,
)

UNION_WITHOUT_ALL = PatternRule(
    id="union-without-all",
    severity=Severity.INFO,
    title="UNION Without ALL",
    description="UNION removes duplicates which requires sorting and comparison of all rows.",
    suggestion=(
        "Use UNION ALL if duplicates are acceptable or already impossible, avoiding the "
        "deduplication overhead."
    ),
    pattern=re.compile(r"\bUNION\b(?!\s+ALL)", re.IGNORECASE),
)

FUNCTION_ON_INDEXED_COLUMN = PatternRule(
    id="function-on-indexed-column",
    severity=Severity.INFO,
    title="Function Applied to Column in WHERE",
    description="Applying functions to columns in WHERE clause prevents index usage.",
    suggestion=(
        "Store pre-computed values or use expression indexes. Example: instead of "
        "toDate(timestamp) = '2024-01-01', filter on timestamp range."
    ),
    pattern=re.compile(
        r"WHERE[^;]*\b(?:toDate|toString|lower|upper|toYear|toMonth)\s*\([^)]*\)",
        re.IGNORECASE,
    ),
)

# [^FROM] is a character class, not a word: kept as the rule has always matched.
SUBQUERY_IN_SELECT = PatternRule(
    id="subquery-in-select",
    severity=Severity.INFO,
    title="Subquery in SELECT Clause",
    description="Correlated subqueries in SELECT are executed for each row, which can be very slow.",
    suggestion=(
        "Rewrite using JOINs or window functions for better performance. CTEs can also help "
        "organize the query."
    ),
    pattern=re.compile(r"SELECT[^FROM]*\(\s*SELECT\b", re.IGNORECASE),
)

LARGE_IN_LIST = PatternRule(
    id="large-in-list",
    severity=Severity.INFO,
    title="Large IN List",
    description="IN clause with many values can be slow and hard to maintain.",
    suggestion="Consider using a temporary table, JOIN with a values list, or hasAny() for arrays.",
    pattern=re.compile(rf"\bIN\s*\([^)]{{{LARGE_IN_LIST_CHARS},}}\)", re.IGNORECASE),
)

FINAL_USAGE = PatternRule(
    id="final-usage",
    severity=Severity.INFO,
    title="FINAL Clause Usage",
    description=(
        "FINAL forces merge of all parts before returning results, which can be slow on "
        "large tables."
    ),
    suggestion=(
        "Consider using OPTIMIZE TABLE periodically, or design queries to handle duplicates "
        "with aggregation."
    ),
    pattern=re.compile(r"\bFINAL\b"),
    source=TextSource.UPPER,
)

COMPLEX_GROUP_BY = PatternRule(
    id="complex-group-by",
    severity=Severity.INFO,
    title="Complex Expression in GROUP BY",
    description="Functions in GROUP BY are computed for every row, impacting performance.",
    suggestion=(
        "Pre-compute complex expressions in a CTE or subquery, or store computed values in "
        "the table."
    ),
    pattern=re.compile(r"GROUP\s+BY[^;]*\([^)]+\)", re.IGNORECASE),
    guard=lambda m: m.has_group_by,
)
