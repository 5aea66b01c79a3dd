from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from sql_query_advisor.domain import PerformanceRecommendation, QueryMetrics, Severity
from sql_query_advisor.parsing import neutralize_string_literals, remove_comments


class TextSource(Enum):
    UPPER = "upper"
    WITHOUT_STRINGS = "without_strings"


@dataclass(frozen=True, slots=True)
class RuleContext:
    """Everything a rule may inspect for one query."""

    metrics: QueryMetrics
    sql_upper: str
    sql_without_strings: str

    @classmethod
    def from_sql(cls, sql: str, metrics: QueryMetrics) -> "RuleContext":
        without_comments = remove_comments(sql)
        return cls(
            metrics=metrics,
            sql_upper=without_comments.upper(),
            sql_without_strings=neutralize_string_literals(without_comments),
        )

    def text(self, source: TextSource) -> str:
        if source is TextSource.UPPER:
            return self.sql_upper
        return self.sql_without_strings


@runtime_checkable
class RecommendationRule(Protocol):
    """Protocol for recommendation rules."""

    @property
    def id(self) -> str:
        ...

    @property
    def severity(self) -> Severity:
        ...

    def evaluate(self, context: RuleContext) -> PerformanceRecommendation | None:
        ...
