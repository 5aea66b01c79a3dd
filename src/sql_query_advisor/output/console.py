import sys
from typing import TextIO

from sql_query_advisor.domain import QueryAnalysisResult
from sql_query_advisor.domain.models import MAX_COMPLEXITY_SCORE


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class ConsoleReportOutput:
    """Console output adapter for analysis reports."""

    def __init__(self, prefix: str = "[ANALYSIS]", stream: TextIO | None = None) -> None:
        self._prefix = prefix
        self._stream = stream

    @property
    def name(self) -> str:
        return "console"

    def send(self, result: QueryAnalysisResult) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        complexity = result.complexity
        metrics = complexity.metrics

        print(
            f"{self._prefix} {complexity.level.value} {complexity.score}/{MAX_COMPLEXITY_SCORE}"
            f" - {len(result.recommendations)} recommendation(s)",
            file=stream,
        )

        columns = "All (*)" if metrics.is_select_star else str(metrics.column_count)
        rows = (
            ("Tables", str(metrics.table_count)),
            ("Joins", str(metrics.join_count)),
            ("Subquery Depth", str(metrics.subquery_depth)),
            ("Aggregations", str(metrics.aggregation_count)),
            ("Columns", columns),
            ("DISTINCT", _yes_no(metrics.has_distinct)),
            ("GROUP BY", _yes_no(metrics.has_group_by)),
            ("ORDER BY", _yes_no(metrics.has_order_by)),
        )
        for label, value in rows:
            print(f"  {label}: {value}", file=stream)

        for rec in result.recommendations:
            print(f"  [{rec.severity.name}] {rec.title}", file=stream)
            if rec.suggestion:
                print(f"      {rec.suggestion}", file=stream)
