from typing import Protocol, runtime_checkable

from sql_query_advisor.domain import QueryAnalysisResult


@runtime_checkable
class ReportOutput(Protocol):
    """Protocol for analysis report destinations."""

    @property
    def name(self) -> str:
        ...

    def send(self, result: QueryAnalysisResult) -> None:
        ...
