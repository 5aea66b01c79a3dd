from sql_query_advisor.output.agent_tool import analyze_query_tool
from sql_query_advisor.output.base import ReportOutput
from sql_query_advisor.output.console import ConsoleReportOutput
from sql_query_advisor.output.serialization import result_to_dict, result_to_json

__all__ = [
    "ConsoleReportOutput",
    "ReportOutput",
    "analyze_query_tool",
    "result_to_dict",
    "result_to_json",
]
