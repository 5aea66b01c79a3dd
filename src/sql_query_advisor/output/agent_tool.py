from typing import Any

from sql_query_advisor.core import analyze_query
from sql_query_advisor.exceptions import QueryAdvisorError
from sql_query_advisor.output.serialization import result_to_dict


def analyze_query_tool(sql: Any) -> dict[str, Any]:
    """Agent-facing wrapper: rejected input becomes an ``error`` payload."""
    try:
        result = analyze_query(sql)
    except QueryAdvisorError as exc:
        return {"error": str(exc)}
    return result_to_dict(result)
