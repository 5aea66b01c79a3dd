"""JSON-ready views of analysis results.

Field names follow the camelCase shape consumed by API and agent callers.
"""

import json
from dataclasses import asdict
from typing import Any

from sql_query_advisor.domain import (
    PerformanceRecommendation,
    QueryAnalysisResult,
    QueryComplexity,
)


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def complexity_to_dict(complexity: QueryComplexity) -> dict[str, Any]:
    return {
        "score": complexity.score,
        "level": complexity.level.value,
        "metrics": {_camel_case(key): value for key, value in asdict(complexity.metrics).items()},
    }


def recommendation_to_dict(recommendation: PerformanceRecommendation) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": recommendation.id,
        "severity": recommendation.severity.label,
        "title": recommendation.title,
        "description": recommendation.description,
    }
    if recommendation.suggestion is not None:
        data["suggestion"] = recommendation.suggestion
    return data


def result_to_dict(result: QueryAnalysisResult) -> dict[str, Any]:
    return {
        "complexity": complexity_to_dict(result.complexity),
        "recommendations": [recommendation_to_dict(rec) for rec in result.recommendations],
    }


def result_to_json(result: QueryAnalysisResult, indent: int | None = None) -> str:
    return json.dumps(result_to_dict(result), indent=indent)
