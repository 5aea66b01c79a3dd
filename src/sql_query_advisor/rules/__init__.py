from sql_query_advisor.rules.base import RecommendationRule, RuleContext, TextSource
from sql_query_advisor.rules.metric_rules import MetricRule
from sql_query_advisor.rules.pattern_rules import OrConditionRule, PatternRule
from sql_query_advisor.rules.registry import RuleRegistry, default_registry

__all__ = [
    "MetricRule",
    "OrConditionRule",
    "PatternRule",
    "RecommendationRule",
    "RuleContext",
    "RuleRegistry",
    "TextSource",
    "default_registry",
]
