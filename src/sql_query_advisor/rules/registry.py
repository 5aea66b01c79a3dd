from collections.abc import Iterable

from sql_query_advisor.domain import PerformanceRecommendation
from sql_query_advisor.exceptions import DuplicateRuleError, UnknownRuleError
from sql_query_advisor.rules import metric_rules, pattern_rules
from sql_query_advisor.rules.base import RecommendationRule, RuleContext


class RuleRegistry:
    """Ordered collection of recommendation rules."""

    def __init__(self, rules: Iterable[RecommendationRule] = ()) -> None:
        self._rules: list[RecommendationRule] = []
        for rule in rules:
            self.register(rule)

    def register(self, rule: RecommendationRule) -> None:
        if any(existing.id == rule.id for existing in self._rules):
            raise DuplicateRuleError(rule.id)
        self._rules.append(rule)

    def unregister(self, rule_id: str) -> RecommendationRule:
        for index, rule in enumerate(self._rules):
            if rule.id == rule_id:
                return self._rules.pop(index)
        raise UnknownRuleError(rule_id)

    @property
    def rules(self) -> tuple[RecommendationRule, ...]:
        return tuple(self._rules)

    def evaluate(self, context: RuleContext) -> tuple[PerformanceRecommendation, ...]:
        """Run every rule and return what fired, most severe first.

        The sort is stable, so rules of equal severity keep registration order.
        """
        recommendations: list[PerformanceRecommendation] = []
        for rule in self._rules:
            result = rule.evaluate(context)
            if result is not None:
                recommendations.append(result)
        return tuple(sorted(recommendations, key=lambda rec: rec.severity.rank))


def default_registry() -> RuleRegistry:
    return RuleRegistry(
        [
            metric_rules.SELECT_STAR,
            metric_rules.ORDER_WITHOUT_LIMIT,
            metric_rules.LARGE_JOIN,
            metric_rules.DEEP_SUBQUERY,
            metric_rules.PREWHERE_OPPORTUNITY,
            metric_rules.MISSING_LIMIT,
            metric_rules.DISTINCT_MANY_COLUMNS,
            metric_rules.MANY_AGGREGATIONS_RULE,
            metric_rules.MANY_COLUMNS_RULE,
            metric_rules.CARTESIAN_PRODUCT,
            pattern_rules.LIKE_LEADING_WILDCARD,
            pattern_rules.NOT_IN_USAGE,
            pattern_rules.UNION_WITHOUT_ALL,
            pattern_rules.FUNCTION_ON_INDEXED_COLUMN,
            metric_rules.AGGREGATE_WITHOUT_GROUP_BY,
            pattern_rules.SUBQUERY_IN_SELECT,
            pattern_rules.LARGE_IN_LIST,
            pattern_rules.OrConditionRule(),
            pattern_rules.FINAL_USAGE,
            pattern_rules.COMPLEX_GROUP_BY,
        ]
    )
