import pytest

from sql_query_advisor.domain import PerformanceRecommendation, QueryMetrics, Severity
from sql_query_advisor.exceptions import DuplicateRuleError, UnknownRuleError
from sql_query_advisor.rules import RuleContext, RuleRegistry, default_registry


class MockRule:
    """Mock implementation of RecommendationRule for testing."""

    def __init__(self, rule_id: str, severity: Severity, fires: bool = True) -> None:
        self.id = rule_id
        self.severity = severity
        self._fires = fires

    def evaluate(self, context: RuleContext) -> PerformanceRecommendation | None:
        if not self._fires:
            return None
        return PerformanceRecommendation(
            id=self.id,
            severity=self.severity,
            title=self.id,
            description=self.id,
        )


@pytest.fixture
def context() -> RuleContext:
    return RuleContext.from_sql("SELECT 1", QueryMetrics())


class TestRuleRegistry:
    def test_register_adds_rule(self) -> None:
        registry = RuleRegistry()
        rule = MockRule("one", Severity.INFO)

        registry.register(rule)

        assert len(registry.rules) == 1
        assert registry.rules[0] is rule

    def test_rules_returns_tuple(self) -> None:
        registry = RuleRegistry([MockRule("one", Severity.INFO)])
        assert isinstance(registry.rules, tuple)

    def test_duplicate_id_rejected(self) -> None:
        registry = RuleRegistry([MockRule("one", Severity.INFO)])
        with pytest.raises(DuplicateRuleError) as exc_info:
            registry.register(MockRule("one", Severity.WARNING))
        assert exc_info.value.rule_id == "one"
        assert isinstance(exc_info.value, ValueError)

    def test_unregister_returns_rule(self) -> None:
        rule = MockRule("one", Severity.INFO)
        registry = RuleRegistry([rule, MockRule("two", Severity.INFO)])

        removed = registry.unregister("one")

        assert removed is rule
        assert [r.id for r in registry.rules] == ["two"]

    def test_unregister_unknown_id(self) -> None:
        with pytest.raises(UnknownRuleError):
            RuleRegistry().unregister("missing")

    def test_unknown_rule_error_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            RuleRegistry().unregister("missing")

    def test_evaluate_empty_registry(self, context: RuleContext) -> None:
        assert RuleRegistry().evaluate(context) == ()

    def test_evaluate_excludes_silent_rules(self, context: RuleContext) -> None:
        registry = RuleRegistry(
            [
                MockRule("fires", Severity.WARNING),
                MockRule("silent", Severity.CRITICAL, fires=False),
            ]
        )
        assert [rec.id for rec in registry.evaluate(context)] == ["fires"]

    def test_evaluate_sorts_by_severity_stably(self, context: RuleContext) -> None:
        registry = RuleRegistry(
            [
                MockRule("info-1", Severity.INFO),
                MockRule("critical-1", Severity.CRITICAL),
                MockRule("warning-1", Severity.WARNING),
                MockRule("info-2", Severity.INFO),
                MockRule("critical-2", Severity.CRITICAL),
            ]
        )

        ids = [rec.id for rec in registry.evaluate(context)]

        assert ids == ["critical-1", "critical-2", "warning-1", "info-1", "info-2"]


class TestDefaultRegistry:
    def test_complete_rule_set_in_order(self) -> None:
        ids = [rule.id for rule in default_registry().rules]
        assert ids == [
            "select-star",
            "order-without-limit",
            "large-join",
            "deep-subquery",
            "prewhere-opportunity",
            "missing-limit",
            "distinct-many-columns",
            "many-aggregations",
            "many-columns",
            "cartesian-product",
            "like-leading-wildcard",
            "not-in-usage",
            "union-without-all",
            "function-on-indexed-column",
            "aggregate-without-groupby",
            "subquery-in-select",
            "large-in-list",
            "many-or-conditions",
            "final-usage",
            "complex-group-by",
        ]

    def test_each_call_returns_fresh_registry(self) -> None:
        first = default_registry()
        first.unregister("select-star")
        assert len(default_registry().rules) == 20
