import pytest

from sql_query_advisor import (
    ComplexityLevel,
    InvalidQueryError,
    QueryMetrics,
    analyze_query,
    analyze_query_complexity,
    generate_recommendations,
    result_to_json,
)

EDGE_CASE_QUERIES = [
    "",
    "(((((((",
    ")))) SELECT",
    "SELECT",
    "'unterminated string",
    "SELECT 1 /* open comment",
    "WITH",
    "WITH x AS (",
    "WITH x AS (SELECT 1",
    "not sql at all, just words FROM nowhere JOIN",
    "SELECT \"a\" FROM \"t\" WHERE 'x' = \"y",
]

HEAVY_QUERY = """
WITH recent AS (
    SELECT user_id, max(created_at) AS last_seen FROM events GROUP BY user_id
)
SELECT DISTINCT u.id, u.name, u.email, u.country, u.plan, u.created_at, count(o.id), sum(o.total),
       (SELECT p.amount FROM payments p WHERE p.user_id IN
            (SELECT u2.id FROM users u2 WHERE u2.id IN (SELECT 1)))
FROM users u
LEFT JOIN orders o ON o.user_id = u.id
INNER JOIN recent r ON r.user_id = u.id
JOIN regions g ON g.code = u.country
JOIN plans pl ON pl.id = u.plan
WHERE lower(u.email) LIKE '%@example.com' OR u.plan = 1 OR u.plan = 2 OR u.plan = 3 OR u.plan = 4
GROUP BY toDate(u.created_at)
ORDER BY u.id
"""


def severity_ranks(sql: str) -> list[int]:
    return [rec.severity.rank for rec in analyze_query(sql).recommendations]


class TestScoreProperties:
    @pytest.mark.parametrize("sql", EDGE_CASE_QUERIES + [HEAVY_QUERY])
    def test_score_in_range_and_level_consistent(self, sql: str) -> None:
        complexity = analyze_query(sql).complexity
        assert 0 <= complexity.score <= 100
        assert complexity.level is ComplexityLevel.from_score(complexity.score)

    @pytest.mark.parametrize("sql", EDGE_CASE_QUERIES + [HEAVY_QUERY])
    def test_recommendations_ordered_by_severity(self, sql: str) -> None:
        ranks = severity_ranks(sql)
        assert ranks == sorted(ranks)

    def test_heavy_query_is_high(self) -> None:
        result = analyze_query(HEAVY_QUERY)
        assert result.complexity.level is ComplexityLevel.HIGH
        ids = [rec.id for rec in result.recommendations]
        assert ids[:3] == ["order-without-limit", "large-join", "deep-subquery"]
        assert "many-or-conditions" in ids
        assert "complex-group-by" in ids
        assert "like-leading-wildcard" in ids


class TestDocumentedExamples:
    def test_cte_name_not_counted_as_table(self) -> None:
        result = analyze_query("WITH x AS (SELECT 1) SELECT * FROM x")
        assert result.complexity.metrics.table_count == 0

    def test_select_star(self) -> None:
        result = analyze_query("SELECT * FROM t")
        metrics = result.complexity.metrics
        assert metrics.is_select_star is True
        assert metrics.column_count == 0
        assert result.recommendations[0].id == "select-star"

    def test_order_by_without_limit(self) -> None:
        ids = {rec.id for rec in analyze_query("SELECT a,b,c FROM t ORDER BY a").recommendations}
        assert {"order-without-limit", "missing-limit"} <= ids

    def test_three_joins(self) -> None:
        sql = (
            "SELECT a FROM t1 JOIN t2 ON t1.id=t2.id JOIN t3 ON t2.id=t3.id "
            "JOIN t4 ON t3.id=t4.id"
        )
        result = analyze_query(sql)
        assert result.complexity.metrics.join_count == 3
        assert result.complexity.metrics.table_count == 4
        assert result.complexity.score == 35
        assert "large-join" in [rec.id for rec in result.recommendations]

    def test_nested_scalar_subqueries(self) -> None:
        assert analyze_query("SELECT (SELECT (SELECT 1))").complexity.metrics.subquery_depth == 2

    def test_clean_query_has_no_recommendations(self) -> None:
        result = analyze_query("SELECT id, name FROM users PREWHERE id = 1 LIMIT 10")
        assert result.recommendations == ()

    def test_chained_cte_not_counted_as_table(self) -> None:
        sql = "WITH a AS (SELECT 1), b AS (SELECT * FROM a) SELECT * FROM a JOIN b ON 1=1"
        assert analyze_query(sql).complexity.metrics.table_count == 0

    @pytest.mark.parametrize(
        "sql",
        ["SELECT a FROM t;", "SELECT x FROM (SELECT x FROM t) s LIMIT 1"],
    )
    def test_single_table_is_not_a_cartesian_product(self, sql: str) -> None:
        result = analyze_query(sql)
        assert result.complexity.metrics.table_count == 1
        assert "cartesian-product" not in [rec.id for rec in result.recommendations]


class TestInvariance:
    @pytest.mark.parametrize(
        ("plain", "commented"),
        [
            ("SELECT a, b FROM t WHERE x = 1", "SELECT a, b -- pick columns\nFROM t WHERE x = 1"),
            (
                "SELECT a FROM t1 JOIN t2 ON t1.id = t2.id",
                "SELECT a FROM t1 /* JOIN t3 ON 1 = 1 */ JOIN t2 ON t1.id = t2.id",
            ),
            ("SELECT count(*) FROM t GROUP BY a", "SELECT count(*) FROM t -- sum(b)\nGROUP BY a"),
        ],
    )
    def test_comments_do_not_affect_metrics(self, plain: str, commented: str) -> None:
        assert analyze_query(plain).complexity.metrics == analyze_query(commented).complexity.metrics

    def test_idempotent(self) -> None:
        first = analyze_query(HEAVY_QUERY)
        second = analyze_query(HEAVY_QUERY)
        assert first == second
        assert result_to_json(first) == result_to_json(second)


class TestEntryPoints:
    def test_complexity_and_recommendations_compose(self) -> None:
        sql = "SELECT DISTINCT a, b FROM t ORDER BY a"
        complexity = analyze_query_complexity(sql)
        recommendations = generate_recommendations(sql, complexity.metrics)
        assert analyze_query(sql).complexity == complexity
        assert analyze_query(sql).recommendations == recommendations

    def test_none_is_degenerate(self) -> None:
        result = analyze_query(None)
        assert result.complexity.metrics == QueryMetrics()
        assert result.recommendations == ()

    def test_non_string_rejected_before_scanning(self) -> None:
        with pytest.raises(InvalidQueryError):
            analyze_query(12345)  # type: ignore[arg-type]

    def test_long_whitespace_run_completes(self) -> None:
        result = analyze_query("SELECT a," + " " * 200_000 + "b FROM t LIMIT 1")
        assert result.complexity.metrics.column_count == 2
