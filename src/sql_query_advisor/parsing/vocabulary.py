"""Static keyword tables shared by the structural heuristics.

Extending dialect coverage should only mean adding entries here.
"""

import re

# Standard SQL plus ClickHouse aggregates. ANY is left out on purpose: it
# collides with the ANY JOIN syntax.
AGGREGATE_FUNCTIONS: tuple[str, ...] = (
    "COUNT", "SUM", "AVG", "MIN", "MAX", "GROUP_CONCAT",
    "ANYIF", "ANYLAST", "ARGMIN", "ARGMAX",
    "QUANTILE", "QUANTILES", "QUANTILETIMING", "QUANTILEEXACT", "QUANTILEDETERMINISTIC",
    "MEDIAN", "UNIQ", "UNIQEXACT", "UNIQCOMBINED", "UNIQCOMBINED64", "UNIQHLL12", "UNIQTHETA",
    "GROUPARRAY", "GROUPUNIQARRAY", "GROUPARRAYINSERTAT", "GROUPARRAYSAMPLE",
    "GROUPBITAND", "GROUPBITOR", "GROUPBITXOR",
    "SUMWITHOVERFLOW", "SUMMAP", "AVGWEIGHTED",
    "STDDEVPOP", "STDDEVSAMP", "VARPOP", "VARSAMP",
    "COVARPOP", "COVARSAMP", "CORR", "ENTROPY",
    "SIMPLELINEARREGRESSION", "STOCHASTICLINEARREGRESSION",
    "TOPK", "TOPKWEIGHTED",
    "FIRST_VALUE", "LAST_VALUE", "NTH_VALUE",
)

# [GLOBAL] [ANY|ALL] [INNER|LEFT|RIGHT|FULL|CROSS|NATURAL|ASYNC] [OUTER] JOIN
JOIN_PREFIXES: tuple[tuple[str, ...], ...] = (
    ("GLOBAL",),
    ("ANY", "ALL"),
    ("INNER", "LEFT", "RIGHT", "FULL", "CROSS", "NATURAL", "ASYNC"),
    ("OUTER",),
)

# Words that may follow FROM in a comma list but never name a table.
TABLE_LIST_STOP_WORDS: frozenset[str] = frozenset(
    {
        "where", "prewhere", "join", "on", "group", "order", "limit", "having", "union",
        "left", "right", "inner", "outer", "cross", "full", "natural",
    }
)


def _build_join_pattern() -> re.Pattern[str]:
    optional_groups = "".join(
        r"(?:" + "|".join(rf"{word}\s+" for word in group) + r")?" for group in JOIN_PREFIXES
    )
    return re.compile(rf"\b{optional_groups}JOIN\b", re.IGNORECASE)


def _build_aggregate_pattern() -> re.Pattern[str]:
    names = "|".join(re.escape(name) for name in AGGREGATE_FUNCTIONS)
    return re.compile(rf"\b(?:{names})\s*\(", re.IGNORECASE)


JOIN_PATTERN = _build_join_pattern()
AGGREGATE_CALL_PATTERN = _build_aggregate_pattern()
