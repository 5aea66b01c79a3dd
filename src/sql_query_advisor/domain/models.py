"""Core domain models for query complexity analysis and performance advice."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

LOW_COMPLEXITY_CEILING = 30
MEDIUM_COMPLEXITY_CEILING = 60
MAX_COMPLEXITY_SCORE = 100


class Severity(IntEnum):
    """Recommendation severity levels, ordered for comparison (higher value = more urgent)."""

    INFO = 1
    WARNING = 2
    CRITICAL = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def rank(self) -> int:
        """Position in report order: critical first, info last."""
        return Severity.CRITICAL - self


class ComplexityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_score(cls, score: int) -> "ComplexityLevel":
        if score < LOW_COMPLEXITY_CEILING:
            return cls.LOW
        if score < MEDIUM_COMPLEXITY_CEILING:
            return cls.MEDIUM
        return cls.HIGH


@dataclass(frozen=True, slots=True)
class QueryMetrics:
    """Structural metrics of a single query.

    Everything except ``table_count`` is measured on the main query, after
    any ``WITH`` prologue has been skipped.
    """

    table_count: int = 0
    join_count: int = 0
    subquery_depth: int = 0
    aggregation_count: int = 0
    has_distinct: bool = False
    has_group_by: bool = False
    has_order_by: bool = False
    has_limit: bool = False
    has_prewhere: bool = False
    has_where: bool = False
    column_count: int = 0
    is_select_star: bool = False


@dataclass(frozen=True, slots=True)
class QueryComplexity:
    """A bounded complexity score; the level is always derived from the score."""

    score: int
    metrics: QueryMetrics = field(default_factory=QueryMetrics)

    def __post_init__(self) -> None:
        if not 0 <= self.score <= MAX_COMPLEXITY_SCORE:
            raise ValueError(f"score must be within [0, {MAX_COMPLEXITY_SCORE}], got {self.score}")

    @property
    def level(self) -> ComplexityLevel:
        return ComplexityLevel.from_score(self.score)


@dataclass(frozen=True, slots=True)
class PerformanceRecommendation:
    id: str
    severity: Severity
    title: str
    description: str
    suggestion: str | None = None


@dataclass(frozen=True, slots=True)
class QueryAnalysisResult:
    """Complexity and ordered recommendations for one query."""

    complexity: QueryComplexity
    recommendations: tuple[PerformanceRecommendation, ...] = field(default_factory=tuple)
