"""Domain models for monthly spending metrics."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class FlowType(str, Enum):
    """Direction of a money flow."""

    INCOME = "income"
    EXPENSE = "expense"
    NEUTRAL = "neutral"


class MetricStatus(str, Enum):
    """Position of a value relative to its baseline average."""

    ABOVE_AVERAGE = "above_average"
    BELOW_AVERAGE = "below_average"
    AVERAGE = "average"
    UNKNOWN = "unknown"


class Dimension(str, Enum):
    """Grouping axis of the metrics."""

    CATEGORY = "category"
    MERCHANT = "merchant"
    BANK = "bank"


@dataclass(frozen=True)
class DashboardMetric:
    """One entity's activity within one calendar month.

    Attributes:
        entity_id: Stable identifier, preferred entity key.
        slug: Alternate key used when ``entity_id`` is missing.
        name: Display name, may be missing in upstream data.
        color_hex: Display color, may be missing in upstream data.
        flow_type: Income, expense or neutral flow.
        total: Signed amount for the month.
        grouped_ids: Member IDs folded into an Others record.
    """

    entity_id: str | None
    name: str | None
    color_hex: str | None
    flow_type: FlowType
    total: Decimal
    slug: str | None = None
    grouped_ids: tuple[str, ...] = ()

    @property
    def key(self) -> str | None:
        """Return the entity key, preferring ``entity_id`` over ``slug``."""
        return self.entity_id or self.slug


@dataclass(frozen=True)
class MonthSlot:
    """A calendar month with its metrics and scalar aggregates."""

    year: int
    month_index: int
    month: str
    month_short: str
    metrics: tuple[DashboardMetric, ...] = ()
    revenue: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    investments: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class DashboardSummary:
    """Scalar totals shown on the headline summary cards."""

    total_revenue: Decimal
    total_expenses: Decimal
    total_investments: Decimal
    balance: Decimal

    @classmethod
    def zero(cls) -> "DashboardSummary":
        return cls(
            total_revenue=Decimal("0"),
            total_expenses=Decimal("0"),
            total_investments=Decimal("0"),
            balance=Decimal("0"),
        )


@dataclass(frozen=True)
class DashboardResponse:
    """Upstream dashboard payload: a summary plus monthly breakdowns."""

    summary: DashboardSummary
    months: tuple[MonthSlot, ...]


@dataclass(frozen=True)
class DerivedMetricView:
    """A month's metric augmented with its baseline and status."""

    metric: DashboardMetric
    key: str
    name: str
    color: str
    value: Decimal
    average: Decimal
    status: MetricStatus


@dataclass(frozen=True)
class ComparisonBar:
    """Bar decomposition of a value against its baseline average.

    ``base`` is the part of the value up to the average, ``excess`` the part
    above it and ``savings`` the gap left below it.
    """

    key: str
    name: str
    color: str
    value: Decimal
    average: Decimal
    base: Decimal
    excess: Decimal
    savings: Decimal
    status: MetricStatus


@dataclass(frozen=True)
class AggregatedTableItem:
    """One row of a metric table for a month or an annual scope."""

    key: str
    name: str
    value: Decimal
    color: str
    percent: Decimal
    status: MetricStatus
    grouped_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class EntityOption:
    """Selectable entity with its first-seen display attributes."""

    key: str
    name: str
    color: str


@dataclass(frozen=True)
class EvolutionPoint:
    """Values of the selected entities for one month slot."""

    year: int
    month_index: int
    month: str
    month_short: str
    values: dict[str, Decimal] = field(default_factory=dict)


__all__ = [
    "FlowType",
    "MetricStatus",
    "Dimension",
    "DashboardMetric",
    "MonthSlot",
    "DashboardSummary",
    "DashboardResponse",
    "DerivedMetricView",
    "ComparisonBar",
    "AggregatedTableItem",
    "EntityOption",
    "EvolutionPoint",
]
