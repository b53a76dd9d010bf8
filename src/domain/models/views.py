"""View models assembled for dashboard rendering."""

from dataclasses import dataclass, field
from decimal import Decimal

from src.domain.models.metrics import (
    AggregatedTableItem,
    ComparisonBar,
    DashboardSummary,
    Dimension,
    EntityOption,
    EvolutionPoint,
    MonthSlot,
)
from src.domain.models.selection import SelectionState


@dataclass(frozen=True)
class DashboardWindow:
    """Gap-filled month series of one dimension with its summary."""

    dimension: Dimension
    summary: DashboardSummary
    months: list[MonthSlot]


@dataclass(frozen=True)
class MetricTableView:
    """Metric table rows for a month or the whole window."""

    dimension: Dimension
    month_position: int | None
    scope_label: str
    items: list[AggregatedTableItem]
    total: Decimal

    @property
    def has_data(self) -> bool:
        return bool(self.items)


@dataclass(frozen=True)
class MetricComparisonView:
    """Comparison bars of a scope, largest value first."""

    dimension: Dimension
    month_position: int | None
    scope_label: str
    bars: list[ComparisonBar]


@dataclass(frozen=True)
class MetricEvolutionView:
    """Evolution series of the selected entities."""

    dimension: Dimension
    selection: SelectionState
    entities: list[EntityOption]
    points: list[EvolutionPoint] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardSummaryView:
    """Headline totals with the monthly rollup they reconcile against."""

    headline: DashboardSummary
    rollup: DashboardSummary
    reconciles: bool
    data_range_label: str
    month_position: int | None
    window_year: int | None = None
    month_labels: list[str] = field(default_factory=list)


__all__ = [
    "DashboardWindow",
    "MetricTableView",
    "MetricComparisonView",
    "MetricEvolutionView",
    "DashboardSummaryView",
]
