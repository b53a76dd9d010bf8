"""Domain models package."""

from .filters import DateRange, TransactionFilter
from .metrics import (
    AggregatedTableItem,
    ComparisonBar,
    DashboardMetric,
    DashboardResponse,
    DashboardSummary,
    DerivedMetricView,
    Dimension,
    EntityOption,
    EvolutionPoint,
    FlowType,
    MetricStatus,
    MonthSlot,
)
from .selection import SelectionState
from .views import (
    DashboardSummaryView,
    DashboardWindow,
    MetricComparisonView,
    MetricEvolutionView,
    MetricTableView,
)

__all__ = [
    "AggregatedTableItem",
    "ComparisonBar",
    "DashboardMetric",
    "DashboardResponse",
    "DashboardSummary",
    "DashboardSummaryView",
    "DashboardWindow",
    "DateRange",
    "DerivedMetricView",
    "Dimension",
    "EntityOption",
    "EvolutionPoint",
    "FlowType",
    "MetricComparisonView",
    "MetricEvolutionView",
    "MetricStatus",
    "MetricTableView",
    "MonthSlot",
    "SelectionState",
    "TransactionFilter",
]
