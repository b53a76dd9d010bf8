"""Domain package for spending metrics rules and core models."""

from .constants import DEFAULT_TOP_N, OTHERS_ENTITY_ID
from .exceptions import (
    DuplicateMonthError,
    MalformedInputError,
    MetricsEngineError,
    UnsupportedDrilldownError,
)
from .models import (
    AggregatedTableItem,
    DashboardMetric,
    DashboardResponse,
    DashboardSummary,
    Dimension,
    FlowType,
    MetricStatus,
    MonthSlot,
    SelectionState,
)

__all__ = [
    "AggregatedTableItem",
    "DashboardMetric",
    "DashboardResponse",
    "DashboardSummary",
    "Dimension",
    "FlowType",
    "MetricStatus",
    "MonthSlot",
    "SelectionState",
    "DEFAULT_TOP_N",
    "OTHERS_ENTITY_ID",
    "MetricsEngineError",
    "MalformedInputError",
    "DuplicateMonthError",
    "UnsupportedDrilldownError",
]
