"""Application use cases package."""

from .build_drilldown_filter import BuildDrilldownFilterUseCase
from .get_dashboard_summary import (
    DashboardSummaryView,
    GetDashboardSummaryUseCase,
)
from .get_metric_comparison import (
    GetMetricComparisonUseCase,
    MetricComparisonView,
)
from .get_metric_evolution import (
    GetMetricEvolutionUseCase,
    MetricEvolutionView,
)
from .get_metric_table import GetMetricTableUseCase, MetricTableView

__all__ = [
    "BuildDrilldownFilterUseCase",
    "GetDashboardSummaryUseCase",
    "DashboardSummaryView",
    "GetMetricComparisonUseCase",
    "MetricComparisonView",
    "GetMetricEvolutionUseCase",
    "MetricEvolutionView",
    "GetMetricTableUseCase",
    "MetricTableView",
]
