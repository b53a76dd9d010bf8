"""Composition root for wiring infrastructure adapters."""

from src.application.ports.dashboard_source import DashboardSourcePort
from src.application.use_cases.build_drilldown_filter import (
    BuildDrilldownFilterUseCase,
)
from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.application.use_cases.get_metric_comparison import (
    GetMetricComparisonUseCase,
)
from src.application.use_cases.get_metric_evolution import (
    GetMetricEvolutionUseCase,
)
from src.application.use_cases.get_metric_table import GetMetricTableUseCase
from src.infrastructure.json_dashboard_source import JsonDashboardSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def build_dashboard_source(
    settings: DashboardSettings | None = None,
) -> DashboardSourcePort:
    """Return the configured dashboard source.

    Raises:
        RuntimeError: If no payload file is configured.
    """
    resolved = settings or DashboardSettings.from_env()
    if resolved.payload_file is None:
        raise RuntimeError(
            "Dashboard source requires a DASHBOARD_PAYLOAD_FILE value."
        )
    return JsonDashboardSource(resolved.payload_file, logger=get_app_logger())


def build_metric_table_use_case(
    settings: DashboardSettings | None = None,
    dashboard_source: DashboardSourcePort | None = None,
) -> GetMetricTableUseCase:
    """Return the metric table use case."""
    resolved = settings or DashboardSettings.from_env()
    return GetMetricTableUseCase(
        dashboard_source or build_dashboard_source(resolved),
        logger=get_app_logger(),
        flow_type=resolved.flow_type,
        strict_months=resolved.strict_months,
    )


def build_metric_comparison_use_case(
    settings: DashboardSettings | None = None,
    dashboard_source: DashboardSourcePort | None = None,
) -> GetMetricComparisonUseCase:
    """Return the metric comparison use case."""
    resolved = settings or DashboardSettings.from_env()
    return GetMetricComparisonUseCase(
        dashboard_source or build_dashboard_source(resolved),
        logger=get_app_logger(),
        flow_type=resolved.flow_type,
        strict_months=resolved.strict_months,
    )


def build_metric_evolution_use_case(
    settings: DashboardSettings | None = None,
    dashboard_source: DashboardSourcePort | None = None,
) -> GetMetricEvolutionUseCase:
    """Return the metric evolution use case."""
    resolved = settings or DashboardSettings.from_env()
    return GetMetricEvolutionUseCase(
        dashboard_source or build_dashboard_source(resolved),
        logger=get_app_logger(),
        top_n=resolved.top_n,
        flow_type=resolved.flow_type,
        strict_months=resolved.strict_months,
    )


def build_dashboard_summary_use_case(
    settings: DashboardSettings | None = None,
    dashboard_source: DashboardSourcePort | None = None,
) -> GetDashboardSummaryUseCase:
    """Return the headline summary use case."""
    resolved = settings or DashboardSettings.from_env()
    return GetDashboardSummaryUseCase(
        dashboard_source or build_dashboard_source(resolved),
        logger=get_app_logger(),
        strict_months=resolved.strict_months,
    )


def build_drilldown_filter_use_case(
    settings: DashboardSettings | None = None,
    dashboard_source: DashboardSourcePort | None = None,
) -> BuildDrilldownFilterUseCase:
    """Return the drill-down filter use case."""
    resolved = settings or DashboardSettings.from_env()
    return BuildDrilldownFilterUseCase(
        dashboard_source or build_dashboard_source(resolved),
        logger=get_app_logger(),
        strict_months=resolved.strict_months,
    )


__all__ = [
    "build_dashboard_source",
    "build_metric_table_use_case",
    "build_metric_comparison_use_case",
    "build_metric_evolution_use_case",
    "build_dashboard_summary_use_case",
    "build_drilldown_filter_use_case",
]
