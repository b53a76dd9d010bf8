"""Use case to build the metric table of a dashboard scope."""

from src.application.ports.dashboard_source import DashboardSourcePort
from src.application.use_cases.dashboard_window import (
    load_dashboard_window,
    scope_label,
)
from src.domain.models import Dimension, FlowType, MetricTableView
from src.domain.services.aggregation import aggregate_metrics
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import sum_decimals


class GetMetricTableUseCase:
    """Aggregate metric records into table rows for a month or a window."""

    def __init__(
        self,
        dashboard_source: DashboardSourcePort,
        logger=None,
        flow_type: FlowType = FlowType.EXPENSE,
        strict_months: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            dashboard_source: Port providing dashboard payloads.
            logger: Optional logger compatible with logging.Logger-like API.
            flow_type: Flow type of the records shown in the table.
            strict_months: Reject payloads with duplicated months.
        """
        self._dashboard_source = dashboard_source
        self._logger = logger or get_app_logger()
        self._flow_type = flow_type
        self._strict_months = strict_months

    def execute(
        self,
        dimension: Dimension = Dimension.CATEGORY,
        month_position: int | None = None,
    ) -> MetricTableView:
        """Return the table rows sorted by descending value.

        Args:
            dimension: Grouping axis of the metrics.
            month_position: Selected month in the filled series, or None for
                the whole window.

        Returns:
            MetricTableView: Rows with shares and statuses.
        """
        window = load_dashboard_window(
            self._dashboard_source,
            dimension,
            logger=self._logger,
            strict_months=self._strict_months,
        )
        items = aggregate_metrics(
            window.months,
            month_position=month_position,
            dimension=dimension,
            flow_type=self._flow_type,
            logger=self._logger,
        )
        total = sum_decimals(item.value for item in items)
        self._logger.info(
            f"Metric table for {dimension.value}: {len(items)} rows, "
            f"total={total}"
        )
        return MetricTableView(
            dimension=dimension,
            month_position=month_position,
            scope_label=scope_label(window, month_position),
            items=items,
            total=total,
        )


__all__ = ["GetMetricTableUseCase", "MetricTableView"]
