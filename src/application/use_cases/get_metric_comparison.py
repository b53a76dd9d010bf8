"""Use case to compare a month's metrics against their baselines."""

from decimal import Decimal

from src.application.ports.dashboard_source import DashboardSourcePort
from src.application.use_cases.dashboard_window import (
    load_dashboard_window,
    scope_label,
)
from src.domain.models import (
    ComparisonBar,
    Dimension,
    FlowType,
    MetricComparisonView,
)
from src.domain.services.averages import (
    build_comparison_bars,
    derive_metric_views,
)
from src.domain.services.rollup import rollup_annual_metrics
from src.infrastructure.logging.logger import get_app_logger


class GetMetricComparisonUseCase:
    """Build comparison bars for a month, or annual ranking bars."""

    def __init__(
        self,
        dashboard_source: DashboardSourcePort,
        logger=None,
        flow_type: FlowType = FlowType.EXPENSE,
        strict_months: bool = True,
    ) -> None:
        self._dashboard_source = dashboard_source
        self._logger = logger or get_app_logger()
        self._flow_type = flow_type
        self._strict_months = strict_months

    def execute(
        self,
        dimension: Dimension = Dimension.CATEGORY,
        month_position: int | None = None,
    ) -> MetricComparisonView:
        """Return bars sorted by descending value.

        A selected month yields value/baseline decompositions. Without a
        month the annual totals are ranked and carry no baseline.
        """
        window = load_dashboard_window(
            self._dashboard_source,
            dimension,
            logger=self._logger,
            strict_months=self._strict_months,
        )
        if month_position is None:
            bars = [
                ComparisonBar(
                    key=item.key,
                    name=item.name,
                    color=item.color,
                    value=item.value,
                    average=Decimal("0"),
                    base=item.value,
                    excess=Decimal("0"),
                    savings=Decimal("0"),
                    status=item.status,
                )
                for item in rollup_annual_metrics(
                    window.months,
                    dimension=dimension,
                    flow_type=self._flow_type,
                )
            ]
        else:
            views = derive_metric_views(
                window.months,
                month_position,
                dimension=dimension,
                flow_type=self._flow_type,
            )
            bars = build_comparison_bars(views)
            above = sum(1 for bar in bars if bar.excess > 0)
            self._logger.info(
                f"{above} of {len(bars)} {dimension.value} entities "
                f"above their average"
            )
        return MetricComparisonView(
            dimension=dimension,
            month_position=month_position,
            scope_label=scope_label(window, month_position),
            bars=bars,
        )


__all__ = ["GetMetricComparisonUseCase", "MetricComparisonView"]
