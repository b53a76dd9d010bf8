"""Use case to compute the headline summary cards."""

from src.application.ports.dashboard_source import DashboardSourcePort
from src.application.use_cases.dashboard_window import load_dashboard_window
from src.domain.models import DashboardSummaryView, Dimension
from src.domain.services.month_series import (
    data_range_label,
    month_label,
    window_year_of,
)
from src.domain.services.rollup import headline_summary, rollup_scalars
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Return headline totals for a month or the whole window."""

    def __init__(
        self,
        dashboard_source: DashboardSourcePort,
        logger=None,
        strict_months: bool = True,
    ) -> None:
        self._dashboard_source = dashboard_source
        self._logger = logger or get_app_logger()
        self._strict_months = strict_months

    def execute(
        self,
        dimension: Dimension = Dimension.CATEGORY,
        month_position: int | None = None,
    ) -> DashboardSummaryView:
        """Return the headline totals and the scalar rollup.

        Args:
            dimension: Dimension of the payload to read.
            month_position: Selected month, or None for the window summary.

        Returns:
            DashboardSummaryView: Headline, rollup and reconciliation flag.
        """
        window = load_dashboard_window(
            self._dashboard_source,
            dimension,
            logger=self._logger,
            strict_months=self._strict_months,
        )
        headline = headline_summary(
            window.summary,
            window.months,
            month_position,
        )
        rollup = rollup_scalars(window.months)
        return DashboardSummaryView(
            headline=headline,
            rollup=rollup,
            reconciles=rollup == window.summary,
            data_range_label=data_range_label(window.months),
            month_position=month_position,
            window_year=window_year_of(window.months),
            month_labels=[month_label(slot) for slot in window.months],
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummaryView"]
