"""Use case to build the transaction filter of a drilled-down entity."""

from datetime import date

from src.application.ports.dashboard_source import DashboardSourcePort
from src.application.use_cases.dashboard_window import load_dashboard_window
from src.domain.models import Dimension, TransactionFilter
from src.domain.services.drilldown import build_drilldown_filter
from src.infrastructure.logging.logger import get_app_logger


class BuildDrilldownFilterUseCase:
    """Translate a selected entity and scope into search parameters."""

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
        entity_key: str,
        *,
        reference_date: date,
        dimension: Dimension = Dimension.CATEGORY,
        month_position: int | None = None,
        window_year: int | None = None,
    ) -> TransactionFilter:
        """Return the filter for the entity within the selected scope.

        Args:
            entity_key: Key of the entity, possibly the Others bucket.
            reference_date: End of the rolling twelve-month window.
            dimension: Grouping axis of the entity.
            month_position: Selected month, or None for the whole window.
            window_year: Calendar year of the window, None for rolling.

        Returns:
            TransactionFilter: Entity constraint and date range.
        """
        window = load_dashboard_window(
            self._dashboard_source,
            dimension,
            logger=self._logger,
            strict_months=self._strict_months,
        )
        transaction_filter = build_drilldown_filter(
            window.months,
            entity_key,
            dimension=dimension,
            month_position=month_position,
            window_year=window_year,
            reference_date=reference_date,
        )
        self._logger.info(
            f"Drill-down into {dimension.value} {entity_key} from "
            f"{transaction_filter.start_date} to {transaction_filter.end_date}"
        )
        return transaction_filter


__all__ = ["BuildDrilldownFilterUseCase"]
