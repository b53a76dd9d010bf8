"""Use case to build the monthly evolution of selected entities."""

from datetime import date

from src.application.ports.dashboard_source import DashboardSourcePort
from src.application.use_cases.dashboard_window import load_dashboard_window
from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import (
    Dimension,
    FlowType,
    MetricEvolutionView,
    SelectionState,
)
from src.domain.services.aggregation import list_entities
from src.domain.services.evolution import build_evolution_series
from src.domain.services.top_n import suggest_default_selection
from src.infrastructure.logging.logger import get_app_logger


class GetMetricEvolutionUseCase:
    """Return evolution series, applying the sticky top-N default."""

    def __init__(
        self,
        dashboard_source: DashboardSourcePort,
        logger=None,
        top_n: int = DEFAULT_TOP_N,
        flow_type: FlowType = FlowType.EXPENSE,
        strict_months: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            dashboard_source: Port providing dashboard payloads.
            logger: Optional logger compatible with logging.Logger-like API.
            top_n: Number of entities pre-selected by default.
            flow_type: Flow type used to rank the default entities.
            strict_months: Reject payloads with duplicated months.
        """
        self._dashboard_source = dashboard_source
        self._logger = logger or get_app_logger()
        self._top_n = top_n
        self._flow_type = flow_type
        self._strict_months = strict_months

    def execute(
        self,
        selection: SelectionState,
        *,
        reference_date: date,
        dimension: Dimension = Dimension.CATEGORY,
        window_year: int | None = None,
    ) -> MetricEvolutionView:
        """Return the evolution of the selected entities.

        Args:
            selection: Caller-owned selection state of the session.
            reference_date: Date used to blank out future months.
            dimension: Grouping axis of the metrics.
            window_year: Calendar year of the window, None for the rolling
                last twelve months.

        Returns:
            MetricEvolutionView: Points, the resulting selection state and
            the selectable entities.
        """
        window = load_dashboard_window(
            self._dashboard_source,
            dimension,
            logger=self._logger,
            strict_months=self._strict_months,
        )
        resolved = suggest_default_selection(
            selection,
            window.months,
            self._top_n,
            dimension=dimension,
            flow_type=self._flow_type,
        )
        if resolved is not selection:
            self._logger.info(
                f"Applied default selection: {', '.join(resolved.selected)}"
            )
        points = build_evolution_series(
            window.months,
            resolved.selected,
            window_year=window_year,
            reference_date=reference_date,
            dimension=dimension,
        )
        return MetricEvolutionView(
            dimension=dimension,
            selection=resolved,
            entities=list_entities(window.months, dimension=dimension),
            points=points,
        )


__all__ = ["GetMetricEvolutionUseCase", "MetricEvolutionView"]
