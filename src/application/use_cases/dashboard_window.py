"""Shared loading of a gap-filled dashboard window."""

from src.application.ports.dashboard_source import DashboardSourcePort
from src.domain.models import DashboardWindow, Dimension
from src.domain.services.month_series import (
    data_range_label,
    fill_month_series,
    slot_at,
)
from src.domain.services.rollup import check_summary_reconciles


def load_dashboard_window(
    dashboard_source: DashboardSourcePort,
    dimension: Dimension,
    *,
    logger,
    strict_months: bool = True,
) -> DashboardWindow:
    """Fetch a dimension's payload and gap-fill its month series.

    Args:
        dashboard_source: Port providing the upstream payload.
        dimension: Grouping axis of the metrics.
        logger: Logger compatible with logging.Logger-like API.
        strict_months: Raise on duplicated months instead of keeping the
            first occurrence.

    Returns:
        DashboardWindow: Filled series with the upstream summary.
    """
    response = dashboard_source.fetch_dashboard(dimension)
    months = fill_month_series(
        response.months,
        allow_duplicates=not strict_months,
        logger=logger,
    )
    logger.info(
        f"Loaded {len(response.months)} months for {dimension.value}, "
        f"{len(months)} after gap-filling"
    )
    check_summary_reconciles(response.summary, months, logger)
    return DashboardWindow(
        dimension=dimension,
        summary=response.summary,
        months=months,
    )


def scope_label(window: DashboardWindow, month_position: int | None) -> str:
    """Return a label for the selected month or the whole window."""
    if month_position is None:
        return data_range_label(window.months)
    slot = slot_at(window.months, month_position)
    return f"{slot.month}/{slot.year}"


__all__ = ["load_dashboard_window", "scope_label"]
