"""Annual rollups of entity metrics and scalar totals."""

from collections.abc import Sequence
from logging import Logger

from src.domain.models import (
    AggregatedTableItem,
    DashboardSummary,
    Dimension,
    FlowType,
    MonthSlot,
)
from src.domain.services.aggregation import aggregate_annual
from src.domain.services.month_series import slot_at
from src.utils.decimal_utils import sum_decimals


def rollup_annual_metrics(
    months: Sequence[MonthSlot],
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
    logger: Logger | None = None,
) -> list[AggregatedTableItem]:
    """Return one row per entity folded over the whole window."""
    return aggregate_annual(
        months,
        dimension=dimension,
        flow_type=flow_type,
        logger=logger,
    )


def rollup_scalars(months: Sequence[MonthSlot]) -> DashboardSummary:
    """Sum the monthly scalar aggregates of a window.

    The sums come from the monthly scalars only; metric records are not
    re-read.
    """
    return DashboardSummary(
        total_revenue=sum_decimals(slot.revenue for slot in months),
        total_expenses=sum_decimals(slot.expenses for slot in months),
        total_investments=sum_decimals(slot.investments for slot in months),
        balance=sum_decimals(slot.balance for slot in months),
    )


def check_summary_reconciles(
    summary: DashboardSummary,
    months: Sequence[MonthSlot],
    logger: Logger,
) -> bool:
    """Warn when the upstream summary differs from the monthly rollup.

    Args:
        summary: Summary delivered by the upstream payload.
        months: Month series of the same window.
        logger: Logger used for warnings.

    Returns:
        bool: True when every scalar matches.
    """
    rollup = rollup_scalars(months)
    reconciles = True
    for field_name in (
        "total_revenue",
        "total_expenses",
        "total_investments",
        "balance",
    ):
        expected = getattr(summary, field_name)
        actual = getattr(rollup, field_name)
        if expected != actual:
            reconciles = False
            logger.warning(
                f"Summary {field_name}={expected} does not match "
                f"monthly rollup {actual}"
            )
    return reconciles


def headline_summary(
    summary: DashboardSummary,
    months: Sequence[MonthSlot],
    month_position: int | None = None,
) -> DashboardSummary:
    """Return the totals shown on the summary cards.

    A selected month shows its own scalars; otherwise the window summary is
    shown.
    """
    if month_position is None:
        return summary
    slot = slot_at(months, month_position)
    return DashboardSummary(
        total_revenue=slot.revenue,
        total_expenses=slot.expenses,
        total_investments=slot.investments,
        balance=slot.balance,
    )


__all__ = [
    "rollup_annual_metrics",
    "rollup_scalars",
    "check_summary_reconciles",
    "headline_summary",
]
