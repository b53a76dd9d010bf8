"""Transaction drill-down filters for dashboard entities."""

from collections.abc import Sequence
from datetime import date

from src.domain.models import Dimension, MonthSlot, TransactionFilter
from src.domain.services.aggregation import merge_grouped_ids
from src.domain.services.dimensions import strategy_for
from src.domain.services.month_series import slot_at
from src.domain.services.periods import resolve_scope_date_range


def collect_member_ids(
    months: Sequence[MonthSlot],
    entity_key: str,
    *,
    month_position: int | None = None,
    dimension: Dimension = Dimension.MERCHANT,
) -> tuple[str, ...]:
    """Return the union of grouped IDs of an entity over the scope."""
    strategy = strategy_for(dimension)
    scope = (
        [slot_at(months, month_position)]
        if month_position is not None
        else months
    )
    groups = [
        metric.grouped_ids
        for slot in scope
        for metric in slot.metrics
        if strategy.entity_key(metric) == entity_key
    ]
    return merge_grouped_ids(*groups)


def build_drilldown_filter(
    months: Sequence[MonthSlot],
    entity_key: str,
    *,
    dimension: Dimension,
    month_position: int | None,
    window_year: int | None,
    reference_date: date,
) -> TransactionFilter:
    """Return the transaction search filter for an entity of the scope.

    Raises:
        MalformedInputError: If the selected month is outside the series.
        UnsupportedDrilldownError: If the dimension cannot filter on the
            entity.
    """
    date_range = resolve_scope_date_range(
        months,
        month_position=month_position,
        window_year=window_year,
        reference_date=reference_date,
    )
    member_ids = collect_member_ids(
        months,
        entity_key,
        month_position=month_position,
        dimension=dimension,
    )
    return strategy_for(dimension).build_filter(
        entity_key,
        member_ids,
        date_range,
    )


__all__ = ["collect_member_ids", "build_drilldown_filter"]
