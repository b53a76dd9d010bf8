"""Monthly evolution series for selected entities."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from src.domain.models import (
    Dimension,
    EvolutionPoint,
    FlowType,
    MonthSlot,
)
from src.domain.services.averages import entity_value
from src.domain.services.dimensions import strategy_for
from src.domain.services.periods import is_future_month


def build_evolution_series(
    months: Sequence[MonthSlot],
    selected_keys: Sequence[str],
    *,
    window_year: int | None,
    reference_date: date,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType | None = None,
) -> list[EvolutionPoint]:
    """Return one point per month with the values of the selected entities.

    Absent entities and months after the reference month of the current
    year are reported as 0. No selection yields an empty series.
    """
    if not selected_keys:
        return []
    strategy = strategy_for(dimension)
    points = []
    for slot in months:
        future = is_future_month(
            slot,
            window_year=window_year,
            reference_date=reference_date,
        )
        values = {
            key: (
                Decimal("0")
                if future
                else entity_value(slot, key, strategy, flow_type)
            )
            for key in selected_keys
        }
        points.append(
            EvolutionPoint(
                year=slot.year,
                month_index=slot.month_index,
                month=slot.month,
                month_short=slot.month_short,
                values=values,
            )
        )
    return points


__all__ = ["build_evolution_series"]
