"""Default top-N entity selection for comparison views."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import (
    Dimension,
    FlowType,
    MonthSlot,
    SelectionState,
)
from src.domain.services.dimensions import strategy_for
from src.utils.decimal_utils import absolute_amount


def rank_entities(
    months: Sequence[MonthSlot],
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
) -> list[tuple[str, Decimal]]:
    """Return entity keys with window totals, largest first.

    Ties keep the order in which entities were first encountered.
    """
    strategy = strategy_for(dimension)
    totals: dict[str, Decimal] = {}
    for slot in months:
        for metric in slot.metrics:
            if metric.flow_type != flow_type:
                continue
            key = strategy.entity_key(metric)
            totals[key] = totals.get(key, Decimal("0")) + absolute_amount(
                metric.total
            )
    return sorted(totals.items(), key=lambda entry: entry[1], reverse=True)


def select_top_entities(
    months: Sequence[MonthSlot],
    n: int = DEFAULT_TOP_N,
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
) -> list[str]:
    """Return the keys of the ``n`` largest entities of the window."""
    if n <= 0:
        return []
    ranked = rank_entities(months, dimension=dimension, flow_type=flow_type)
    return [key for key, _total in ranked[:n]]


def suggest_default_selection(
    state: SelectionState,
    months: Sequence[MonthSlot],
    n: int = DEFAULT_TOP_N,
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
) -> SelectionState:
    """Apply the top-N default to an empty, untouched selection.

    The default never overrides the user: once ``user_has_selected`` is set
    the state is returned unchanged, even when the selection is empty.

    Args:
        state: Caller-owned selection state of the session.
        months: Month series of the active window.
        n: Number of entities to pre-select.
        dimension: Dimension used to read entity keys.
        flow_type: Flow type the ranked records must match.

    Returns:
        SelectionState: The state carrying the default, or ``state`` itself.
    """
    if state.selected or state.user_has_selected:
        return state
    top_keys = select_top_entities(
        months,
        n,
        dimension=dimension,
        flow_type=flow_type,
    )
    if not top_keys:
        return state
    return state.with_default(top_keys)


__all__ = [
    "rank_entities",
    "select_top_entities",
    "suggest_default_selection",
]
