"""Baseline averages and above/below classification."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models import (
    ComparisonBar,
    DashboardMetric,
    DerivedMetricView,
    Dimension,
    FlowType,
    MetricStatus,
    MonthSlot,
)
from src.domain.services.dimensions import DimensionStrategy, strategy_for
from src.domain.services.month_series import slot_at
from src.utils.decimal_utils import absolute_amount, sum_decimals

_ZERO = Decimal("0")


def classify_status(value: Decimal, average: Decimal) -> MetricStatus:
    """Classify a value against its baseline average."""
    if value > average:
        return MetricStatus.ABOVE_AVERAGE
    if value < average:
        return MetricStatus.BELOW_AVERAGE
    return MetricStatus.AVERAGE


def entity_value(
    slot: MonthSlot,
    entity_key: str,
    strategy: DimensionStrategy,
    flow_type: FlowType | None = None,
) -> Decimal:
    """Return the absolute value of an entity in a month, 0 when absent."""
    for metric in slot.metrics:
        if flow_type is not None and metric.flow_type != flow_type:
            continue
        if strategy.entity_key(metric) == entity_key:
            return absolute_amount(metric.total)
    return _ZERO


def compute_baseline_average(
    months: Sequence[MonthSlot],
    month_position: int,
    entity_key: str,
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType | None = None,
) -> Decimal:
    """Return the mean value of an entity over the other months.

    The month being compared is excluded. Months where the entity is absent
    count as 0, so the denominator is always ``len(months) - 1``.

    Args:
        months: Month series of the active window.
        month_position: Position of the compared month in ``months``.
        entity_key: Key of the entity.
        dimension: Dimension used to read entity keys.
        flow_type: Optional flow type the records must match.

    Returns:
        Decimal: Baseline average, 0 for windows of one month or less.
    """
    slot_at(months, month_position)
    if len(months) <= 1:
        return _ZERO
    strategy = strategy_for(dimension)
    others = sum_decimals(
        entity_value(slot, entity_key, strategy, flow_type)
        for position, slot in enumerate(months)
        if position != month_position
    )
    return others / Decimal(len(months) - 1)


def derive_metric_views(
    months: Sequence[MonthSlot],
    month_position: int,
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
) -> list[DerivedMetricView]:
    """Return the month's metrics with their baselines and statuses.

    Views are sorted by descending value; ties keep their record order.
    A window of one month has no baseline and every status is average.
    """
    slot = slot_at(months, month_position)
    strategy = strategy_for(dimension)
    has_baseline = len(months) > 1
    views = []
    for metric in _matching(slot.metrics, flow_type):
        key = strategy.entity_key(metric)
        value = absolute_amount(metric.total)
        average = compute_baseline_average(
            months,
            month_position,
            key,
            dimension=dimension,
            flow_type=flow_type,
        )
        views.append(
            DerivedMetricView(
                metric=metric,
                key=key,
                name=strategy.display_name(metric),
                color=strategy.display_color(metric),
                value=value,
                average=average,
                status=(
                    classify_status(value, average)
                    if has_baseline
                    else MetricStatus.AVERAGE
                ),
            )
        )
    return sorted(views, key=lambda view: view.value, reverse=True)


def build_comparison_bars(
    views: Sequence[DerivedMetricView],
) -> list[ComparisonBar]:
    """Split each view into base, excess and savings segments."""
    bars = []
    for view in views:
        value = view.value
        average = view.average
        if value > average:
            base, excess, savings = average, value - average, _ZERO
        elif value < average:
            base, excess, savings = value, _ZERO, average - value
        else:
            base, excess, savings = value, _ZERO, _ZERO
        bars.append(
            ComparisonBar(
                key=view.key,
                name=view.name,
                color=view.color,
                value=value,
                average=average,
                base=base,
                excess=excess,
                savings=savings,
                status=view.status,
            )
        )
    return bars


def _matching(
    metrics: Sequence[DashboardMetric],
    flow_type: FlowType | None,
) -> list[DashboardMetric]:
    if flow_type is None:
        return list(metrics)
    return [metric for metric in metrics if metric.flow_type == flow_type]


__all__ = [
    "classify_status",
    "entity_value",
    "compute_baseline_average",
    "derive_metric_views",
    "build_comparison_bars",
]
