"""Per-dimension aggregation of monthly metric records."""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models import (
    AggregatedTableItem,
    Dimension,
    EntityOption,
    FlowType,
    MetricStatus,
    MonthSlot,
)
from src.domain.services.averages import derive_metric_views
from src.domain.services.dimensions import strategy_for
from src.domain.services.month_series import slot_at
from src.domain.services.shares import distribute_shares
from src.utils.decimal_utils import absolute_amount


def merge_grouped_ids(*groups: Iterable[str]) -> tuple[str, ...]:
    """Return the ordered union of member ID groups, without duplicates."""
    merged: dict[str, None] = {}
    for group in groups:
        for member_id in group:
            merged.setdefault(member_id, None)
    return tuple(merged)


def aggregate_month(
    months: Sequence[MonthSlot],
    month_position: int,
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
    logger: Logger | None = None,
) -> list[AggregatedTableItem]:
    """Return one table row per entity of a single month.

    Shares are computed against the month's absolute total and statuses
    against each entity's baseline over the other months.

    Raises:
        MalformedInputError: If ``month_position`` is outside the series.
    """
    views = derive_metric_views(
        months,
        month_position,
        dimension=dimension,
        flow_type=flow_type,
    )
    shares = distribute_shares([view.value for view in views])
    items = [
        AggregatedTableItem(
            key=view.key,
            name=view.name,
            value=view.value,
            color=view.color,
            percent=share,
            status=view.status,
            grouped_ids=merge_grouped_ids(view.metric.grouped_ids),
        )
        for view, share in zip(views, shares)
    ]
    if logger is not None:
        slot = months[month_position]
        logger.debug(
            f"Aggregated {len(items)} {dimension.value} rows for "
            f"{slot.month_short}/{slot.year}"
        )
    return items


def aggregate_annual(
    months: Sequence[MonthSlot],
    *,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
    logger: Logger | None = None,
) -> list[AggregatedTableItem]:
    """Fold every month into one table row per entity.

    Values are sums of absolute monthly amounts. Others member IDs from all
    months are merged by union so a drill-down can recover every member.
    Rows are sorted by descending value; ties keep first-seen order.
    """
    strategy = strategy_for(dimension)
    totals: dict[str, Decimal] = {}
    labels: dict[str, tuple[str, str]] = {}
    members: dict[str, tuple[str, ...]] = {}
    for slot in months:
        for metric in slot.metrics:
            if metric.flow_type != flow_type:
                continue
            key = strategy.entity_key(metric)
            value = absolute_amount(metric.total)
            if key not in totals:
                totals[key] = value
                labels[key] = (
                    strategy.display_name(metric),
                    strategy.display_color(metric),
                )
                members[key] = merge_grouped_ids(metric.grouped_ids)
            else:
                totals[key] += value
                members[key] = merge_grouped_ids(
                    members[key],
                    metric.grouped_ids,
                )

    keys = list(totals)
    shares = distribute_shares([totals[key] for key in keys])
    items = [
        AggregatedTableItem(
            key=key,
            name=labels[key][0],
            value=totals[key],
            color=labels[key][1],
            percent=share,
            status=MetricStatus.AVERAGE,
            grouped_ids=members[key],
        )
        for key, share in zip(keys, shares)
    ]
    if logger is not None:
        logger.debug(
            f"Aggregated {len(items)} {dimension.value} rows "
            f"over {len(months)} months"
        )
    return sorted(items, key=lambda item: item.value, reverse=True)


def aggregate_metrics(
    months: Sequence[MonthSlot],
    *,
    month_position: int | None = None,
    dimension: Dimension = Dimension.CATEGORY,
    flow_type: FlowType = FlowType.EXPENSE,
    logger: Logger | None = None,
) -> list[AggregatedTableItem]:
    """Aggregate a single month, or the whole window when no month is set."""
    if month_position is None:
        return aggregate_annual(
            months,
            dimension=dimension,
            flow_type=flow_type,
            logger=logger,
        )
    return aggregate_month(
        months,
        month_position,
        dimension=dimension,
        flow_type=flow_type,
        logger=logger,
    )


def list_entities(
    months: Sequence[MonthSlot],
    *,
    dimension: Dimension = Dimension.CATEGORY,
) -> list[EntityOption]:
    """Return the distinct entities of a window in first-seen order."""
    strategy = strategy_for(dimension)
    options: dict[str, EntityOption] = {}
    for slot in months:
        for metric in slot.metrics:
            key = strategy.entity_key(metric)
            if key not in options:
                options[key] = EntityOption(
                    key=key,
                    name=strategy.display_name(metric),
                    color=strategy.display_color(metric),
                )
    return list(options.values())


def has_metric_data(
    months: Sequence[MonthSlot],
    month_position: int | None = None,
) -> bool:
    """Return True when the scope holds at least one metric record."""
    if month_position is None:
        return any(slot.metrics for slot in months)
    return bool(slot_at(months, month_position).metrics)


__all__ = [
    "merge_grouped_ids",
    "aggregate_month",
    "aggregate_annual",
    "aggregate_metrics",
    "list_entities",
    "has_metric_data",
]
