"""Parsing and validation of upstream dashboard payloads.

The backend delivers camelCase JSON shaped as::

    {
        "summary": {"totalRevenue": ..., "totalExpenses": ...,
                    "totalInvestments": ..., "balance": ...},
        "months": [
            {"month": "Janeiro", "monthShort": "Jan", "year": 2024,
             "revenue": ..., "expenses": ..., "investments": ...,
             "balance": ..., "metrics": [...]},
        ],
    }

The payload shape is checked by the pydantic models of
``dashboard_schema`` before any aggregation runs, then mapped onto the
frozen domain models. Missing display fields are tolerated; structural
problems raise ``MalformedInputError``.
"""

from logging import Logger

from pydantic import BaseModel, ValidationError

from src.domain.constants import MONTH_FULL_NAMES
from src.domain.exceptions import MalformedInputError
from src.domain.models import (
    DashboardMetric,
    DashboardResponse,
    DashboardSummary,
    MonthSlot,
)
from src.domain.services.month_series import resolve_month_index
from src.infrastructure.dashboard_schema import (
    DashboardPayload,
    MetricPayload,
    MonthPayload,
    SummaryPayload,
)


def parse_dashboard_response(
    payload,
    logger: Logger | None = None,
) -> DashboardResponse:
    """Build a DashboardResponse from a decoded JSON payload.

    Args:
        payload: Decoded JSON object.
        logger: Optional logger used for tolerated anomalies.

    Returns:
        DashboardResponse: Validated domain payload.

    Raises:
        MalformedInputError: If the payload shape is invalid.
    """
    wire = _validate(DashboardPayload, payload, logger)
    return DashboardResponse(
        summary=_to_summary(wire.summary or SummaryPayload()),
        months=tuple(_to_month(month) for month in wire.months),
    )


def parse_summary(raw) -> DashboardSummary:
    """Build the headline summary from its JSON object."""
    return _to_summary(_validate(SummaryPayload, raw))


def parse_month(raw, logger: Logger | None = None) -> MonthSlot:
    """Build a month slot and its metrics from a JSON object."""
    return _to_month(_validate(MonthPayload, raw, logger))


def parse_metric(raw, logger: Logger | None = None) -> DashboardMetric:
    """Build a metric record, tolerating missing display fields."""
    return _to_metric(_validate(MetricPayload, raw, logger))


def _validate(model: type[BaseModel], raw, logger: Logger | None = None):
    try:
        return model.model_validate(raw, context={"logger": logger})
    except ValidationError as exc:
        raise MalformedInputError(
            f"Invalid {model.__name__}: {exc}"
        ) from exc


def _to_summary(wire: SummaryPayload) -> DashboardSummary:
    return DashboardSummary(
        total_revenue=wire.total_revenue,
        total_expenses=wire.total_expenses,
        total_investments=wire.total_investments,
        balance=wire.balance,
    )


def _to_month(wire: MonthPayload) -> MonthSlot:
    month_index = resolve_month_index(wire.month_short)
    return MonthSlot(
        year=wire.year,
        month_index=month_index,
        month=wire.month or MONTH_FULL_NAMES[month_index],
        month_short=wire.month_short,
        metrics=tuple(_to_metric(item) for item in wire.metrics or ()),
        revenue=wire.revenue,
        expenses=wire.expenses,
        investments=wire.investments,
        balance=wire.balance,
    )


def _to_metric(wire: MetricPayload) -> DashboardMetric:
    return DashboardMetric(
        entity_id=wire.id,
        slug=wire.slug,
        name=wire.name,
        color_hex=wire.color_hex,
        flow_type=wire.type,
        total=wire.total,
        grouped_ids=tuple(wire.grouped_ids),
    )


__all__ = [
    "parse_dashboard_response",
    "parse_summary",
    "parse_month",
    "parse_metric",
]
