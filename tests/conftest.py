"""Shared builders for dashboard test data."""

from decimal import Decimal

import pytest

from src.domain.constants import MONTH_FULL_NAMES, MONTH_SHORT_CODES
from src.domain.models import (
    DashboardMetric,
    DashboardResponse,
    DashboardSummary,
    FlowType,
    MonthSlot,
)


def build_metric(
    entity_id,
    total,
    *,
    name=None,
    color_hex="#2563eb",
    flow_type=FlowType.EXPENSE,
    slug=None,
    grouped_ids=(),
) -> DashboardMetric:
    return DashboardMetric(
        entity_id=entity_id,
        name=name,
        color_hex=color_hex,
        flow_type=flow_type,
        total=Decimal(str(total)),
        slug=slug,
        grouped_ids=tuple(grouped_ids),
    )


def build_month(
    month_index,
    metrics=(),
    *,
    year=2024,
    revenue="0",
    expenses="0",
    investments="0",
    balance="0",
) -> MonthSlot:
    return MonthSlot(
        year=year,
        month_index=month_index,
        month=MONTH_FULL_NAMES[month_index],
        month_short=MONTH_SHORT_CODES[month_index],
        metrics=tuple(metrics),
        revenue=Decimal(revenue),
        expenses=Decimal(expenses),
        investments=Decimal(investments),
        balance=Decimal(balance),
    )


def build_response(months, summary=None) -> DashboardResponse:
    return DashboardResponse(
        summary=summary or DashboardSummary.zero(),
        months=tuple(months),
    )


@pytest.fixture
def make_metric():
    return build_metric


@pytest.fixture
def make_month():
    return build_month


@pytest.fixture
def make_response():
    return build_response
