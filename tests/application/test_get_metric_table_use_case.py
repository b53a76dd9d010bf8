"""Tests for the GetMetricTableUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_metric_table import GetMetricTableUseCase
from src.domain.exceptions import DuplicateMonthError
from src.domain.models import Dimension, FlowType, MetricStatus


def _source(make_response, months):
    source = MagicMock()
    source.fetch_dashboard.return_value = make_response(months)
    return source


def test_execute_builds_month_rows(make_month, make_metric, make_response):
    """A selected month should yield sorted rows with statuses."""
    months = [
        make_month(0, [make_metric("food", "-100", name="Food")]),
        make_month(
            2,
            [
                make_metric("fun", "-50", name="Fun"),
                make_metric("food", "-300", name="Food"),
            ],
        ),
    ]
    source = _source(make_response, months)
    use_case = GetMetricTableUseCase(source, logger=MagicMock())

    result = use_case.execute(Dimension.CATEGORY, month_position=2)

    source.fetch_dashboard.assert_called_once_with(Dimension.CATEGORY)
    assert result.scope_label == "Março/2024"
    assert [item.name for item in result.items] == ["Food", "Fun"]
    assert result.total == Decimal("350")
    food = result.items[0]
    # Baseline over the eleven other filled months: 100 / 11.
    assert food.status == MetricStatus.ABOVE_AVERAGE
    assert result.has_data


def test_execute_builds_annual_rows(make_month, make_metric, make_response):
    months = [
        make_month(0, [make_metric("food", "-100")]),
        make_month(5, [make_metric("food", "-20")]),
    ]
    use_case = GetMetricTableUseCase(
        _source(make_response, months),
        logger=MagicMock(),
    )

    result = use_case.execute(Dimension.CATEGORY)

    assert result.scope_label == "2024"
    assert result.month_position is None
    assert result.items[0].value == Decimal("120")
    assert result.items[0].percent == Decimal("1")


def test_execute_reports_empty_month(make_month, make_metric, make_response):
    months = [make_month(0, [make_metric("food", "-10")])]
    use_case = GetMetricTableUseCase(
        _source(make_response, months),
        logger=MagicMock(),
    )

    result = use_case.execute(Dimension.CATEGORY, month_position=6)

    assert result.items == []
    assert result.total == Decimal("0")
    assert not result.has_data


def test_execute_uses_configured_flow_type(
    make_month,
    make_metric,
    make_response,
) -> None:
    months = [
        make_month(
            0,
            [
                make_metric("salary", "5000", flow_type=FlowType.INCOME),
                make_metric("rent", "-900"),
            ],
        ),
    ]
    use_case = GetMetricTableUseCase(
        _source(make_response, months),
        logger=MagicMock(),
        flow_type=FlowType.INCOME,
    )

    result = use_case.execute(Dimension.CATEGORY, month_position=0)

    assert [item.key for item in result.items] == ["salary"]


def test_strict_months_controls_duplicate_handling(
    make_month,
    make_metric,
    make_response,
) -> None:
    months = [
        make_month(0, [make_metric("food", "-10")]),
        make_month(0, [make_metric("food", "-99")]),
    ]

    strict = GetMetricTableUseCase(
        _source(make_response, months),
        logger=MagicMock(),
    )
    with pytest.raises(DuplicateMonthError):
        strict.execute(Dimension.CATEGORY)

    lenient = GetMetricTableUseCase(
        _source(make_response, months),
        logger=MagicMock(),
        strict_months=False,
    )
    result = lenient.execute(Dimension.CATEGORY)
    assert result.total == Decimal("10")
