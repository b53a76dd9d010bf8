"""Tests for the GetDashboardSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_dashboard_summary import (
    GetDashboardSummaryUseCase,
)
from src.domain.models import DashboardSummary, Dimension


def _months(make_month):
    return [
        make_month(0, revenue="100", expenses="60", balance="40"),
        make_month(1, revenue="200", expenses="50", balance="150"),
    ]


def test_execute_returns_window_summary(make_month, make_response) -> None:
    summary = DashboardSummary(
        total_revenue=Decimal("300"),
        total_expenses=Decimal("110"),
        total_investments=Decimal("0"),
        balance=Decimal("190"),
    )
    source = MagicMock()
    source.fetch_dashboard.return_value = make_response(
        _months(make_month),
        summary,
    )
    logger = MagicMock()
    use_case = GetDashboardSummaryUseCase(source, logger=logger)

    result = use_case.execute(Dimension.BANK)

    source.fetch_dashboard.assert_called_once_with(Dimension.BANK)
    assert result.headline == summary
    assert result.reconciles is True
    assert result.data_range_label == "2024"
    assert result.window_year == 2024
    assert result.month_labels[:2] == ["Jan/2024", "Fev/2024"]
    assert len(result.month_labels) == 12
    logger.warning.assert_not_called()


def test_execute_flags_mismatched_summary(make_month, make_response) -> None:
    source = MagicMock()
    source.fetch_dashboard.return_value = make_response(
        _months(make_month),
        DashboardSummary.zero(),
    )
    logger = MagicMock()
    use_case = GetDashboardSummaryUseCase(source, logger=logger)

    result = use_case.execute(Dimension.CATEGORY, month_position=1)

    assert result.reconciles is False
    assert result.headline.total_revenue == Decimal("200")
    assert result.rollup.total_revenue == Decimal("300")
    assert logger.warning.called
