"""Tests for the GetMetricEvolutionUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_metric_evolution import (
    GetMetricEvolutionUseCase,
)
from src.domain.models import Dimension, SelectionState


def _months(make_month, make_metric):
    return [
        make_month(
            0,
            [
                make_metric("rent", "-900", name="Rent"),
                make_metric("food", "-300", name="Food"),
                make_metric("fun", "-20", name="Fun"),
            ],
        ),
        make_month(1, [make_metric("food", "-200", name="Food")]),
    ]


def test_execute_applies_default_for_fresh_session(
    make_month,
    make_metric,
    make_response,
) -> None:
    source = MagicMock()
    source.fetch_dashboard.return_value = make_response(
        _months(make_month, make_metric)
    )
    logger = MagicMock()
    use_case = GetMetricEvolutionUseCase(source, logger=logger, top_n=2)

    result = use_case.execute(
        SelectionState(),
        reference_date=date(2024, 12, 31),
        dimension=Dimension.CATEGORY,
        window_year=2024,
    )

    assert result.selection.selected == ("rent", "food")
    assert result.selection.user_has_selected is False
    assert len(result.points) == 12
    assert result.points[1].values == {
        "rent": Decimal("0"),
        "food": Decimal("200"),
    }
    assert [entity.key for entity in result.entities] == [
        "rent",
        "food",
        "fun",
    ]
    logger.info.assert_any_call("Applied default selection: rent, food")


def test_execute_respects_user_selection(
    make_month,
    make_metric,
    make_response,
) -> None:
    source = MagicMock()
    source.fetch_dashboard.return_value = make_response(
        _months(make_month, make_metric)
    )
    use_case = GetMetricEvolutionUseCase(source, logger=MagicMock())
    cleared = SelectionState().with_user_selection([])

    result = use_case.execute(
        cleared,
        reference_date=date(2024, 12, 31),
        window_year=2024,
    )

    assert result.selection is cleared
    assert result.points == []
