"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.domain.constants import OTHERS_ENTITY_ID
from src.domain.exceptions import UnsupportedDrilldownError
from src.domain.models import (
    AggregatedTableItem,
    DashboardSummary,
    DashboardSummaryView,
    Dimension,
    EntityOption,
    EvolutionPoint,
    MetricComparisonView,
    MetricEvolutionView,
    MetricStatus,
    MetricTableView,
    SelectionState,
    TransactionFilter,
)


class _FakeColumn:
    def __init__(self) -> None:
        self.metrics: list[tuple[str, str]] = []

    def metric(self, label: str, value: str) -> None:
        self.metrics.append((label, value))


class _FakeSidebar:
    def __init__(self, choices: dict) -> None:
        self.choices = choices

    def selectbox(self, label, options, index=0, **_kwargs):
        return self.choices.get(label, options[index])


class _FakeStreamlit:
    def __init__(self, sidebar_choices=None, multiselect=None, drill=None):
        self.session_state: dict = {}
        self.sidebar = _FakeSidebar(sidebar_choices or {})
        self.columns_created: list[_FakeColumn] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.captions: list[str] = []
        self.dataframes: list = []
        self.json_payloads: list = []
        self._multiselect = multiselect
        self._drill = drill
        self.config_kwargs = None

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        pass

    def caption(self, text: str):
        self.captions.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def columns(self, count: int):
        self.columns_created = [_FakeColumn() for _ in range(count)]
        return self.columns_created

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def multiselect(self, label, options, default, **_kwargs):
        if self._multiselect is None:
            return default
        return self._multiselect

    def selectbox(self, label, options, **_kwargs):
        return self._drill or options[0]

    def json(self, payload):
        self.json_payloads.append(payload)

    def cache_data(self, **_kwargs):
        def decorator(func):
            return func

        return decorator


def _summary_view(month_labels, month_position=None):
    headline = DashboardSummary(
        total_revenue=Decimal("1000"),
        total_expenses=Decimal("350"),
        total_investments=Decimal("0"),
        balance=Decimal("650"),
    )
    return DashboardSummaryView(
        headline=headline,
        rollup=headline,
        reconciles=True,
        data_range_label="2024",
        month_position=month_position,
        window_year=2024 if month_labels else None,
        month_labels=month_labels,
    )


def _table_view(month_position):
    return MetricTableView(
        dimension=Dimension.MERCHANT,
        month_position=month_position,
        scope_label="Fevereiro/2024",
        items=[
            AggregatedTableItem(
                key="acme",
                name="Acme",
                value=Decimal("300"),
                color="#111111",
                percent=Decimal("0.857"),
                status=MetricStatus.ABOVE_AVERAGE,
            ),
            AggregatedTableItem(
                key=OTHERS_ENTITY_ID,
                name="Others",
                value=Decimal("50"),
                color="#94a3b8",
                percent=Decimal("0.143"),
                status=MetricStatus.BELOW_AVERAGE,
                grouped_ids=("m1", "m2"),
            ),
        ],
        total=Decimal("350"),
    )


def _evolution_view(selection):
    return MetricEvolutionView(
        dimension=Dimension.MERCHANT,
        selection=selection,
        entities=[EntityOption(key="acme", name="Acme", color="#111111")],
        points=[
            EvolutionPoint(
                year=2024,
                month_index=0,
                month="Janeiro",
                month_short="Jan",
                values={key: Decimal("12") for key in selection.selected},
            )
        ],
    )


@pytest.fixture
def usage_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(app, "get_usage_logger", lambda: logger)
    return logger


def test_fetch_summary_invokes_use_case(monkeypatch) -> None:
    """_fetch_summary should convert the dimension for the use case."""
    use_case = MagicMock()
    use_case.execute.return_value = "summary"
    monkeypatch.setattr(
        app,
        "build_dashboard_summary_use_case",
        lambda: use_case,
    )

    result = app._fetch_summary("bank", 3)

    assert result == "summary"
    use_case.execute.assert_called_once_with(
        dimension=Dimension.BANK,
        month_position=3,
    )


def test_load_table_uses_fetch(monkeypatch) -> None:
    monkeypatch.setattr(app, "_fetch_table", lambda d, m: (d, m))

    assert app._load_table("category", None) == ("category", None)


def test_current_selection_resets_on_dimension_change(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    fake_st.session_state[app.SELECTION_KEY] = SelectionState(
        selected=("food",),
        user_has_selected=True,
    )
    fake_st.session_state[app.SELECTION_DIMENSION_KEY] = "category"
    monkeypatch.setattr(app, "st", fake_st)

    same = app._current_selection("category")
    switched = app._current_selection("merchant")

    assert same.selected == ("food",)
    assert switched == SelectionState()
    assert fake_st.session_state[app.SELECTION_DIMENSION_KEY] == "merchant"


def test_main_warns_when_no_data(monkeypatch) -> None:
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_summary", lambda d, m: _summary_view([]))
    monkeypatch.setattr(
        app,
        "_load_table",
        lambda d, m: pytest.fail("table should not load"),
    )

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.warnings


def test_main_renders_selected_month(monkeypatch, usage_logger) -> None:
    """main should render cards, table and the default selection."""
    fake_st = _FakeStreamlit(sidebar_choices={"Group by": "merchant"})
    labels = ["Jan/2024", "Fev/2024"]
    calls = []
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_load_summary",
        lambda d, m: calls.append((d, m)) or _summary_view(labels, m),
    )
    monkeypatch.setattr(app, "_load_table", lambda d, m: _table_view(m))
    monkeypatch.setattr(
        app,
        "_fetch_comparison",
        lambda d, m: MetricComparisonView(
            dimension=Dimension.MERCHANT,
            month_position=m,
            scope_label="Fevereiro/2024",
            bars=[],
        ),
    )
    default = SelectionState(selected=("acme",))
    monkeypatch.setattr(
        app,
        "_fetch_evolution",
        lambda state, d, year: _evolution_view(default),
    )

    app.main()

    assert calls == [("merchant", None), ("merchant", 1)]
    labels_shown = [label for label, _ in fake_st.columns_created[0].metrics]
    assert labels_shown == ["Revenue"]
    table_rows, kwargs = fake_st.dataframes[0]
    assert [row["Name"] for row in table_rows] == ["Acme", "Others"]
    assert table_rows[0]["% of total"] == "85.7%"
    assert table_rows[1]["Status"] == "Low"
    assert kwargs["hide_index"] is True
    evolution_rows, _ = fake_st.dataframes[1]
    assert evolution_rows == [{"Month": "Jan", "Acme": 12.0}]
    assert fake_st.session_state[app.SELECTION_KEY] == default
    usage_logger.info.assert_not_called()


def test_render_evolution_records_user_choice(monkeypatch, usage_logger):
    fake_st = _FakeStreamlit(multiselect=[])
    monkeypatch.setattr(app, "st", fake_st)
    seen = []

    def _fake_fetch(state, dimension, window_year):
        seen.append(state)
        if state.user_has_selected:
            return _evolution_view(state)
        return _evolution_view(SelectionState(selected=("acme",)))

    monkeypatch.setattr(app, "_fetch_evolution", _fake_fetch)

    app._render_evolution("merchant", 2024)

    stored = fake_st.session_state[app.SELECTION_KEY]
    assert stored == SelectionState(selected=(), user_has_selected=True)
    assert seen[-1] is stored
    usage_logger.info.assert_called_once()


def test_render_drilldown_shows_query_params(monkeypatch, usage_logger):
    fake_st = _FakeStreamlit(drill="acme")
    monkeypatch.setattr(app, "st", fake_st)
    use_case = MagicMock()
    use_case.execute.return_value = TransactionFilter(
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 29),
        merchant_alias_ids=("acme",),
    )
    monkeypatch.setattr(
        app,
        "build_drilldown_filter_use_case",
        lambda: use_case,
    )

    app._render_drilldown(_table_view(1), 2024)

    assert fake_st.json_payloads == [
        {
            "startDate": "2024-02-01",
            "endDate": "2024-02-29",
            "merchantAliasIds": ["acme"],
        }
    ]
    kwargs = use_case.execute.call_args.kwargs
    assert kwargs["month_position"] == 1
    assert kwargs["dimension"] == Dimension.MERCHANT
    usage_logger.info.assert_called_once()


def test_render_drilldown_explains_unsupported(monkeypatch) -> None:
    fake_st = _FakeStreamlit(drill=OTHERS_ENTITY_ID)
    monkeypatch.setattr(app, "st", fake_st)
    use_case = MagicMock()
    use_case.execute.side_effect = UnsupportedDrilldownError("single id")
    monkeypatch.setattr(
        app,
        "build_drilldown_filter_use_case",
        lambda: use_case,
    )

    app._render_drilldown(_table_view(None), 2024)

    assert fake_st.infos == ["single id"]
    assert fake_st.json_payloads == []


def test_format_helpers() -> None:
    assert app._format_currency(Decimal("1234.5")) == "R$ 1,234.50"
    assert app._format_percent(Decimal("0.25")) == "25.0%"
