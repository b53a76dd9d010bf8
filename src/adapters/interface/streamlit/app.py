"""Streamlit dashboard entry point."""

from datetime import date
from decimal import Decimal

import streamlit as st

from src.domain.exceptions import UnsupportedDrilldownError
from src.domain.models import (
    DashboardSummaryView,
    Dimension,
    MetricComparisonView,
    MetricEvolutionView,
    MetricStatus,
    MetricTableView,
    SelectionState,
)
from src.infrastructure.container import (
    build_dashboard_summary_use_case,
    build_drilldown_filter_use_case,
    build_metric_comparison_use_case,
    build_metric_evolution_use_case,
    build_metric_table_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger

ANNUAL_LABEL = "Whole period"
SELECTION_KEY = "selection_state"
SELECTION_DIMENSION_KEY = "selection_dimension"
NO_DRILLDOWN = "(none)"

_STATUS_LABELS = {
    MetricStatus.ABOVE_AVERAGE: "High",
    MetricStatus.BELOW_AVERAGE: "Low",
    MetricStatus.AVERAGE: "Normal",
    MetricStatus.UNKNOWN: "n/a",
}


def _fetch_summary(
    dimension: str,
    month_position: int | None,
) -> DashboardSummaryView:
    """Fetch the headline summary for the scope."""
    use_case = build_dashboard_summary_use_case()
    return use_case.execute(
        dimension=Dimension(dimension),
        month_position=month_position,
    )


@st.cache_data(show_spinner=False)
def _load_summary(
    dimension: str,
    month_position: int | None,
) -> DashboardSummaryView:
    """Cached wrapper around _fetch_summary."""
    return _fetch_summary(dimension, month_position)


def _fetch_table(
    dimension: str,
    month_position: int | None,
) -> MetricTableView:
    """Fetch the metric table for the scope."""
    use_case = build_metric_table_use_case()
    return use_case.execute(
        dimension=Dimension(dimension),
        month_position=month_position,
    )


@st.cache_data(show_spinner=False)
def _load_table(
    dimension: str,
    month_position: int | None,
) -> MetricTableView:
    """Cached wrapper around _fetch_table."""
    return _fetch_table(dimension, month_position)


def _fetch_comparison(
    dimension: str,
    month_position: int | None,
) -> MetricComparisonView:
    """Fetch the comparison bars for the scope."""
    use_case = build_metric_comparison_use_case()
    return use_case.execute(
        dimension=Dimension(dimension),
        month_position=month_position,
    )


def _fetch_evolution(
    selection: SelectionState,
    dimension: str,
    window_year: int | None,
) -> MetricEvolutionView:
    """Fetch the evolution series of the selected entities."""
    use_case = build_metric_evolution_use_case()
    return use_case.execute(
        selection,
        reference_date=date.today(),
        dimension=Dimension(dimension),
        window_year=window_year,
    )


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"R$ {value:,.2f}"


def _format_percent(value: Decimal) -> str:
    return f"{value * 100:.1f}%"


def _current_selection(dimension: str) -> SelectionState:
    """Return the session selection, reset when the dimension changed."""
    state = st.session_state.get(SELECTION_KEY, SelectionState())
    if st.session_state.get(SELECTION_DIMENSION_KEY) != dimension:
        state = state.cleared_for_dimension_change()
        st.session_state[SELECTION_DIMENSION_KEY] = dimension
    return state


def _render_summary(summary: DashboardSummaryView) -> None:
    """Render the headline summary cards."""
    headline = summary.headline
    revenue_col, expenses_col, investments_col, balance_col = st.columns(4)
    revenue_col.metric("Revenue", _format_currency(headline.total_revenue))
    expenses_col.metric("Expenses", _format_currency(headline.total_expenses))
    investments_col.metric(
        "Investments",
        _format_currency(headline.total_investments),
    )
    balance_col.metric("Balance", _format_currency(headline.balance))
    if not summary.reconciles:
        st.warning("Summary totals do not match the monthly breakdown.")


def _render_table(table: MetricTableView) -> None:
    """Render the metric table rows."""
    st.subheader(f"Breakdown {table.scope_label}")
    if not table.has_data:
        st.info("No metrics recorded for this period.")
        return
    data = [
        {
            "Name": item.name,
            "Value": _format_currency(item.value),
            "% of total": _format_percent(item.percent),
            "Status": _STATUS_LABELS[item.status],
        }
        for item in table.items
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_comparison(comparison: MetricComparisonView) -> None:
    """Render value versus baseline for each entity."""
    if not comparison.bars:
        return
    st.subheader("Compared with the average of other months")
    data = [
        {
            "Name": bar.name,
            "Value": _format_currency(bar.value),
            "Average": _format_currency(bar.average),
            "Excess": _format_currency(bar.excess),
            "Savings": _format_currency(bar.savings),
        }
        for bar in comparison.bars
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_evolution(
    dimension: str,
    window_year: int | None,
) -> None:
    """Render the evolution table with the sticky default selection."""
    state = _current_selection(dimension)
    evolution = _fetch_evolution(state, dimension, window_year)
    state = evolution.selection
    names = {entity.key: entity.name for entity in evolution.entities}

    st.subheader("Monthly evolution")
    chosen = st.multiselect(
        "Compare",
        options=list(names),
        default=list(state.selected),
        format_func=lambda key: names.get(key, key),
    )
    if tuple(chosen) != state.selected:
        state = state.with_user_selection(chosen)
        get_usage_logger().info(
            f"Selection changed for {dimension}: {', '.join(chosen)}"
        )
        evolution = _fetch_evolution(state, dimension, window_year)
    st.session_state[SELECTION_KEY] = state

    if not evolution.points:
        st.caption("Select entities to compare")
        return
    data = [
        {
            "Month": point.month_short,
            **{
                names.get(key, key): float(value)
                for key, value in point.values.items()
            },
        }
        for point in evolution.points
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_drilldown(
    table: MetricTableView,
    window_year: int | None,
) -> None:
    """Render the transaction search filter of a selected entity."""
    if not table.has_data:
        return
    options = [NO_DRILLDOWN] + [item.key for item in table.items]
    names = {item.key: item.name for item in table.items}
    entity_key = st.selectbox(
        "Drill into",
        options=options,
        format_func=lambda key: names.get(key, key),
    )
    if entity_key == NO_DRILLDOWN:
        return
    use_case = build_drilldown_filter_use_case()
    try:
        transaction_filter = use_case.execute(
            entity_key,
            reference_date=date.today(),
            dimension=table.dimension,
            month_position=table.month_position,
            window_year=window_year,
        )
    except UnsupportedDrilldownError as exc:
        st.info(str(exc))
        return
    get_usage_logger().info(
        f"Drill-down into {table.dimension.value} {entity_key}"
    )
    st.json(transaction_filter.to_query_params())


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Spending Dashboard", layout="wide")
    st.title("Spending Dashboard")

    dimension = st.sidebar.selectbox(
        "Group by",
        [item.value for item in Dimension],
    )
    window = _load_summary(dimension, None)
    if not window.month_labels:
        st.warning("No dashboard data found. Export a payload first.")
        return
    st.caption(window.data_range_label)

    month_choice = st.sidebar.selectbox(
        "Month",
        [ANNUAL_LABEL] + window.month_labels,
        index=len(window.month_labels),
    )
    month_position = (
        None
        if month_choice == ANNUAL_LABEL
        else window.month_labels.index(month_choice)
    )

    summary = (
        window
        if month_position is None
        else _load_summary(dimension, month_position)
    )
    _render_summary(summary)

    table = _load_table(dimension, month_position)
    _render_table(table)
    _render_comparison(_fetch_comparison(dimension, month_position))
    _render_evolution(dimension, window.window_year)
    _render_drilldown(table, window.window_year)


if __name__ == "__main__":  # pragma: no cover
    main()
