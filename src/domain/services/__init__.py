"""Domain services package."""

from .aggregation import (
    aggregate_annual,
    aggregate_metrics,
    aggregate_month,
    has_metric_data,
    list_entities,
    merge_grouped_ids,
)
from .averages import (
    build_comparison_bars,
    classify_status,
    compute_baseline_average,
    derive_metric_views,
)
from .dimensions import strategy_for
from .drilldown import build_drilldown_filter, collect_member_ids
from .evolution import build_evolution_series
from .month_series import (
    data_range_label,
    default_selected_month,
    fill_month_series,
    resolve_month_index,
)
from .periods import resolve_scope_date_range
from .rollup import (
    check_summary_reconciles,
    headline_summary,
    rollup_annual_metrics,
    rollup_scalars,
)
from .shares import compute_share, distribute_shares
from .top_n import select_top_entities, suggest_default_selection

__all__ = [
    "aggregate_annual",
    "aggregate_metrics",
    "aggregate_month",
    "build_comparison_bars",
    "build_drilldown_filter",
    "build_evolution_series",
    "check_summary_reconciles",
    "classify_status",
    "collect_member_ids",
    "compute_baseline_average",
    "compute_share",
    "data_range_label",
    "default_selected_month",
    "derive_metric_views",
    "distribute_shares",
    "fill_month_series",
    "has_metric_data",
    "headline_summary",
    "list_entities",
    "merge_grouped_ids",
    "resolve_month_index",
    "resolve_scope_date_range",
    "rollup_annual_metrics",
    "rollup_scalars",
    "select_top_entities",
    "strategy_for",
    "suggest_default_selection",
]
