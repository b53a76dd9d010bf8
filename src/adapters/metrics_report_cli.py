"""CLI adapter printing the headline summary and metric table.

Reads the dashboard snapshot configured by ``DASHBOARD_PAYLOAD_FILE`` and
prints the table of the dimension set by ``DASHBOARD_DIMENSION``.
``REPORT_MONTH`` selects a month position of the filled series; without it
the whole window is reported.
"""

import os

from src.domain.exceptions import MetricsEngineError
from src.infrastructure.container import (
    build_dashboard_source,
    build_dashboard_summary_use_case,
    build_metric_table_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def _parse_month(value: str | None, logger) -> int | None:
    """Parse a month position.

    Args:
        value: Month position as a string.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed position or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(
            f"Invalid month '{value}'. Expected a month position (0-11)."
        )
        return None


def main() -> None:
    """Print the summary cards and the metric table."""
    logger = get_app_logger()
    settings = DashboardSettings.from_env()
    month_position = _parse_month(os.getenv("REPORT_MONTH"), logger)
    try:
        source = build_dashboard_source(settings)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    summary_use_case = build_dashboard_summary_use_case(settings, source)
    table_use_case = build_metric_table_use_case(settings, source)
    try:
        summary = summary_use_case.execute(
            dimension=settings.dimension,
            month_position=month_position,
        )
        table = table_use_case.execute(
            dimension=settings.dimension,
            month_position=month_position,
        )
    except (MetricsEngineError, RuntimeError) as exc:
        logger.error(str(exc))
        return

    headline = summary.headline
    print(f"Dashboard {table.scope_label} ({settings.dimension.value})")
    print(
        f"revenue={headline.total_revenue}, "
        f"expenses={headline.total_expenses}, "
        f"investments={headline.total_investments}, "
        f"balance={headline.balance}"
    )
    if not summary.reconciles:
        print("warning: summary does not match the monthly totals")
    if not table.has_data:
        print("No metrics for this period.")
        return
    for item in table.items:
        print(
            f"{item.name:<30} {item.value:>12.2f} "
            f"{item.percent * 100:>6.1f}% {item.status.value}"
        )
    print(f"{'Total':<30} {table.total:>12.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
