"""Date windows of dashboard scopes."""

from calendar import monthrange
from collections.abc import Sequence
from datetime import date

from src.domain.models import DateRange, MonthSlot
from src.domain.services.month_series import slot_at


def month_date_range(year: int, month_index: int) -> DateRange:
    """Return the first and last day of a calendar month."""
    month = month_index + 1
    last_day = monthrange(year, month)[1]
    return DateRange(
        start_date=date(year, month, 1),
        end_date=date(year, month, last_day),
    )


def year_date_range(year: int) -> DateRange:
    """Return January 1st to December 31st of a year."""
    return DateRange(start_date=date(year, 1, 1), end_date=date(year, 12, 31))


def rolling_twelve_months_range(reference_date: date) -> DateRange:
    """Return the twelve calendar months ending with the reference month."""
    start_year = reference_date.year
    start_month = reference_date.month - 11
    if start_month < 1:
        start_month += 12
        start_year -= 1
    end = month_date_range(reference_date.year, reference_date.month - 1)
    return DateRange(
        start_date=date(start_year, start_month, 1),
        end_date=end.end_date,
    )


def resolve_scope_date_range(
    months: Sequence[MonthSlot],
    *,
    month_position: int | None,
    window_year: int | None,
    reference_date: date,
) -> DateRange:
    """Return the date window of the selected scope.

    Args:
        months: Month series of the active window.
        month_position: Selected month, or None for the whole window.
        window_year: Calendar year of the window, None for the rolling
            last twelve months.
        reference_date: Date the rolling window ends on.

    Raises:
        MalformedInputError: If the selected month is outside the series.
    """
    if month_position is not None:
        slot = slot_at(months, month_position)
        return month_date_range(slot.year, slot.month_index)
    if window_year is None:
        return rolling_twelve_months_range(reference_date)
    return year_date_range(window_year)


def is_future_month(
    slot: MonthSlot,
    *,
    window_year: int | None,
    reference_date: date,
) -> bool:
    """Return True for months after the reference month of the current year.

    Rolling windows never contain future months.
    """
    if window_year is None or window_year != reference_date.year:
        return False
    if slot.year != window_year:
        return False
    return slot.month_index > reference_date.month - 1


__all__ = [
    "month_date_range",
    "year_date_range",
    "rolling_twelve_months_range",
    "resolve_scope_date_range",
    "is_future_month",
]
