"""Month series normalization (gap-filling and lookups)."""

from collections.abc import Sequence
from logging import Logger

from src.domain.constants import (
    MONTH_FULL_NAMES,
    MONTH_SHORT_ALIASES,
    MONTH_SHORT_CODES,
    MONTHS_PER_YEAR,
)
from src.domain.exceptions import DuplicateMonthError, MalformedInputError
from src.domain.models import MonthSlot

_MONTH_INDEX_BY_CODE = {
    code.lower(): index
    for codes in (MONTH_SHORT_CODES, MONTH_SHORT_ALIASES)
    for index, code in enumerate(codes)
}


def resolve_month_index(month_short: str) -> int:
    """Return the 0-based month index of a short month code.

    Args:
        month_short: Short code such as ``"Fev"`` or ``"Feb"``.

    Returns:
        int: Month index between 0 and 11.

    Raises:
        MalformedInputError: If the code is not a known month.
    """
    index = _MONTH_INDEX_BY_CODE.get(month_short.strip().lower())
    if index is None:
        raise MalformedInputError(f"Unknown month code: {month_short!r}")
    return index


def empty_month_slot(year: int, month_index: int) -> MonthSlot:
    """Return a zero-valued placeholder slot for a calendar month."""
    _check_month_index(month_index)
    return MonthSlot(
        year=year,
        month_index=month_index,
        month=MONTH_FULL_NAMES[month_index],
        month_short=MONTH_SHORT_CODES[month_index],
    )


def is_single_year(months: Sequence[MonthSlot]) -> bool:
    """Return True when every slot belongs to the same year."""
    return len({slot.year for slot in months}) == 1


def fill_month_series(
    months: Sequence[MonthSlot],
    *,
    allow_duplicates: bool = False,
    logger: Logger | None = None,
) -> list[MonthSlot]:
    """Return a dense January to December series for a single year.

    Multi-year inputs are returned unchanged, in source order, and must be
    treated as sparse by callers.

    Args:
        months: Month slots from the upstream payload.
        allow_duplicates: Keep the first occurrence of a duplicated month
            instead of raising.
        logger: Logger used for warnings on tolerated duplicates.

    Returns:
        list[MonthSlot]: Twelve slots for a single year, the input otherwise.

    Raises:
        DuplicateMonthError: If a month repeats and duplicates are not
            allowed.
    """
    if not months:
        return []
    by_month = _index_months(months, allow_duplicates, logger)
    if not is_single_year(months):
        return list(by_month.values())

    year = months[0].year
    return [
        by_month.get((year, index)) or empty_month_slot(year, index)
        for index in range(MONTHS_PER_YEAR)
    ]


def find_month(
    months: Sequence[MonthSlot],
    year: int,
    month_index: int,
) -> MonthSlot | None:
    """Return the first slot matching a calendar month."""
    for slot in months:
        if slot.year == year and slot.month_index == month_index:
            return slot
    return None


def slot_at(months: Sequence[MonthSlot], position: int) -> MonthSlot:
    """Return the slot at a series position.

    Raises:
        MalformedInputError: If the position is outside the series.
    """
    if position < 0 or position >= len(months):
        raise MalformedInputError(
            f"Month position {position} outside series of {len(months)} months"
        )
    return months[position]


def window_year_of(months: Sequence[MonthSlot]) -> int | None:
    """Return the calendar year of a single-year series, None otherwise."""
    if months and is_single_year(months):
        return months[0].year
    return None


def month_label(slot: MonthSlot) -> str:
    return f"{slot.month_short}/{slot.year}"


def default_selected_month(
    months: Sequence[MonthSlot],
    current: int | None,
) -> int | None:
    """Return the month position to select after data changes.

    Keeps a valid current selection, otherwise selects the last slot.
    """
    if not months:
        return None
    if current is None or current < 0 or current >= len(months):
        return len(months) - 1
    return current


def data_range_label(months: Sequence[MonthSlot]) -> str:
    """Return a label describing the time span of a series."""
    if not months:
        return ""
    first = months[0]
    last = months[-1]
    if first.year == last.year:
        return str(first.year)
    return f"{month_label(first)} - {month_label(last)}"


def _index_months(
    months: Sequence[MonthSlot],
    allow_duplicates: bool,
    logger: Logger | None,
) -> dict[tuple[int, int], MonthSlot]:
    by_month: dict[tuple[int, int], MonthSlot] = {}
    for slot in months:
        _check_month_index(slot.month_index)
        key = (slot.year, slot.month_index)
        if key in by_month:
            if not allow_duplicates:
                raise DuplicateMonthError(slot.year, slot.month_index)
            if logger is not None:
                logger.warning(
                    f"Ignoring duplicate month {slot.month_short}/{slot.year}"
                )
            continue
        by_month[key] = slot
    return by_month


def _check_month_index(month_index: int) -> None:
    if not 0 <= month_index < MONTHS_PER_YEAR:
        raise MalformedInputError(f"Month index out of range: {month_index}")


__all__ = [
    "resolve_month_index",
    "empty_month_slot",
    "is_single_year",
    "fill_month_series",
    "find_month",
    "slot_at",
    "window_year_of",
    "month_label",
    "default_selected_month",
    "data_range_label",
]
