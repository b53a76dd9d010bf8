"""Helpers for Decimal normalization."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to a finite Decimal.

    Args:
        value: Raw numeric value from a JSON payload or an adapter.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid numeric amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Non-finite numeric amount: {value!r}")
    return result


def absolute_amount(value) -> Decimal:
    """Return the absolute Decimal value of a signed amount."""
    return abs(coerce_decimal(value))


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    """Sum Decimal values starting from an exact zero."""
    return sum(values, start=Decimal("0"))


__all__ = ["coerce_decimal", "absolute_amount", "sum_decimals"]
