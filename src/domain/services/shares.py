"""Percentage-of-total shares."""

from collections.abc import Sequence
from decimal import Decimal

from src.utils.decimal_utils import sum_decimals

_ZERO = Decimal("0")


def compute_share(value: Decimal, total: Decimal) -> Decimal:
    """Return ``value / total``, or 0 when the total is not positive."""
    if total > 0:
        return value / total
    return _ZERO


def distribute_shares(
    values: Sequence[Decimal],
    total: Decimal | None = None,
) -> list[Decimal]:
    """Convert absolute values into fractions of their scope total.

    Args:
        values: Absolute values of the scope.
        total: Scope total; defaults to the sum of ``values``.

    Returns:
        list[Decimal]: One share per value, all zero when the total is zero.
    """
    scope_total = sum_decimals(values) if total is None else total
    return [compute_share(value, scope_total) for value in values]


__all__ = ["compute_share", "distribute_shares"]
