"""Domain models for transaction drill-down filters."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start_date: date
    end_date: date


@dataclass(frozen=True)
class TransactionFilter:
    """Filter parameters for the transaction search of one entity.

    Exactly one of ``category_id``, ``merchant_alias_ids`` or ``bank_id`` is
    set, depending on the dimension being drilled into.
    """

    start_date: date
    end_date: date
    category_id: str | None = None
    merchant_alias_ids: tuple[str, ...] = ()
    bank_id: str | None = None

    def to_query_params(self) -> dict[str, str | list[str]]:
        """Return the filter as transaction search query parameters."""
        params: dict[str, str | list[str]] = {
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
        }
        if self.category_id is not None:
            params["categoryId"] = self.category_id
        if self.merchant_alias_ids:
            params["merchantAliasIds"] = list(self.merchant_alias_ids)
        if self.bank_id is not None:
            params["bankId"] = self.bank_id
        return params


__all__ = ["DateRange", "TransactionFilter"]
