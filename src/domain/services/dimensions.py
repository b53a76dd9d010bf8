"""Per-dimension strategies for entity keys and drill-down filters."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.domain.constants import FALLBACK_COLOR_HEX, OTHERS_ENTITY_ID
from src.domain.exceptions import (
    MalformedInputError,
    UnsupportedDrilldownError,
)
from src.domain.models import (
    DashboardMetric,
    DateRange,
    Dimension,
    TransactionFilter,
)


class DimensionStrategy(ABC):
    """Key extraction and drill-down rules shared by all dimensions."""

    dimension: Dimension
    noun: str

    def entity_key(self, metric: DashboardMetric) -> str:
        """Return the grouping key of a metric record.

        Raises:
            MalformedInputError: If the record has neither id nor slug.
        """
        key = metric.key
        if not key:
            raise MalformedInputError(
                f"{self.noun} metric without id or slug: {metric!r}"
            )
        return key

    def display_name(self, metric: DashboardMetric) -> str:
        """Return the record name, or its key when the name is missing."""
        return metric.name or self.entity_key(metric)

    @staticmethod
    def display_color(metric: DashboardMetric) -> str:
        return metric.color_hex or FALLBACK_COLOR_HEX

    @abstractmethod
    def build_filter(
        self,
        entity_key: str,
        member_ids: Sequence[str],
        date_range: DateRange,
    ) -> TransactionFilter:
        """Return the transaction filter for one entity.

        Args:
            entity_key: Key of the entity being drilled into.
            member_ids: Grouped member IDs when the entity is Others.
            date_range: Date window of the selected scope.
        """


class CategoryStrategy(DimensionStrategy):
    dimension = Dimension.CATEGORY
    noun = "Category"

    def build_filter(
        self,
        entity_key: str,
        member_ids: Sequence[str],
        date_range: DateRange,
    ) -> TransactionFilter:
        if entity_key == OTHERS_ENTITY_ID:
            raise UnsupportedDrilldownError(
                "Category search accepts a single category id"
            )
        return TransactionFilter(
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            category_id=entity_key,
        )


class MerchantStrategy(DimensionStrategy):
    dimension = Dimension.MERCHANT
    noun = "Merchant"

    def build_filter(
        self,
        entity_key: str,
        member_ids: Sequence[str],
        date_range: DateRange,
    ) -> TransactionFilter:
        if entity_key == OTHERS_ENTITY_ID:
            alias_ids = tuple(member_ids)
        else:
            alias_ids = (entity_key,)
        return TransactionFilter(
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            merchant_alias_ids=alias_ids,
        )


class BankStrategy(DimensionStrategy):
    dimension = Dimension.BANK
    noun = "Bank"

    def build_filter(
        self,
        entity_key: str,
        member_ids: Sequence[str],
        date_range: DateRange,
    ) -> TransactionFilter:
        if entity_key == OTHERS_ENTITY_ID:
            raise UnsupportedDrilldownError(
                "Bank search accepts a single bank id"
            )
        return TransactionFilter(
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            bank_id=entity_key,
        )


_STRATEGIES: dict[Dimension, DimensionStrategy] = {
    Dimension.CATEGORY: CategoryStrategy(),
    Dimension.MERCHANT: MerchantStrategy(),
    Dimension.BANK: BankStrategy(),
}


def strategy_for(dimension: Dimension | str) -> DimensionStrategy:
    """Return the strategy handling a dimension.

    Raises:
        MalformedInputError: If the dimension is unknown.
    """
    try:
        return _STRATEGIES[Dimension(dimension)]
    except ValueError as exc:
        raise MalformedInputError(f"Unknown dimension: {dimension!r}") from exc


__all__ = [
    "DimensionStrategy",
    "CategoryStrategy",
    "MerchantStrategy",
    "BankStrategy",
    "strategy_for",
]
