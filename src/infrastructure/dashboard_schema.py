"""Pydantic wire models of the upstream dashboard payload.

Field names are snake_case; the payload keys are their camelCase aliases.
Amounts go through ``coerce_decimal`` so missing values read as zero and
non-finite values are rejected.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from src.domain.models import FlowType
from src.utils.decimal_utils import coerce_decimal


def _optional_text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


Amount = Annotated[Decimal, BeforeValidator(coerce_decimal)]
OptionalText = Annotated[str | None, BeforeValidator(_optional_text)]
MemberId = Annotated[str, BeforeValidator(str)]


class CamelPayload(BaseModel):
    """Base model reading camelCase keys and ignoring unknown ones."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class SummaryPayload(CamelPayload):
    total_revenue: Amount = Decimal("0")
    total_expenses: Amount = Decimal("0")
    total_investments: Amount = Decimal("0")
    balance: Amount = Decimal("0")


class MetricPayload(CamelPayload):
    """One metric record; display fields may be missing."""

    id: OptionalText = None
    slug: OptionalText = None
    name: OptionalText = None
    color_hex: OptionalText = None
    type: FlowType = FlowType.EXPENSE
    total: Amount = Decimal("0")
    grouped_ids: list[MemberId] = Field(default_factory=list)

    @field_validator("grouped_ids", mode="before")
    @classmethod
    def ignore_non_list_grouped_ids(cls, value, info: ValidationInfo):
        if value is None:
            return []
        if not isinstance(value, list):
            logger = (info.context or {}).get("logger")
            if logger is not None:
                key = info.data.get("id") or info.data.get("slug")
                logger.warning(
                    f"Ignoring non-list groupedIds for metric {key}"
                )
            return []
        return value

    @model_validator(mode="after")
    def require_key(self) -> "MetricPayload":
        if not self.id and not self.slug:
            raise ValueError("Metric without 'id' or 'slug'")
        return self


class MonthPayload(CamelPayload):
    month: OptionalText = None
    month_short: str
    year: StrictInt
    revenue: Amount = Decimal("0")
    expenses: Amount = Decimal("0")
    investments: Amount = Decimal("0")
    balance: Amount = Decimal("0")
    metrics: list[MetricPayload] | None = None


class DashboardPayload(CamelPayload):
    summary: SummaryPayload | None = None
    months: list[MonthPayload] = Field(default_factory=list)


__all__ = [
    "CamelPayload",
    "SummaryPayload",
    "MetricPayload",
    "MonthPayload",
    "DashboardPayload",
]
