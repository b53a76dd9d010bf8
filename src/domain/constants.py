"""Domain constants for spending metrics."""

OTHERS_ENTITY_ID = "__others__"

FALLBACK_COLOR_HEX = "#94a3b8"

DEFAULT_TOP_N = 2

MONTHS_PER_YEAR = 12

# Short codes and labels as delivered by the dashboard backend.
MONTH_SHORT_CODES = (
    "Jan",
    "Fev",
    "Mar",
    "Abr",
    "Mai",
    "Jun",
    "Jul",
    "Ago",
    "Set",
    "Out",
    "Nov",
    "Dez",
)

MONTH_FULL_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

# English codes accepted as aliases when reading payloads.
MONTH_SHORT_ALIASES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "OTHERS_ENTITY_ID",
    "FALLBACK_COLOR_HEX",
    "DEFAULT_TOP_N",
    "MONTHS_PER_YEAR",
    "MONTH_SHORT_CODES",
    "MONTH_FULL_NAMES",
    "MONTH_SHORT_ALIASES",
]
