"""Domain exceptions for the metrics engine."""


class MetricsEngineError(ValueError):
    """Base error raised by the metrics engine."""


class MalformedInputError(MetricsEngineError):
    """Input violates the structural contract of the upstream payload."""


class DuplicateMonthError(MalformedInputError):
    """The same calendar month appears more than once in a window."""

    def __init__(self, year: int, month_index: int) -> None:
        super().__init__(
            f"Duplicate month in series: year={year}, "
            f"month_index={month_index}"
        )
        self.year = year
        self.month_index = month_index


class UnsupportedDrilldownError(MetricsEngineError):
    """The dimension cannot build a transaction filter for the entity."""


__all__ = [
    "MetricsEngineError",
    "MalformedInputError",
    "DuplicateMonthError",
    "UnsupportedDrilldownError",
]
