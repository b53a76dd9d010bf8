"""Port for upstream dashboard payloads."""

from typing import Protocol

from src.domain.models import DashboardResponse, Dimension


class DashboardSourcePort(Protocol):
    """Port exposing the monthly dashboard breakdown of one dimension."""

    def fetch_dashboard(self, dimension: Dimension) -> DashboardResponse:
        """Return the summary and monthly metrics grouped by ``dimension``."""


__all__ = ["DashboardSourcePort"]
