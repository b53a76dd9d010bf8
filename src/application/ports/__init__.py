"""Application ports package."""

from .dashboard_source import DashboardSourcePort

__all__ = ["DashboardSourcePort"]
