"""Dashboard source reading exported backend payloads from JSON files."""

import json
from pathlib import Path

from src.domain.exceptions import MalformedInputError
from src.domain.models import DashboardResponse, Dimension
from src.infrastructure.dashboard_payload import parse_dashboard_response
from src.infrastructure.logging.logger import get_app_logger


class JsonDashboardSource:
    """Read a dashboard snapshot exported from the backend.

    The file holds either a single ``DashboardResponse`` object used for
    every dimension, or an object keyed by dimension name
    (``"category"``, ``"merchant"``, ``"bank"``).
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Path to the JSON snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def fetch_dashboard(self, dimension: Dimension) -> DashboardResponse:
        """Return the parsed payload of a dimension.

        Raises:
            RuntimeError: If the file cannot be read.
            MalformedInputError: If the payload is invalid or has no entry
                for the dimension.
        """
        payload = self._read_payload()
        if isinstance(payload, dict) and "months" not in payload:
            if dimension.value not in payload:
                raise MalformedInputError(
                    f"No '{dimension.value}' payload in {self._path}"
                )
            payload = payload[dimension.value]
        response = parse_dashboard_response(payload, logger=self._logger)
        self._logger.info(
            f"Read {len(response.months)} months of {dimension.value} "
            f"metrics from {self._path.name}"
        )
        return response

    def _read_payload(self):
        try:
            with self._path.open(encoding="utf-8") as handle:
                return json.load(handle)
        except OSError as exc:
            raise RuntimeError(
                f"Cannot read dashboard payload at {self._path}: {exc}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise MalformedInputError(
                f"Invalid JSON in dashboard payload {self._path}: {exc}"
            ) from exc


__all__ = ["JsonDashboardSource"]
