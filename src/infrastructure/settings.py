"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from src.domain.constants import DEFAULT_TOP_N
from src.domain.models import Dimension, FlowType
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the metrics dashboard adapters.

    Attributes:
        payload_file: Path to the JSON dashboard snapshot.
        top_n: Number of entities pre-selected in the evolution view.
        flow_type: Flow type shown in tables and comparisons.
        dimension: Default grouping axis.
        strict_months: Reject payloads with duplicated months.
    """

    payload_file: Optional[Path] = None
    top_n: int = DEFAULT_TOP_N
    flow_type: FlowType = FlowType.EXPENSE
    dimension: Dimension = Dimension.CATEGORY
    strict_months: bool = True

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_payload = os.getenv("DASHBOARD_PAYLOAD_FILE")
        if raw_payload:
            payload_file = cls._normalize_path(raw_payload, logger=logger)
        else:
            payload_file = cls._default_payload_file(logger=logger)
        return cls(
            payload_file=payload_file,
            top_n=cls._parse_top_n(os.getenv("DASHBOARD_TOP_N"), logger),
            flow_type=cls._parse_enum(
                FlowType,
                os.getenv("DASHBOARD_FLOW_TYPE"),
                FlowType.EXPENSE,
                logger,
            ),
            dimension=cls._parse_enum(
                Dimension,
                os.getenv("DASHBOARD_DIMENSION"),
                Dimension.CATEGORY,
                logger,
            ),
            strict_months=cls._parse_bool(
                os.getenv("DASHBOARD_STRICT_MONTHS"),
                True,
                logger,
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Expand and resolve the payload path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Resolved filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Dashboard payload does not exist at {path}")
        return path

    @staticmethod
    def _default_payload_file(logger) -> Path | None:
        """Return a default payload path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single JSON file is in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set DASHBOARD_PAYLOAD_FILE to choose one."
            )
        return None

    @staticmethod
    def _parse_top_n(raw: str | None, logger) -> int:
        if raw is None or not raw.strip():
            return DEFAULT_TOP_N
        try:
            value = int(raw)
        except ValueError:
            logger.warning(
                f"Invalid DASHBOARD_TOP_N '{raw}', using {DEFAULT_TOP_N}"
            )
            return DEFAULT_TOP_N
        if value < 0:
            logger.warning(
                f"Negative DASHBOARD_TOP_N '{raw}', using {DEFAULT_TOP_N}"
            )
            return DEFAULT_TOP_N
        return value

    @staticmethod
    def _parse_enum(enum_cls, raw: str | None, default, logger):
        if raw is None or not raw.strip():
            return default
        try:
            return enum_cls(raw.strip().lower())
        except ValueError:
            logger.warning(
                f"Invalid {enum_cls.__name__} '{raw}', using {default.value}"
            )
            return default

    @staticmethod
    def _parse_bool(raw: str | None, default: bool, logger) -> bool:
        if raw is None or not raw.strip():
            return default
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid boolean '{raw}', using {default}")
        return default


__all__ = ["DashboardSettings"]
