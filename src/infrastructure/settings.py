"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import DEFAULT_DESCRIPTION_SEPARATOR
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class ConsolidationSettings:
    """Settings for general-ledger consolidation runs.

    Attributes:
        entries_file: Optional path to the JSON project journal entries.
        description_separator: Separator used in line-item descriptions.
    """

    entries_file: Optional[Path] = None
    description_separator: str = DEFAULT_DESCRIPTION_SEPARATOR

    @classmethod
    def from_env(cls) -> "ConsolidationSettings":
        """Build settings from environment variables.

        Returns:
            ConsolidationSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        raw_file = os.getenv("JOURNAL_ENTRIES_FILE")
        if raw_file:
            entries_file = cls._normalize_path(raw_file, logger=logger)
        else:
            entries_file = cls._default_entries_file(logger=logger)
        separator = os.getenv(
            "GL_DESCRIPTION_SEPARATOR",
            DEFAULT_DESCRIPTION_SEPARATOR,
        )
        return cls(
            entries_file=entries_file,
            description_separator=separator or DEFAULT_DESCRIPTION_SEPARATOR,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path | None:
        """Normalize the entries file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | None: Normalized filesystem path, or None for URIs with an
            unsupported scheme.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        elif parsed.scheme and len(parsed.scheme) > 1:
            logger.warning(
                f"Unsupported journal entries URI scheme: {parsed.scheme}"
            )
            return None
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Journal entries file does not exist at {path}")
        return path

    @staticmethod
    def _default_entries_file(logger) -> Path | None:
        """Return a default entries file when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single JSON file is found in data/.
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
                "Set JOURNAL_ENTRIES_FILE to choose one."
            )
        return None


__all__ = ["ConsolidationSettings"]
