"""Site option storage."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

PRO_THEME_MARKER = "flash-pro"


class OptionStoreError(ValueError):
    """Raised when an options file cannot be loaded."""


class OptionStore:
    """In-memory key/value option store."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    @classmethod
    def from_yaml(cls, path: Path) -> OptionStore:
        if not path.exists():
            raise OptionStoreError(f"Options file not found at {path}")

        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise OptionStoreError(f"Options file {path} must contain a mapping")

        logger.debug(f"Loaded {len(data)} option(s) from {path}")
        return cls(data)

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def update_option(self, name: str, value: Any) -> None:
        self._values[name] = value

    def delete_option(self, name: str) -> bool:
        if name not in self._values:
            return False
        del self._values[name]
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._values


def is_pro_active(options: OptionStore) -> bool:
    """Check whether the active theme is Flash Pro."""
    return PRO_THEME_MARKER in str(options.get_option("template", ""))
