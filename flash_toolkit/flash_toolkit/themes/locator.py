"""Lookup of template files inside the active theme."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


class ThemeLocator:
    """Finds files in the child theme first, then the parent theme."""

    def __init__(
        self, stylesheet_dir: Path | None = None, template_dir: Path | None = None
    ) -> None:
        self.stylesheet_dir = stylesheet_dir
        self.template_dir = template_dir

    @property
    def search_dirs(self) -> list[Path]:
        dirs: list[Path] = []
        for directory in (self.stylesheet_dir, self.template_dir):
            if directory is not None and directory not in dirs:
                dirs.append(directory)
        return dirs

    def locate(self, candidates: Iterable[str]) -> Path | None:
        """Return the first candidate that exists in the theme tree.

        Args:
            candidates: Relative template paths in precedence order

        Returns:
            Path of the first existing file, or None
        """
        search_dirs = self.search_dirs
        for candidate in candidates:
            if not candidate:
                continue
            for directory in search_dirs:
                path = directory / candidate
                if path.is_file():
                    logger.debug(f"Theme provides {candidate} at {path}")
                    return path
        return None
