"""Shared fixtures for toolkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from flash_toolkit import FlashToolkit, Settings


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "themes" / "flash"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "plugins" / "flash-toolkit"
    (directory / "templates").mkdir(parents=True)
    return directory


@pytest.fixture
def make_toolkit(theme_dir: Path, plugin_dir: Path, monkeypatch: pytest.MonkeyPatch):
    for var in (
        "TEMPLATE_DEBUG_MODE",
        "TEMPLATE_PATH",
        "PLUGIN_PATH",
        "STYLESHEET_DIR",
        "TEMPLATE_DIR",
        "OPTIONS_FILE",
    ):
        monkeypatch.delenv(f"FLASH_TOOLKIT_{var}", raising=False)

    def _make(**overrides) -> FlashToolkit:
        values = {"plugin_path": plugin_dir, "stylesheet_dir": theme_dir}
        values.update(overrides)
        return FlashToolkit(settings=Settings(**values))

    return _make


@pytest.fixture
def toolkit(make_toolkit) -> FlashToolkit:
    return make_toolkit()
