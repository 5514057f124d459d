from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FLASH_TOOLKIT_", case_sensitive=False)

    # Bundled templates always win over theme overrides when set
    template_debug_mode: bool = False
    template_path: str = "flash-toolkit/"
    plugin_path: Path = PACKAGE_DIR
    stylesheet_dir: Path | None = None
    template_dir: Path | None = None
    options_file: Path | None = None
