"""Toolkit application object."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from .hooks import HookRegistry
from .options import OptionStore
from .scripts import ScriptQueue
from .settings import Settings
from .sidebars import SidebarRegistry
from .themes import ThemeLocator

logger = logging.getLogger(__name__)


class FlashToolkit:
    """Owns the configuration and registries shared by the helpers."""

    def __init__(
        self,
        settings: Settings | None = None,
        hooks: HookRegistry | None = None,
        options: OptionStore | None = None,
        sidebars: SidebarRegistry | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.hooks = hooks or HookRegistry()
        if options is None:
            options_file = self.settings.options_file
            options = OptionStore.from_yaml(options_file) if options_file else OptionStore()
        self.options = options
        self.sidebars = sidebars or SidebarRegistry()
        self.locator = ThemeLocator(self.settings.stylesheet_dir, self.settings.template_dir)

    def plugin_path(self) -> str:
        return str(self.settings.plugin_path).rstrip("/")

    def template_path(self) -> str:
        return self.hooks.apply_filters(
            "flash_toolkit_template_path", self.settings.template_path
        )

    @property
    def template_debug_mode(self) -> bool:
        return self.settings.template_debug_mode

    @contextmanager
    def request(self, out: TextIO | None = None) -> Iterator[ScriptQueue]:
        """Scope a script queue to one request and flush it on exit.

        Args:
            out: Stream receiving queued scripts (default: stdout)
        """
        queue = ScriptQueue(self.hooks)
        yield queue
        # Footer observers may still enqueue before the block is printed
        self.hooks.do_action("flash_toolkit_footer", queue)
        queue.flush(out if out is not None else sys.stdout)
