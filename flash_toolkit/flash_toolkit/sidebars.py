"""Widget area enumeration."""

from __future__ import annotations

from typing import Iterator

from .core.models import Sidebar
from .hooks import HookRegistry

DEFAULT_EXCLUDED = ("Display Everywhere",)


class SidebarRegistry:
    """Registered sidebars, kept in registration order."""

    def __init__(self) -> None:
        self._sidebars: dict[str, Sidebar] = {}

    def register(self, sidebar: Sidebar) -> None:
        self._sidebars[sidebar.id] = sidebar

    def unregister(self, sidebar_id: str) -> bool:
        return self._sidebars.pop(sidebar_id, None) is not None

    def __iter__(self) -> Iterator[Sidebar]:
        return iter(list(self._sidebars.values()))

    def __len__(self) -> int:
        return len(self._sidebars)


def get_sidebars(
    registry: SidebarRegistry,
    hooks: HookRegistry,
    sidebars: dict[str, str] | None = None,
) -> dict[str, str]:
    """Map sidebar ids to names, skipping excluded sidebars.

    Args:
        registry: Registered sidebars
        hooks: Hook registry used for the exclusion filter
        sidebars: Entries to start from; not modified

    Returns:
        Sidebar id to display name
    """
    result = dict(sidebars or {})
    excluded = hooks.apply_filters("flash_toolkit_sidebars_exclude", list(DEFAULT_EXCLUDED))
    if excluded is None:
        excluded = []

    for sidebar in registry:
        if sidebar.name not in excluded:
            result[sidebar.id] = sidebar.name

    return result
