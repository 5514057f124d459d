"""Named filter and action hooks."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

Callback = Callable[..., Any]


class HookRegistry:
    """Registry of named callback lists.

    Filters are reducers ``(value, *args) -> value`` chained in order; actions
    are notifications ``(*args)`` whose return values are discarded. Callbacks
    run by ascending priority, then in the order they were added.
    """

    def __init__(self) -> None:
        self._filters: dict[str, dict[int, list[Callback]]] = defaultdict(dict)
        self._actions: dict[str, dict[int, list[Callback]]] = defaultdict(dict)
        self._fired: dict[str, int] = defaultdict(int)

    @staticmethod
    def _add(
        table: dict[str, dict[int, list[Callback]]],
        name: str,
        callback: Callback,
        priority: int,
    ) -> None:
        table[name].setdefault(priority, []).append(callback)

    @staticmethod
    def _remove(
        table: dict[str, dict[int, list[Callback]]],
        name: str,
        callback: Callback,
        priority: int,
    ) -> bool:
        callbacks = table.get(name, {}).get(priority)
        if not callbacks or callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            del table[name][priority]
        return True

    @staticmethod
    def _ordered(table: dict[str, dict[int, list[Callback]]], name: str) -> list[Callback]:
        by_priority = table.get(name, {})
        # Snapshot so callbacks may add or remove hooks while running
        return [cb for priority in sorted(by_priority) for cb in list(by_priority[priority])]

    def add_filter(
        self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._add(self._filters, name, callback, priority)

    def remove_filter(
        self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        return self._remove(self._filters, name, callback, priority)

    def has_filter(self, name: str, callback: Callback | None = None) -> bool:
        callbacks = self._ordered(self._filters, name)
        if callback is None:
            return bool(callbacks)
        return callback in callbacks

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Pass *value* through every filter registered under *name*.

        Args:
            name: Hook name
            value: Initial value
            *args: Extra context handed to each callback

        Returns:
            The value returned by the last callback, or *value* if none ran
        """
        for callback in self._ordered(self._filters, name):
            value = callback(value, *args)
        return value

    def add_action(
        self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        self._add(self._actions, name, callback, priority)

    def remove_action(
        self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        return self._remove(self._actions, name, callback, priority)

    def has_action(self, name: str, callback: Callback | None = None) -> bool:
        callbacks = self._ordered(self._actions, name)
        if callback is None:
            return bool(callbacks)
        return callback in callbacks

    def do_action(self, name: str, *args: Any) -> None:
        """Notify every action registered under *name*."""
        self._fired[name] += 1
        callbacks = self._ordered(self._actions, name)
        logger.debug(f"Action {name}: {len(callbacks)} callback(s)")
        for callback in callbacks:
            callback(*args)

    def did_action(self, name: str) -> int:
        return self._fired.get(name, 0)
