# src/taskshelf/cli/commands.py

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ..core.state import AppState
from .prompts import InputCollector

MenuHandler = Callable[[AppState, InputCollector], Awaitable[str]]

EXIT_KEYS = ("0", "exit", "quit", "q")


class MenuRegistry:
    """Numbered console menu used by the task list and library apps."""

    def __init__(self, title: str) -> None:
        self.title = title
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: MenuHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        k = key.lower()
        self._handlers[k] = handler
        self._labels[k] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def keys(self) -> list[str]:
        return list(self._labels)

    def is_exit(self, line: str) -> bool:
        return line.strip().lower() in EXIT_KEYS

    async def handle(self, state: AppState, io: InputCollector, line: str) -> str | None:
        """
        Run the entry picked by `line`.
        Returns the reply text, or None for an empty line.
        """
        key = line.strip().lower()
        if not key:
            return None

        handler = self._handlers.get(key)
        if handler is None:
            return f"Invalid choice: {key}. Pick one of {', '.join(self.keys())} or 0 to exit."

        return await handler(state, io)

    def render(self) -> str:
        lines = [f"=== {self.title} ===", ""]
        for key, label in self._labels.items():
            lines.append(f"{key}) {label}")
        lines.append("0) Exit")
        return "\n".join(lines)
