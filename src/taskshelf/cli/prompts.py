# src/taskshelf/cli/prompts.py

"""
Console input helpers.

All validation of raw text happens here with retry-until-valid loops, so the
repositories only ever see typed values. `read`/`write` are injectable for
tests.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import TypeVar

from ..core.choices import Choice

C = TypeVar("C", bound=Choice)

MIN_YEAR = 1000


def _max_year() -> int:
    return date.today().year + 1


class InputCollector:
    def __init__(
        self,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._read = read or input
        self._write = write or print

    def say(self, text: str) -> None:
        self._write(text)

    def prompt(self, label: str) -> str:
        return (self._read(label) or "").strip()

    def prompt_required(self, label: str) -> str:
        while True:
            v = self.prompt(label)
            if v:
                return v
            self.say("Value required. Try again.")

    def prompt_nullable(self, label: str) -> str | None:
        v = self.prompt(label)
        return v or None

    def prompt_int(self, label: str) -> int:
        while True:
            v = self.prompt(label)
            try:
                return int(v)
            except ValueError:
                self.say("Invalid number. Try again.")

    def _parse_year(self, v: str) -> int | None:
        try:
            n = int(v)
        except ValueError:
            return None
        return n if MIN_YEAR <= n <= _max_year() else None

    def prompt_year(self, label: str) -> int:
        while True:
            n = self._parse_year(self.prompt(label))
            if n is not None:
                return n
            self.say(f"Invalid year. Use {MIN_YEAR}-{_max_year()}.")

    def prompt_year_nullable(self, label: str) -> int | None:
        while True:
            v = self.prompt(label)
            if not v:
                return None
            n = self._parse_year(v)
            if n is not None:
                return n
            self.say(f"Invalid year. Use {MIN_YEAR}-{_max_year()} or leave empty.")

    def prompt_date(self, label: str) -> date:
        while True:
            v = self.prompt(label)
            try:
                return date.fromisoformat(v)
            except ValueError:
                self.say("Invalid date. Use YYYY-MM-DD.")

    def prompt_date_nullable(self, label: str) -> date | None:
        while True:
            v = self.prompt(label)
            if not v:
                return None
            try:
                return date.fromisoformat(v)
            except ValueError:
                self.say("Invalid date. Use YYYY-MM-DD or leave empty.")

    def _choice_menu(self, enum_cls: type[C]) -> str:
        return "  ".join(f"{m.ordinal}) {m.label}" for m in enum_cls)

    def prompt_choice(self, enum_cls: type[C], title: str) -> C:
        while True:
            self.say(f"Select {title}: {self._choice_menu(enum_cls)}")
            picked = enum_cls.parse(self.prompt("Choice: "))
            if picked is not None:
                return picked
            self.say("Invalid choice.")

    def prompt_choice_nullable(self, enum_cls: type[C], title: str, current: C) -> C | None:
        """Blank keeps the current value (returns None)."""
        while True:
            self.say(f"Current {title}: {current.label}")
            self.say(f"Select new {title} or leave empty to keep: {self._choice_menu(enum_cls)}")
            v = self.prompt("Choice: ")
            if not v:
                return None
            picked = enum_cls.parse(v)
            if picked is not None:
                return picked
            self.say("Invalid choice.")

    def confirm(self, word: str = "DELETE") -> bool:
        return self.prompt(f"Type {word} to confirm: ") == word
