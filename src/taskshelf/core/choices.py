# src/taskshelf/core/choices.py

from __future__ import annotations

from enum import StrEnum
from typing import Self


class Choice(StrEnum):
    """
    Base for enumerated record fields.

    Notes:
    - the value is the symbolic name written to JSON, so reordering members
      never changes stored data;
    - `ordinal` follows declaration order starting at 1 and is used for
      ordering (priority tiebreaks, summary grouping).
    """

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self) + 1

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_json(cls, raw: object) -> Self:
        if not isinstance(raw, str):
            raise ValueError(f"{cls.__name__}: expected a string, got {raw!r}")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"{cls.__name__}: unknown value {raw!r}") from None

    @classmethod
    def parse(cls, text: str) -> Self | None:
        """Accept a 1-based ordinal ("2") or a name ("medium"). None if neither."""
        s = (text or "").strip().lower()
        if not s:
            return None
        if s.isdigit():
            n = int(s)
            members = list(cls)
            return members[n - 1] if 1 <= n <= len(members) else None
        try:
            return cls(s)
        except ValueError:
            return None
