# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from taskshelf.cli.prompts import InputCollector


class FakeClock:
    """
    Deterministic clock for repositories.

    Each call returns the previous value + `step`, so every stamp differs.
    """

    def __init__(
        self,
        start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value


class ScriptedIO:
    """
    Feeds canned answers to InputCollector and captures everything it writes.

    Running out of answers raises EOFError, like input() on a closed stdin.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, label: str) -> str:
        self.prompts.append(label)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    def collector(self) -> InputCollector:
        return InputCollector(read=self.read, write=self.write)

    @property
    def text(self) -> str:
        return "\n".join(self.output)
