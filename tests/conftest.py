# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskshelf.core.state import AppState
from taskshelf.library.library_models import LibraryItem
from taskshelf.storage.repository import RecordRepository
from taskshelf.tasks.task_models import Task

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskshelf-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        library_path=tmp_path / "library.json",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def task_repo(settings: SimpleNamespace, clock: FakeClock) -> RecordRepository[Task]:
    return RecordRepository(Task, settings.tasks_path, clock=clock)


@pytest.fixture()
def library_repo(settings: SimpleNamespace, clock: FakeClock) -> RecordRepository[LibraryItem]:
    return RecordRepository(LibraryItem, settings.library_path, clock=clock)


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    task_repo: RecordRepository[Task],
    library_repo: RecordRepository[LibraryItem],
) -> AppState:
    """AppState wired with real JSON repositories under tmp_path."""
    return AppState(settings=settings, tasks=task_repo, library=library_repo)
