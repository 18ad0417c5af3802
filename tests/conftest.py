from __future__ import annotations

from pathlib import Path

import pytest

from cwget.config import Settings
from cwget.progress import ProgressReporter


@pytest.fixture
def messages() -> list[str]:
    return []


@pytest.fixture
def reporter(messages: list[str]) -> ProgressReporter:
    return ProgressReporter(log_action=messages.append)


@pytest.fixture
def settings(tmp_path: Path, messages: list[str]) -> Settings:
    return Settings(download_path=tmp_path / "manga", log_action=messages.append)
