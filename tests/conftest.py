"""Shared fixtures for the Source Notes test suite."""

import logging
import textwrap
from pathlib import Path

import pytest

COUNTER_SOURCE = textwrap.dedent("""\
    package demo;

    public class Counter {
        private int x;

        public int get() { return x; }
    }
""")


class RecordingNotifier:
    """Notifier that keeps every message for later assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, text: str) -> None:
        self.infos.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Create a notifier that records messages."""
    return RecordingNotifier()


@pytest.fixture
def counter_source() -> str:
    """Source of the Counter example class."""
    return COUNTER_SOURCE


@pytest.fixture
def counter_file(tmp_path: Path) -> Path:
    """Write the Counter example to a temporary .java file."""
    path = tmp_path / "Counter.java"
    path.write_text(COUNTER_SOURCE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams that a test may have closed."""
    yield
    logging.getLogger("source_notes").handlers.clear()
