"""
Shared pytest fixtures.
"""
import logging
from io import StringIO

import pytest
from rich.console import Console
from rich.text import Text

from activitybar import settings


@pytest.fixture(autouse=True)
def clear_module_state():
    """Prevent bar width settings and CLI log handlers leaking between tests."""
    yield
    settings._bar_widths.clear()
    logging.getLogger("activitybar").handlers.clear()
    logging.getLogger("activitybar").setLevel(logging.NOTSET)


class RecordingBar:
    """Renderer that returns `length` '=' cells (or all `width` of them) and records each call."""

    def __init__(self, length: int | None = None) -> None:
        self.length = length
        self.calls: list[tuple[int, int]] = []

    def render(self, tick: int, width: int) -> Text:
        self.calls.append((tick, width))
        n = width if self.length is None else min(self.length, width)
        return Text("=" * n)


@pytest.fixture
def make_bar():
    """Factory for RecordingBar(length)."""
    return RecordingBar


@pytest.fixture
def capture_console():
    """Console that captures plain output in a StringIO buffer, 40 columns wide."""
    buf = StringIO()
    con = Console(file=buf, width=40, highlight=False, no_color=True)
    return con, buf
