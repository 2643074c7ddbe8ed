"""
Per-console bar width setting.

The preferred bar width belongs to a console, not to an indicator: every
indicator printed to the same console uses the same width. Values live in
a side-table keyed by the console object itself, so nothing is attached to
the Console and an entry disappears when its console is garbage collected.

No clamping here — a negative or oversized value is stored as given and
clamped against the real terminal width at render time.
"""

import logging
from weakref import WeakKeyDictionary

from rich.console import Console


DEFAULT_BAR_WIDTH = 25

_bar_widths: "WeakKeyDictionary[Console, int]" = WeakKeyDictionary()

log = logging.getLogger(__name__)


def get_bar_width(console: Console) -> int:
    """Configured bar width for console, or DEFAULT_BAR_WIDTH if never set."""
    return _bar_widths.get(console, DEFAULT_BAR_WIDTH)


def set_bar_width(console: Console, width: int) -> None:
    if isinstance(width, bool) or not isinstance(width, int):
        raise TypeError(f"bar width must be an int, got {type(width).__name__}")
    _bar_widths[console] = width
    log.debug("bar width for console %#x set to %d", id(console), width)


def reset_bar_width(console: Console) -> None:
    """Forget any stored width; the console falls back to the default."""
    _bar_widths.pop(console, None)
