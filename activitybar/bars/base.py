"""
BarRenderer — the one customization point of an activity indicator.

A renderer draws the bar shown while the indicator is Active. It gets the
current tick (to animate) and the number of columns it may use *inside*
the brackets, and returns a rich Text.

Contract: len(result) <= width + 2. This is not checked at runtime —
a renderer that overshoots pushes the line past the terminal edge.
"""

from typing import Protocol, runtime_checkable

from rich.text import Text


@runtime_checkable
class BarRenderer(Protocol):
    def render(self, tick: int, width: int) -> Text:
        ...
