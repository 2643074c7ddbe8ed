"""
Indeterminate loading bar.

A single marker bounces between the brackets, one cell per tick:

    [•          ]  tick 0
    [     •     ]  tick 5
    [          •]  tick 10
    [         • ]  tick 11   (on its way back)
"""

from rich.text import Text

from activitybar.ui.theme import STYLE_BRAND, STYLE_DIM


MARKER = "•"


class LoadingBar:
    """Stateless bouncing-marker renderer; safe to share across indicators."""

    def __init__(self, marker: str = MARKER) -> None:
        if len(marker) != 1:
            raise ValueError(f"marker must be a single character, got {marker!r}")
        self.marker = marker

    def render(self, tick: int, width: int) -> Text:
        t = Text()
        t.append("[", style=STYLE_DIM)
        if width > 0:
            pos = _bounce(tick, width)
            t.append(" " * pos)
            t.append(self.marker, style=STYLE_BRAND)
            t.append(" " * (width - pos - 1))
        t.append("]", style=STYLE_DIM)
        return t


def _bounce(tick: int, width: int) -> int:
    """Marker position for tick: sweeps 0 … width-1 and back."""
    if width == 1:
        return 0
    period = 2 * (width - 1)
    offset = tick % period
    return offset if offset < width else period - offset
