"""
Determinate progress bar.

The caller sets .progress (0.0 – 1.0) before each refresh; render() draws it:

    [████████████░░░░░░░░░░]

The tick is ignored — a progress bar only moves when its fraction does.
"""

import math

from rich.text import Text

from activitybar.ui.theme import COLOR_DIM, PROGRESS_BAR_COLOR, PROGRESS_COMPLETE_COLOR


class ProgressBar:
    """
    Renderer for work with a known size.

    Out-of-range fractions are clamped, so a driver that overshoots
    (e.g. 101 of 100 bytes) still draws a full bar. NaN draws an empty one.
    """

    def __init__(self, progress: float = 0.0) -> None:
        self.progress = progress

    def render(self, tick: int, width: int) -> Text:
        width = max(width, 0)
        pct = 0.0 if math.isnan(self.progress) else min(max(self.progress, 0.0), 1.0)
        filled = round(width * pct)
        empty = width - filled

        bar_color = PROGRESS_COMPLETE_COLOR if pct >= 1.0 else PROGRESS_BAR_COLOR

        t = Text()
        t.append("[", style=COLOR_DIM)
        t.append("█" * filled, style=bar_color)
        t.append("░" * empty, style=COLOR_DIM)
        t.append("]", style=COLOR_DIM)
        return t
