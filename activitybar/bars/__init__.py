"""
Bar renderers.

BARS maps the style names accepted by the CLI and config file to
renderer factories.
"""

from activitybar.bars.base import BarRenderer
from activitybar.bars.loading import LoadingBar
from activitybar.bars.progress import ProgressBar

BARS = {
    "loading": LoadingBar,
    "progress": ProgressBar,
}

__all__ = ["BARS", "BarRenderer", "LoadingBar", "ProgressBar"]
