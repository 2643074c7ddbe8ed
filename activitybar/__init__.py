"""activitybar — single-line terminal activity indicators"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("activitybar")
except PackageNotFoundError:
    __version__ = "dev"

from activitybar.indicator import ActivityIndicator, output_activity_indicator
from activitybar.settings import get_bar_width, set_bar_width
from activitybar.state import Active, ActivityState, Failure, Ready, Success

__all__ = [
    "ActivityIndicator",
    "ActivityState",
    "Active",
    "Failure",
    "Ready",
    "Success",
    "get_bar_width",
    "output_activity_indicator",
    "set_bar_width",
]
