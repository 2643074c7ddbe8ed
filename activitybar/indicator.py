"""
ActivityIndicator — title + bar on a single terminal line.

    Downloading [     •     ]
    Downloading [Done]
    Downlo… [████████░░░░░░]

Stateless — render() takes (state, terminal width, configured bar width)
and returns a rich Text. The caller owns the state and the refresh loop,
and calls output_activity_indicator() (or render()) once per frame.

Width budget, left to right:

    title  " "  bar
    └─────┘     └── at most min(configured, terminal - 4) + 2 columns
       └── whatever is left; truncated with "…" when it doesn't fit
"""

import unicodedata
import warnings

from rich.console import Console
from rich.text import Text

from activitybar.bars.base import BarRenderer
from activitybar.settings import DEFAULT_BAR_WIDTH, get_bar_width
from activitybar.state import Active, ActivityState, Failure, Ready, Success
from activitybar.ui.theme import STYLE_ERROR, STYLE_PLAIN, STYLE_SUCCESS


# Columns always kept free for brackets and the title separator.
BAR_RESERVED_COLUMNS = 4

ELLIPSIS = "…"


def max_bar_width(terminal_width: int, configured_bar_width: int) -> int:
    """Columns the Active renderer may use between its brackets (never negative)."""
    return max(min(configured_bar_width, terminal_width - BAR_RESERVED_COLUMNS), 0)


def render_bar(state: ActivityState, renderer: BarRenderer, max_width: int) -> Text:
    """
    Bar fragment for state.

    Only Active consults the renderer; the other states are fixed text
    and ignore max_width.
    """
    if isinstance(state, Ready):
        return Text("[]", style=STYLE_PLAIN)
    if isinstance(state, Active):
        return renderer.render(state.tick, max_width)
    if isinstance(state, Success):
        return Text("[Done]", style=STYLE_SUCCESS)
    if isinstance(state, Failure):
        return Text("[Failed]", style=STYLE_ERROR)
    raise TypeError(f"not an activity state: {state!r}")


class _LegacyWidth:
    """Deprecated fixed bar width: reads always give 25, writes are discarded."""

    def __get__(self, obj, owner=None) -> int:
        _warn_legacy_width()
        return DEFAULT_BAR_WIDTH

    def __set__(self, obj, value: int) -> None:
        _warn_legacy_width()


class _IndicatorType(type):
    # Makes ActivityIndicator.width readable and writable on the class itself.
    width = _LegacyWidth()


class ActivityIndicator(metaclass=_IndicatorType):
    """
    A titled activity bar.

    The renderer is borrowed, not owned — one LoadingBar can serve any
    number of indicators.
    """

    def __init__(self, title: str, renderer: BarRenderer) -> None:
        self._title = title
        self.renderer = renderer

    def __repr__(self) -> str:
        return f"ActivityIndicator({self._title!r}, {self.renderer!r})"

    @property
    def title(self) -> str:
        return self._title

    def render(
        self,
        state: ActivityState,
        terminal_width: int,
        configured_bar_width: int = DEFAULT_BAR_WIDTH,
    ) -> Text:
        """
        Compose the full line for one frame.

        The bar is measured after rendering (renderers may return less than
        they were offered) and the title gets the rest, minus one column for
        the separating space. A title that doesn't fit is cut so that
        prefix + "… " takes exactly the remaining columns.

        Lengths are code points, not terminal cells. The cut never separates
        a combining mark from its base letter; it steps back one letter
        instead, so the prefix can come out shorter than the budget.

        If the terminal is narrower than a fixed bar like "[Failed]", the
        line overflows — the bar is never shortened.
        """
        bar = render_bar(state, self.renderer, max_bar_width(terminal_width, configured_bar_width))

        text_width = terminal_width - (len(bar) + 1)
        if len(self._title) <= text_width:
            head = Text(self._title + " ", style=STYLE_PLAIN)
        else:
            cut = max(0, text_width - 1)
            while cut > 0 and unicodedata.combining(self._title[cut]):
                cut -= 1
            head = Text(self._title[:cut] + ELLIPSIS + " ", style=STYLE_PLAIN)
        return head + bar

    # ── Legacy ────────────────────────────────────────────────────────────────

    # Deprecated. Always 25; use activitybar.settings.get_bar_width(console).
    width = _LegacyWidth()


def output_activity_indicator(console: Console, indicator: ActivityIndicator, state: ActivityState) -> Text:
    """
    Render indicator for state against console and print the line.

    Reads the console's configured bar width and current terminal width on
    every call, so resizes and setting changes apply from the next frame.
    Returns the rendered Text. A line wider than the console (a fixed bar in
    a very narrow terminal) is cropped at the console width when printed,
    not wrapped.
    """
    line = indicator.render(state, console.size.width, get_bar_width(console))
    console.print(line, no_wrap=True, overflow="ignore", crop=True, highlight=False, markup=False)
    return line


def _warn_legacy_width() -> None:
    warnings.warn(
        "ActivityIndicator.width has no effect; use activitybar.settings.set_bar_width(console, ...) instead",
        DeprecationWarning,
        stacklevel=3,
    )
