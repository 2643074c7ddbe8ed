"""
activitybar visual design system.

All colors and styles as named constants.
Import from here — never hardcode markup strings in other modules.

The palette is 24-bit hex so bars look the same across Terminal.app,
iTerm2, Alacritty, Windows Terminal, etc. Rich downgrades it for
terminals with fewer colors and strips it entirely under NO_COLOR.
"""

from rich.style import Style


# ── Color palette ─────────────────────────────────────────────────────────────

COLOR_SUCCESS = "#4DBD74"       # Calm sage-green
COLOR_ERROR   = "#E05252"       # Warm severity red
COLOR_BRAND   = "#7B9FD4"       # Periwinkle blue
COLOR_DIM     = "#787878"       # Medium gray

PROGRESS_BAR_COLOR      = "#7B9FD4"
PROGRESS_COMPLETE_COLOR = "#4DBD74"


# ── Rich styles ───────────────────────────────────────────────────────────────

STYLE_PLAIN   = Style.null()
STYLE_SUCCESS = Style(color=COLOR_SUCCESS, bold=True)
STYLE_ERROR   = Style(color=COLOR_ERROR,   bold=True)
STYLE_BRAND   = Style(color=COLOR_BRAND,   bold=True)
STYLE_DIM     = Style(color=COLOR_DIM)
