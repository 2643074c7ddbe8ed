"""
activitybar — command-line entry point.

Renders a single indicator frame and prints it. Handy for shell scripts
that redraw their own status line, and for eyeballing bar styles:

    activitybar "Downloading" --state active --tick 7
    activitybar "Downloading" --style progress --progress 0.4
    activitybar "Downloading" --state failure
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from activitybar import __version__
from activitybar.bars import BARS
from activitybar.config import apply_config, load_config
from activitybar.indicator import ActivityIndicator, output_activity_indicator
from activitybar.settings import set_bar_width
from activitybar.state import Active, ActivityState, Failure, Ready, Success


log = logging.getLogger("activitybar")


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="activitybar", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="activitybar")
@click.argument("title")
# State
@click.option(
    "--state",
    type=click.Choice(["ready", "active", "success", "failure"], case_sensitive=False),
    default="active",
    show_default=True,
    help="Indicator state to render.",
)
@click.option(
    "--tick",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Animation tick for the active state.",
)
# Bar style
@click.option(
    "--style",
    type=click.Choice(sorted(BARS), case_sensitive=False),
    default=None,
    help="Bar style for the active state (default: from config, else loading).",
)
@click.option(
    "--progress",
    type=click.FloatRange(0.0, 1.0),
    default=0.0,
    show_default=True,
    help="Fraction complete, for --style progress.",
)
# Sizing
@click.option(
    "--bar-width",
    type=int,
    default=None,
    help="Preferred bar width in columns (default: from config, else 25).",
)
@click.option(
    "--terminal-width",
    type=click.IntRange(min=1),
    default=None,
    help="Render for this many columns instead of the detected terminal width.",
)
# Config / diagnostics
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to read instead of ~/.config/activitybar/config.toml.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(
    title: str,
    state: str,
    tick: int,
    style: Optional[str],
    progress: float,
    bar_width: Optional[int],
    terminal_width: Optional[int],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Render one activity indicator line for TITLE.

    \b
    Environment variables:
      NO_COLOR=1   Disable all colour output.
      COLUMNS=N    Terminal width when it can't be detected.
    """
    _setup_logging(verbose)

    console = Console(width=terminal_width)

    config = load_config(config_path)
    apply_config(console, config)
    if bar_width is not None:
        set_bar_width(console, bar_width)

    style_name = (style or config["style"] or "loading").lower()
    renderer = BARS[style_name]()
    if style_name == "progress":
        renderer.progress = progress

    log.debug("rendering %r: state=%s tick=%d style=%s width=%d",
              title, state, tick, style_name, console.size.width)

    indicator = ActivityIndicator(title, renderer)
    output_activity_indicator(console, indicator, _resolve_state(state, tick))


# ── Helpers ───────────────────────────────────────────────────────────────────

def _resolve_state(name: str, tick: int) -> ActivityState:
    name = name.lower()
    if name == "ready":
        return Ready()
    if name == "success":
        return Success()
    if name == "failure":
        return Failure()
    return Active(tick)


def _setup_logging(verbose: bool) -> None:
    """Debug log to stderr with --verbose, otherwise only warnings."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    log.handlers[:] = [handler]
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


if __name__ == "__main__":
    cli()
