"""
Config file loading for activitybar.

Reads ~/.config/activitybar/config.toml and returns structured config.
Never raises — always returns a valid dict; anything missing or malformed
comes back as None so the caller falls through to its own default.

    bar_width = 30
    style = "progress"
"""

import logging
from pathlib import Path

from rich.console import Console

from activitybar.bars import BARS
from activitybar.settings import set_bar_width

_CONFIG_PATH = Path.home() / ".config" / "activitybar" / "config.toml"

log = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> dict:
    """
    Load and return activitybar config from TOML file.

    Returns {"bar_width": int | None, "style": str | None}.
    Missing file, parse errors, or bad shapes all return None for that key.
    """
    config_path = path or _CONFIG_PATH
    empty: dict = {"bar_width": None, "style": None}

    if not config_path.is_file():
        return empty

    try:
        raw = config_path.read_bytes()
    except OSError as e:
        log.debug("cannot read %s: %s", config_path, e)
        return empty

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            log.debug("no TOML parser available, ignoring %s", config_path)
            return empty

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        log.debug("ignoring malformed config %s: %s", config_path, e)
        return empty

    bar_width = data.get("bar_width")
    if bar_width is not None and (isinstance(bar_width, bool) or not isinstance(bar_width, int)):
        log.debug("ignoring bar_width=%r: not an integer", bar_width)
        bar_width = None

    style = data.get("style")
    if style is not None and (not isinstance(style, str) or style not in BARS):
        log.debug("ignoring style=%r: expected one of %s", style, ", ".join(BARS))
        style = None

    return {"bar_width": bar_width, "style": style}


def apply_config(console: Console, config: dict) -> None:
    """Push configured values into the console's settings."""
    if config.get("bar_width") is not None:
        set_bar_width(console, config["bar_width"])
