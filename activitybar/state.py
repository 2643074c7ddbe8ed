"""
Indicator state model.

ActivityState is a closed set of four immutable values:

    Ready()         nothing has happened yet          → []
    Active(tick)    work in progress, tick animates   → renderer output
    Success()       finished successfully             → [Done]
    Failure()       finished with an error            → [Failed]

The driver (whatever refreshes the screen) owns the current state and
advances it; the renderer only ever reads it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Active:
    tick: int = 0

    def __post_init__(self) -> None:
        if self.tick < 0:
            raise ValueError(f"tick must be non-negative, got {self.tick}")

    def next(self) -> Active:
        """Return the state for the following refresh."""
        return Active(self.tick + 1)


@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class Failure:
    pass


ActivityState = Ready | Active | Success | Failure
