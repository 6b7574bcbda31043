"""Shared types for the harvest engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    """Per-tick timing handed to every system.

    ``dt`` and ``elapsed`` are real seconds; ``sim_dt`` and ``sim_elapsed``
    are simulated seconds.
    """

    tick_number: int
    dt: float
    sim_dt: float
    elapsed: float
    sim_elapsed: float
    request_stop: Callable[[], None]

    @property
    def sim_minutes(self) -> float:
        return self.sim_dt / 60.0


System = Callable[[Any, TickContext], None]
Hook = Callable[[Any, TickContext], None]
