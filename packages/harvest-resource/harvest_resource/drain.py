"""Activity-dependent drain rates and the drain system factory."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from harvest_resource.gauge import Gauge, GaugeHelper

if TYPE_CHECKING:
    from harvest import TickContext


class Consumption(str, Enum):
    HARVESTING = "high"
    DRIVING = "medium"
    IDLE = "low"


def classify(harvesting: bool, moving: bool) -> Consumption:
    """Harvesting beats driving beats idling."""
    if harvesting:
        return Consumption.HARVESTING
    if moving:
        return Consumption.DRIVING
    return Consumption.IDLE


@dataclass(frozen=True)
class DrainRates:
    """Drain per simulated minute for each consumption level."""

    harvesting: float
    driving: float
    idle: float

    def __post_init__(self) -> None:
        for name in ("harvesting", "driving", "idle"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} rate must be >= 0, got {getattr(self, name)}")

    def rate(self, level: Consumption) -> float:
        if level is Consumption.HARVESTING:
            return self.harvesting
        if level is Consumption.DRIVING:
            return self.driving
        return self.idle


def make_drain_system(
    rates: DrainRates,
    select: Callable[[Any], Gauge],
    consumption: Callable[[Any], Consumption | None],
) -> Callable[[Any, TickContext], None]:
    """Return a system that drains a gauge by this tick's consumption level.

    ``consumption(state)`` returning None skips the drain for that tick.
    """

    def drain_system(state: Any, ctx: TickContext) -> None:
        level = consumption(state)
        if level is None:
            return
        GaugeHelper.drain(select(state), rates.rate(level) * ctx.sim_minutes)

    return drain_system
