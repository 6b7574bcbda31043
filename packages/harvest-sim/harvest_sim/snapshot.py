"""Read-only views of the simulation for renderers and the run summary."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from harvest_physics import vec
from harvest_resource import GaugeHelper

from harvest_sim.battery_swap import stage_message
from harvest_sim.tractor import harvest_blocked

if TYPE_CHECKING:
    from harvest_sim.state import SimState

MIN_RATE = 1e-4


class EndReason(str, Enum):
    FIELD_HARVESTED = "field_harvested"
    TIME_LIMIT = "time_limit"


@dataclass(frozen=True)
class RunSummary:
    reason: EndReason
    real_time: float
    sim_time: float
    coverage_percent: float
    tractor_calls: int
    unloads: int
    swaps: int


@dataclass(frozen=True)
class SimSnapshot:
    """Everything a HUD needs for one frame. Times are seconds, countdowns minutes."""

    tick: int
    real_time: float
    sim_time: float
    coverage: float
    harvested_tiles: int
    total_tiles: int
    position: vec.Vec2
    heading: float
    header_engaged: bool
    tank: float
    tank_capacity: float
    battery: float
    battery_capacity: float
    tractor_phase: str
    tractor_countdown: float
    tractor_position: vec.Vec2
    tractor_heading: float
    trailer_fill: float
    swap_active: bool
    swap_mode: str | None
    swap_remaining: float
    swap_message: str | None
    carrier_position: vec.Vec2 | None
    time_until_tank_full: float | None
    consumption: str
    status: str
    running: bool


def time_until_tank_full(state: SimState) -> float | None:
    """Simulated minutes until the tank fills at the last observed rate.

    None while not harvesting.
    """
    if not state.header_engaged or harvest_blocked(state):
        return None
    return GaugeHelper.headroom(state.tank) / max(MIN_RATE, state.last_harvest_rate)


def make_snapshot(state: SimState, running: bool) -> SimSnapshot:
    swap = state.swap
    tractor = state.tractor
    return SimSnapshot(
        tick=state.tick,
        real_time=state.real_time,
        sim_time=state.sim_time,
        coverage=state.field.coverage_ratio(),
        harvested_tiles=state.field.harvested_count,
        total_tiles=state.field.total,
        position=state.combine.position,
        heading=state.combine.heading,
        header_engaged=state.header_engaged,
        tank=state.tank.current,
        tank_capacity=state.tank.capacity,
        battery=state.battery.current,
        battery_capacity=state.battery.capacity,
        tractor_phase=tractor.phase.value,
        tractor_countdown=tractor.countdown(),
        tractor_position=tractor.position,
        tractor_heading=tractor.heading,
        trailer_fill=tractor.trailer_fill,
        swap_active=swap.active,
        swap_mode=swap.mode.value if swap.active else None,
        swap_remaining=swap.timer.remaining if swap.active else 0.0,
        swap_message=stage_message(state) if swap.active else None,
        carrier_position=state.carrier_position,
        time_until_tank_full=time_until_tank_full(state),
        consumption=state.consumption.value,
        status=state.status,
        running=running,
    )


def format_clock(seconds: float) -> str:
    """``mm:ss``, minutes unbounded."""
    total = max(0, int(seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


def format_minutes(minutes: float) -> str:
    return format_clock(minutes * 60.0)
