"""SimState - the single mutable context every system receives."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from harvest_field import NO_SWEEP, FieldGrid, SweepResult
from harvest_physics import CombineBody, vec
from harvest_resource import Consumption, Gauge

from harvest_sim.battery_swap import BatterySwap, SwapRecord
from harvest_sim.config import SimConfig
from harvest_sim.events import EventLog
from harvest_sim.sides import SideSlots
from harvest_sim.tractor import Tractor


@dataclass
class Controls:
    """Control intents for one tick.

    The steer and throttle flags are held inputs; the last three are
    one-shot triggers applied before the tick runs.
    """

    steer_left: bool = False
    steer_right: bool = False
    throttle_forward: bool = False
    throttle_backward: bool = False
    toggle_header: bool = False
    call_tractor: bool = False
    trigger_battery_swap: bool = False

    @property
    def steer(self) -> int:
        return int(self.steer_right) - int(self.steer_left)

    @property
    def throttle(self) -> int:
        return int(self.throttle_forward) - int(self.throttle_backward)


@dataclass
class TickFlags:
    """Per-tick facts computed early in the tick and read by later systems."""

    movement_locked: bool = False
    speed_multiplier: float = 1.0
    moving: bool = False
    harvesting: bool = False
    swapping: bool = False


@dataclass
class Counters:
    tractor_calls: int = 0
    unloads: int = 0
    swaps: int = 0


class SimState:
    """Field, combine, tank, battery, tractor and swap for one run.

    Owned by the Simulation; systems mutate it in a fixed order each tick.
    ``tick``, ``real_time`` and ``sim_time`` mirror the clock so events can
    be stamped from outside a tick too.
    """

    def __init__(self, config: SimConfig, events: EventLog | None = None) -> None:
        self.config = config
        self.events = events if events is not None else EventLog()
        self.header_spec = config.header_spec()
        self.drive = config.drive_params()
        self.rates = config.drain_rates()
        self.field = FieldGrid(config.field_width_tiles, config.field_height_tiles)
        self.reset()

    def reset(self) -> None:
        cfg = self.config
        self.field.reset()
        self.combine = CombineBody(position=cfg.start_position, heading=cfg.start_heading)
        self.header_engaged = False
        self.tank = Gauge(cfg.tank_capacity)
        self.battery = Gauge(cfg.battery_capacity, cfg.battery_capacity)
        self.tractor = Tractor(position=cfg.tractor_home)
        self.swap = BatterySwap()
        self.sides = SideSlots()
        self.carrier_position: vec.Vec2 | None = None
        self.controls = Controls()
        self.flags = TickFlags()
        self.last_sweep: SweepResult = NO_SWEEP
        self.last_harvest_rate = cfg.initial_harvest_rate
        self.consumption = Consumption.IDLE
        self.low_battery_prompted = False
        self.counters = Counters()
        self.swap_log: list[SwapRecord] = []
        self.status = ""
        self.summary: Any = None
        self.tick = 0
        self.real_time = 0.0
        self.sim_time = 0.0
        self.events.clear()

    def emit(self, type: str, **data: Any) -> None:
        self.events.emit(self.tick, self.real_time, self.sim_time, type, **data)

    def announce(self, message: str) -> None:
        """Set the status line and record it."""
        self.status = message
        self.emit("status", message=message)

    def reject(self, reason: str, message: str) -> bool:
        """Report a refused intent. Always returns False."""
        self.status = message
        self.emit("intent_rejected", reason=reason, message=message)
        return False
