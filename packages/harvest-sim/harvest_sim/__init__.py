"""harvest-sim - Combine harvester simulation built on the harvest engine."""
from __future__ import annotations

from harvest_sim.battery_swap import (
    BatterySwap,
    SwapMode,
    SwapRecord,
    battery_low,
    check_low_battery,
    in_swap_zone,
    stage_message,
    trigger_battery_swap,
)
from harvest_sim.config import SimConfig
from harvest_sim.events import Event, EventLog
from harvest_sim.sides import Side, SideSlots
from harvest_sim.simulation import Simulation, apply_triggers, toggle_header
from harvest_sim.snapshot import (
    EndReason,
    RunSummary,
    SimSnapshot,
    format_clock,
    format_minutes,
    make_snapshot,
    time_until_tank_full,
)
from harvest_sim.state import Controls, Counters, SimState, TickFlags
from harvest_sim.systems import build_systems
from harvest_sim.tractor import Tractor, TractorPhase, harvest_blocked, request_tractor

__all__ = [
    "BatterySwap",
    "Controls",
    "Counters",
    "EndReason",
    "Event",
    "EventLog",
    "RunSummary",
    "Side",
    "SideSlots",
    "SimConfig",
    "SimSnapshot",
    "SimState",
    "Simulation",
    "SwapMode",
    "SwapRecord",
    "TickFlags",
    "Tractor",
    "TractorPhase",
    "apply_triggers",
    "battery_low",
    "build_systems",
    "check_low_battery",
    "format_clock",
    "format_minutes",
    "harvest_blocked",
    "in_swap_zone",
    "make_snapshot",
    "request_tractor",
    "stage_message",
    "time_until_tank_full",
    "toggle_header",
    "trigger_battery_swap",
]
