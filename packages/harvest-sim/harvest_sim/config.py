"""Simulation configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass

from harvest_field import HeaderSpec
from harvest_physics import DriveParams, vec
from harvest_resource import DrainRates


@dataclass(frozen=True)
class SimConfig:
    """Immutable tuning for one harvest run.

    Distances are world units (``tile_size`` units per tile), speeds are per
    real second, rates are per simulated minute and process durations are
    simulated minutes.

    Attributes:
        field_width_tiles: Field width in tiles.
        field_height_tiles: Field height in tiles.
        tile_size: World units per tile edge.
        meters_per_tile: Real-world edge length of one tile.
        yield_t_per_ha: Crop yield used to derive tons per tile.
        sim_ratio: Simulated seconds per real second.
        real_time_limit: Real seconds after which the run ends.
        max_dt: Upper clamp on the real delta of one tick.
        header_width_tiles: Cutting width in tiles.
        header_depth_tiles: Header depth in tiles.
        header_standoff: Gap between vehicle and header, world units.
        footprint_margin: Tile-center tolerance, fraction of a tile.
        combine_speed: Forward speed, world units per real second.
        reverse_factor: Speed multiplier when reversing.
        turn_rate_deg: Steering rate, degrees per real second.
        turn_ease_duration: Real seconds of damped steering after a big turn.
        turn_ease_multiplier: Steering multiplier while damped.
        turn_ease_threshold: Heading jump within one tick that starts damping.
        world_margin: How far past the field edges the combine may drive.
        start_heading: Initial heading in radians.
        start_offset: Start position below the field's bottom edge.
        tank_capacity: Grain tank capacity in tons.
        initial_harvest_rate: Harvest rate assumed before any cut, t/sim-min.
        unload_rate: Tank drain while unloading, t/sim-min.
        unload_attached_multiplier: Boost on the unload rate alongside.
        battery_capacity: Battery capacity in kWh.
        drain_harvesting: Battery drain while cutting, kWh/sim-min.
        drain_driving: Battery drain while driving, kWh/sim-min.
        drain_idle: Battery drain otherwise, kWh/sim-min.
        tractor_arrival_min: Approach duration.
        tractor_leave_min: Departure duration.
        tractor_cooldown_min: Wait after a visit before the next call.
        tractor_offset: Lateral distance of the tractor from the combine.
        tractor_speed_multiplier: Scales the per-tick approach progress.
        tractor_alongside_speed: Combine speed multiplier while unloading.
        tractor_close_distance: Distance at which the tractor aligns heading.
        tractor_exit_offset: How far past the field's right edge it leaves.
        trailer_capacity: Trailer fill ceiling in tons, display only.
        swap_threshold: Battery fraction at or below which it is low.
        swap_duration_min: Length of one battery swap.
        swap_zone_offset: Swap zone center relative to the start position.
        swap_zone_radius: Swap zone radius.
        inline_swap_speed: Combine speed multiplier during an inline swap.
        carrier_offset: Lateral distance of the battery carrier.
        swap_messages: One status message per swap stage, in order.
    """

    field_width_tiles: int = 70
    field_height_tiles: int = 70
    tile_size: float = 8.0
    meters_per_tile: float = 0.01
    yield_t_per_ha: float = 9.0

    sim_ratio: float = 4.0
    real_time_limit: float = 10 * 60.0
    max_dt: float = 0.1

    header_width_tiles: float = 14.0
    header_depth_tiles: float = 3.5
    header_standoff: float = 32.0
    footprint_margin: float = 0.4

    combine_speed: float = 34.0
    reverse_factor: float = 0.6
    turn_rate_deg: float = 120.0
    turn_ease_duration: float = 2.0
    turn_ease_multiplier: float = 0.4
    turn_ease_threshold: float = math.pi * 0.9
    world_margin: float = 400.0
    start_heading: float = -math.pi / 2
    start_offset: float = 120.0

    tank_capacity: float = 13.0
    initial_harvest_rate: float = 0.9
    unload_rate: float = 4.0
    unload_attached_multiplier: float = 1.2

    battery_capacity: float = 210.0
    drain_harvesting: float = 11.45
    drain_driving: float = 3.3
    drain_idle: float = 0.7

    tractor_arrival_min: float = 1.25
    tractor_leave_min: float = 1.5
    tractor_cooldown_min: float = 2.0
    tractor_offset: float = 140.0
    tractor_speed_multiplier: float = 1.25
    tractor_alongside_speed: float = 0.6
    tractor_close_distance: float = 60.0
    tractor_exit_offset: float = 120.0
    trailer_capacity: float = 20.0

    swap_threshold: float = 0.2
    swap_duration_min: float = 2.0
    swap_zone_offset: tuple[float, float] = (200.0, 0.0)
    swap_zone_radius: float = 90.0
    inline_swap_speed: float = 0.5
    carrier_offset: float = 180.0
    swap_messages: tuple[str, ...] = (
        "Replacing previous battery.",
        "Removing empty battery.",
        "Inserting new battery.",
    )

    def __post_init__(self) -> None:
        if self.field_width_tiles <= 0 or self.field_height_tiles <= 0:
            raise ValueError("field dimensions must be positive")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be > 0, got {self.tile_size}")
        if self.sim_ratio <= 0:
            raise ValueError(f"sim_ratio must be > 0, got {self.sim_ratio}")
        if self.real_time_limit <= 0:
            raise ValueError(f"real_time_limit must be > 0, got {self.real_time_limit}")
        if self.tank_capacity <= 0 or self.battery_capacity <= 0:
            raise ValueError("tank and battery capacity must be positive")
        if not 0.0 <= self.swap_threshold <= 1.0:
            raise ValueError(f"swap_threshold must be in [0, 1], got {self.swap_threshold}")
        for name in ("tractor_arrival_min", "tractor_leave_min", "swap_duration_min"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        if self.tractor_cooldown_min < 0:
            raise ValueError(f"tractor_cooldown_min must be >= 0, got {self.tractor_cooldown_min}")
        if not self.swap_messages:
            raise ValueError("swap_messages must name at least one stage")

    @property
    def field_width(self) -> float:
        return self.field_width_tiles * self.tile_size

    @property
    def field_height(self) -> float:
        return self.field_height_tiles * self.tile_size

    @property
    def total_tiles(self) -> int:
        return self.field_width_tiles * self.field_height_tiles

    @property
    def ton_per_tile(self) -> float:
        return self.yield_t_per_ha / 10_000 * self.meters_per_tile ** 2

    @property
    def start_position(self) -> vec.Vec2:
        return (self.field_width / 2, self.field_height + self.start_offset)

    @property
    def swap_zone_center(self) -> vec.Vec2:
        return vec.add(self.start_position, self.swap_zone_offset)

    @property
    def tractor_home(self) -> vec.Vec2:
        return (-self.tractor_exit_offset, self.field_height / 2)

    @property
    def tractor_exit(self) -> vec.Vec2:
        return (self.field_width + self.tractor_exit_offset, self.field_height / 2)

    @property
    def min_tractor_gap(self) -> float:
        return max(40.0, self.tractor_offset - self.tile_size)

    def header_spec(self) -> HeaderSpec:
        return HeaderSpec(
            width_tiles=self.header_width_tiles,
            depth_tiles=self.header_depth_tiles,
            standoff=self.header_standoff,
            margin_tiles=self.footprint_margin,
        )

    def drive_params(self) -> DriveParams:
        return DriveParams(
            speed=self.combine_speed,
            reverse_factor=self.reverse_factor,
            turn_rate=math.radians(self.turn_rate_deg),
            ease_duration=self.turn_ease_duration,
            ease_multiplier=self.turn_ease_multiplier,
            ease_threshold=self.turn_ease_threshold,
            bounds=(
                -self.world_margin,
                -self.world_margin,
                self.field_width + self.world_margin,
                self.field_height + self.world_margin,
            ),
        )

    def drain_rates(self) -> DrainRates:
        return DrainRates(
            harvesting=self.drain_harvesting,
            driving=self.drain_driving,
            idle=self.drain_idle,
        )
