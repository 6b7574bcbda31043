"""Vehicle body and drive parameters."""
from __future__ import annotations

from dataclasses import dataclass, field

from harvest_schedule import Countdown

from harvest_physics.vec import Vec2, normalize_angle


@dataclass(frozen=True)
class DriveParams:
    """Immutable drive tuning.

    Attributes:
        speed: Forward speed in world units per real second.
        reverse_factor: Speed multiplier when backing up.
        turn_rate: Radians per real second at full steer.
        ease_duration: Real seconds of damped steering after a large turn.
        ease_multiplier: Turn-rate multiplier while damped.
        ease_threshold: Single-tick heading change (radians) that starts damping.
        bounds: ``(min_x, min_y, max_x, max_y)`` the position is clamped to.
    """

    speed: float
    reverse_factor: float
    turn_rate: float
    ease_duration: float
    ease_multiplier: float
    ease_threshold: float
    bounds: tuple[float, float, float, float]

    def __post_init__(self) -> None:
        if self.speed < 0:
            raise ValueError(f"speed must be >= 0, got {self.speed}")
        if self.turn_rate < 0:
            raise ValueError(f"turn_rate must be >= 0, got {self.turn_rate}")
        min_x, min_y, max_x, max_y = self.bounds
        if min_x > max_x or min_y > max_y:
            raise ValueError(f"bounds are inverted: {self.bounds}")


@dataclass
class CombineBody:
    """Pose of the combine plus the bookkeeping the turn ease needs."""

    position: Vec2
    heading: float
    prev_position: Vec2 | None = None
    last_heading: float | None = None
    turn_ease: Countdown = field(default_factory=Countdown)

    def __post_init__(self) -> None:
        self.heading = normalize_angle(self.heading)
        if self.prev_position is None:
            self.prev_position = self.position
        if self.last_heading is None:
            self.last_heading = self.heading
