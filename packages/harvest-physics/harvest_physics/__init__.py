"""harvest-physics - 2D kinematics for the harvest engine."""
from __future__ import annotations

from harvest_physics import vec
from harvest_physics.components import CombineBody, DriveParams
from harvest_physics.kinematics import clamp_to_bounds, drive, steer, update_turn_ease

__all__ = [
    "CombineBody",
    "DriveParams",
    "clamp_to_bounds",
    "drive",
    "steer",
    "update_turn_ease",
    "vec",
]
