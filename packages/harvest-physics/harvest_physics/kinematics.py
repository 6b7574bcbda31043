"""Steering, throttle and bounds integration for a single vehicle."""
from __future__ import annotations

from harvest_physics import vec
from harvest_physics.components import CombineBody, DriveParams


def steer(body: CombineBody, params: DriveParams, direction: int, dt: float) -> None:
    """Rotate by ``direction`` (-1 left, +1 right, 0 none) for ``dt`` real seconds."""
    if direction == 0:
        return
    rate = params.turn_rate
    if body.turn_ease.running:
        rate *= params.ease_multiplier
    body.heading = vec.normalize_angle(body.heading + direction * rate * dt)


def clamp_to_bounds(position: vec.Vec2, bounds: tuple[float, float, float, float]) -> vec.Vec2:
    min_x, min_y, max_x, max_y = bounds
    return (vec.clamp(position[0], min_x, max_x), vec.clamp(position[1], min_y, max_y))


def drive(
    body: CombineBody,
    params: DriveParams,
    throttle: int,
    dt: float,
    speed_multiplier: float = 1.0,
) -> bool:
    """Move along the heading. ``throttle`` is -1, 0 or +1. Returns True if it moved."""
    if throttle == 0:
        return False
    speed = params.speed * speed_multiplier
    if throttle < 0:
        speed *= params.reverse_factor
    step = vec.scale(vec.forward(body.heading), speed * dt * (1 if throttle > 0 else -1))
    body.position = clamp_to_bounds(vec.add(body.position, step), params.bounds)
    return True


def update_turn_ease(body: CombineBody, params: DriveParams, dt: float) -> None:
    """Start the ease after a large single-tick heading change, else count it down."""
    delta = vec.normalize_angle(body.heading - body.last_heading)
    if abs(delta) > params.ease_threshold:
        body.turn_ease.start(params.ease_duration)
    else:
        body.turn_ease.advance(dt)
    body.last_heading = body.heading
