"""2D vector and angle helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]

TAU = 2.0 * math.pi


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def length(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def forward(heading: float) -> Vec2:
    """Unit vector along ``heading`` (0 = +x, angles grow toward +y)."""
    return (math.cos(heading), math.sin(heading))


def right(heading: float) -> Vec2:
    """Unit vector 90 degrees clockwise of ``forward`` in screen coordinates."""
    return (-math.sin(heading), math.cos(heading))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def normalize_angle(angle: float) -> float:
    """Wrap into (-pi, pi]."""
    while angle > math.pi:
        angle -= TAU
    while angle <= -math.pi:
        angle += TAU
    return angle


def lerp_angle(a: float, b: float, t: float) -> float:
    """Turn from ``a`` toward ``b`` along the short way by fraction ``t``."""
    return normalize_angle(a + normalize_angle(b - a) * clamp(t, 0.0, 1.0))
