"""Layout, color, and rendering constants."""
from __future__ import annotations

FPS = 60

# World rectangle shown on screen, in world units
VIEW_ORIGIN = (-180.0, -40.0)
VIEW_SIZE = (920.0, 860.0)
VIEW_PX = 640

SIDEBAR_W = 260
LOG_H = 110

# Field colors
COLOR_CROP = (196, 160, 64)
COLOR_STUBBLE = (112, 92, 52)
COLOR_GROUND = (58, 74, 46)
COLOR_ZONE = (80, 140, 220)

# Vehicle colors
COLOR_COMBINE = (40, 150, 60)
COLOR_HEADER_ON = (230, 220, 90)
COLOR_HEADER_OFF = (110, 110, 110)
COLOR_TRACTOR = (200, 70, 50)
COLOR_CARRIER = (90, 160, 230)

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_LOG_BG = (18, 18, 25)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_BAR_BG = (40, 40, 50)
COLOR_TANK = (220, 180, 60)
COLOR_BATTERY = (90, 200, 110)
COLOR_BATTERY_LOW = (220, 70, 60)

# Event log colors
LOG_COLORS: dict[str, tuple[int, int, int]] = {
    "tractor": (220, 140, 100),
    "swap_started": (120, 180, 240),
    "swap_finished": (120, 220, 160),
    "low_battery": (240, 90, 80),
    "intent_rejected": (200, 200, 100),
    "run_ended": (255, 255, 255),
    "default": (170, 170, 170),
}


def view_scale() -> float:
    return VIEW_PX / max(VIEW_SIZE)


def to_screen(point: tuple[float, float]) -> tuple[int, int]:
    """World units to pixel coordinates inside the view."""
    s = view_scale()
    return (int((point[0] - VIEW_ORIGIN[0]) * s), int((point[1] - VIEW_ORIGIN[1]) * s))
