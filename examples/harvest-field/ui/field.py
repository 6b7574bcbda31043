"""Field, swap zone and vehicle drawing."""
from __future__ import annotations

import pygame

from harvest_field import footprint
from harvest_physics import vec
from harvest_sim import SimState
from ui.constants import (
    COLOR_CARRIER,
    COLOR_COMBINE,
    COLOR_CROP,
    COLOR_GROUND,
    COLOR_HEADER_OFF,
    COLOR_HEADER_ON,
    COLOR_STUBBLE,
    COLOR_TRACTOR,
    COLOR_ZONE,
    VIEW_PX,
    to_screen,
    view_scale,
)


def draw_field(surface: pygame.Surface, state: SimState) -> None:
    """Crop everywhere, stubble on harvested tiles."""
    surface.fill(COLOR_GROUND, (0, 0, VIEW_PX, VIEW_PX))
    cfg = state.config
    x0, y0 = to_screen((0.0, 0.0))
    x1, y1 = to_screen((cfg.field_width, cfg.field_height))
    pygame.draw.rect(surface, COLOR_CROP, (x0, y0, x1 - x0, y1 - y0))
    size = max(1, int(cfg.tile_size * view_scale()) + 1)
    for tx, ty in state.field.harvested_tiles():
        px, py = to_screen((tx * cfg.tile_size, ty * cfg.tile_size))
        surface.fill(COLOR_STUBBLE, (px, py, size, size))


def draw_swap_zone(surface: pygame.Surface, state: SimState) -> None:
    center = to_screen(state.config.swap_zone_center)
    radius = int(state.config.swap_zone_radius * view_scale())
    pygame.draw.circle(surface, COLOR_ZONE, center, radius, 2)


def _box(center: vec.Vec2, heading: float, half_len: float, half_wid: float) -> list[tuple[int, int]]:
    fwd = vec.forward(heading)
    side = vec.right(heading)
    corners = []
    for a, b in ((1, 1), (1, -1), (-1, -1), (-1, 1)):
        offset = vec.add(vec.scale(fwd, a * half_len), vec.scale(side, b * half_wid))
        corners.append(to_screen(vec.add(center, offset)))
    return corners


def draw_combine(surface: pygame.Surface, state: SimState) -> None:
    body = state.combine
    fp = footprint(body.position, body.heading, state.header_spec, state.config.tile_size)
    color = COLOR_HEADER_ON if state.header_engaged else COLOR_HEADER_OFF
    pygame.draw.polygon(surface, color, _box(fp.center, body.heading, fp.half_depth, fp.half_width), 2)
    pygame.draw.polygon(surface, COLOR_COMBINE, _box(body.position, body.heading, 22.0, 14.0))


def draw_helpers(surface: pygame.Surface, state: SimState) -> None:
    """Tractor and, during an inline swap, the battery carrier."""
    tractor = state.tractor
    pygame.draw.polygon(surface, COLOR_TRACTOR, _box(tractor.position, tractor.heading, 18.0, 10.0))
    if state.carrier_position is not None:
        pygame.draw.polygon(
            surface, COLOR_CARRIER, _box(state.carrier_position, state.combine.heading, 14.0, 9.0)
        )
