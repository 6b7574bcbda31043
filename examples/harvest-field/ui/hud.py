"""Sidebar gauges and the end-of-run overlay."""
from __future__ import annotations

import pygame

from harvest_sim import RunSummary, SimSnapshot, format_clock, format_minutes
from ui.constants import (
    COLOR_BAR_BG,
    COLOR_BATTERY,
    COLOR_BATTERY_LOW,
    COLOR_SIDEBAR_BG,
    COLOR_TANK,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
)

BAR_H = 10


def _bar(surface: pygame.Surface, x: int, y: int, w: int, frac: float, color: tuple[int, int, int]) -> None:
    pygame.draw.rect(surface, COLOR_BAR_BG, (x, y, w, BAR_H))
    pygame.draw.rect(surface, color, (x, y, int(w * max(0.0, min(1.0, frac))), BAR_H))


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snap: SimSnapshot,
    x: int, y: int, w: int, h: int,
) -> None:
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x, y, w, h))
    inner = w - 20
    ty = y + 10

    def text(line: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        nonlocal ty
        surface.blit(font.render(line, True, color), (x + 10, ty))
        ty += 16

    text(f"Real {format_clock(snap.real_time)}   Sim {format_clock(snap.sim_time)}")
    text(f"Field {snap.coverage * 100:5.1f}%  ({snap.harvested_tiles}/{snap.total_tiles})")
    ty += 6

    text(f"Tank {snap.tank:.2f} / {snap.tank_capacity:.0f} t")
    _bar(surface, x + 10, ty, inner, snap.tank / snap.tank_capacity, COLOR_TANK)
    ty += BAR_H + 4
    if snap.time_until_tank_full is not None:
        text(f"Full in {format_minutes(snap.time_until_tank_full)} sim", COLOR_TEXT_DIM)
    ty += 6

    battery = snap.battery / snap.battery_capacity
    text(f"Battery {battery * 100:5.1f}%  [{snap.consumption}]")
    _bar(surface, x + 10, ty, inner, battery, COLOR_BATTERY if battery > 0.2 else COLOR_BATTERY_LOW)
    ty += BAR_H + 10

    text(f"Header {'ENGAGED' if snap.header_engaged else 'raised'}")
    tractor = f"Tractor {snap.tractor_phase}"
    if snap.tractor_countdown > 0:
        tractor += f" ({format_minutes(snap.tractor_countdown)})"
    text(tractor)
    if snap.swap_active:
        text(f"Swap {snap.swap_mode} {format_minutes(snap.swap_remaining)}")
        text(snap.swap_message or "", COLOR_TEXT_DIM)
    ty += 10

    for line in (
        "Arrows  steer / drive",
        "H  header   T  tractor",
        "B  battery swap",
        "Space  pause   R  restart",
    ):
        text(line, COLOR_TEXT_DIM)
    ty += 10
    text(snap.status[:32], COLOR_TEXT)


def draw_end_overlay(
    surface: pygame.Surface,
    font: pygame.font.Font,
    summary: RunSummary,
    view_px: int,
) -> None:
    overlay = pygame.Surface((view_px, view_px), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    surface.blit(overlay, (0, 0))

    big_font = pygame.font.SysFont("monospace", 28, bold=True)
    title = "FIELD HARVESTED" if summary.reason.value == "field_harvested" else "TIME UP"
    text = big_font.render(title, True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(view_px // 2, view_px // 2 - 40)))

    lines = [
        f"Coverage {summary.coverage_percent:.1f}%",
        f"Real {format_clock(summary.real_time)}  Sim {format_clock(summary.sim_time)}",
        f"Tractor calls {summary.tractor_calls}  Unloads {summary.unloads}  Swaps {summary.swaps}",
        "R to restart",
    ]
    for i, line in enumerate(lines):
        rendered = font.render(line, True, (200, 200, 200))
        surface.blit(rendered, rendered.get_rect(center=(view_px // 2, view_px // 2 + i * 20)))
