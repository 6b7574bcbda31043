"""Harvest Field - drive a combine across a field against the clock.

Controls:
  Left/Right  Steer
  Up/Down     Forward / reverse
  H           Raise / lower header
  T           Call the unloading tractor
  B           Inline battery swap
  Space       Pause / Resume
  R           Restart
  Escape      Quit
"""
from __future__ import annotations

import argparse
import sys

import pygame

from harvest_sim import Controls, SimConfig, Simulation
from ui.constants import FPS, LOG_H, SIDEBAR_W, VIEW_PX
from ui.field import draw_combine, draw_field, draw_helpers, draw_swap_zone
from ui.hud import draw_end_overlay, draw_sidebar
from ui.log_panel import EventLogPanel


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Harvest Field - harvest engine visual demo")
    p.add_argument("--yield", dest="yield_t_per_ha", type=float, default=9.0,
                   help="Crop yield in t/ha (default: 9.0)")
    p.add_argument("--meters-per-tile", type=float, default=2.0,
                   help="Real tile edge in meters, scales tons per tile (default: 2.0)")
    p.add_argument("--time-limit", type=float, default=600.0,
                   help="Real seconds per run (default: 600)")
    args = p.parse_args()
    args.time_limit = max(10.0, args.time_limit)
    return args


def read_held_keys() -> Controls:
    keys = pygame.key.get_pressed()
    return Controls(
        steer_left=keys[pygame.K_LEFT],
        steer_right=keys[pygame.K_RIGHT],
        throttle_forward=keys[pygame.K_UP],
        throttle_backward=keys[pygame.K_DOWN],
    )


def main() -> None:
    args = parse_args()
    config = SimConfig(
        yield_t_per_ha=args.yield_t_per_ha,
        meters_per_tile=args.meters_per_tile,
        real_time_limit=args.time_limit,
    )
    sim = Simulation(config)

    log_panel = EventLogPanel()
    sim.events.subscribe("*", log_panel.on_event)

    pygame.init()
    screen = pygame.display.set_mode((VIEW_PX + SIDEBAR_W, VIEW_PX + LOG_H))
    pygame.display.set_caption("Harvest Field - harvest engine demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    paused = False
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        toggle_header = call_tractor = trigger_swap = False

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_r:
                    sim.reset()
                    log_panel.clear()
                    paused = False
                elif event.key == pygame.K_h:
                    toggle_header = True
                elif event.key == pygame.K_t:
                    call_tractor = True
                elif event.key == pygame.K_b:
                    trigger_swap = True

        # --- Tick ---
        if not paused and sim.running:
            controls = read_held_keys()
            controls.toggle_header = toggle_header
            controls.call_tractor = call_tractor
            controls.trigger_battery_swap = trigger_swap
            sim.step(dt, controls)

        # --- Render ---
        screen.fill((20, 20, 30))
        draw_field(screen, sim.state)
        draw_swap_zone(screen, sim.state)
        draw_helpers(screen, sim.state)
        draw_combine(screen, sim.state)
        draw_sidebar(screen, font, sim.snapshot(), VIEW_PX, 0, SIDEBAR_W, VIEW_PX)
        log_panel.draw(screen, font, 0, VIEW_PX, VIEW_PX + SIDEBAR_W, LOG_H)
        if sim.summary is not None:
            draw_end_overlay(screen, font, sim.summary, VIEW_PX)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
