"""Scrolling event log panel at the bottom of the screen."""
from __future__ import annotations

from collections import deque

import pygame

from harvest_sim import Event
from ui.constants import COLOR_LOG_BG, LOG_COLORS


class EventLogPanel:
    """Collects simulation events as colored lines."""

    def __init__(self, max_entries: int = 100) -> None:
        self.entries: deque[tuple[str, tuple[int, int, int]]] = deque(maxlen=max_entries)

    def add(self, text: str, category: str = "default") -> None:
        color = LOG_COLORS.get(category, LOG_COLORS["default"])
        self.entries.append((text, color))

    def on_event(self, event: Event) -> None:
        if event.type == "status":
            return
        stamp = f"{int(event.real_time) // 60:02d}:{int(event.real_time) % 60:02d}"
        if event.type == "tractor":
            text = f"tractor {event.data.get('old')} -> {event.data.get('new')}"
        elif "message" in event.data:
            text = event.data["message"]
        else:
            text = event.type.replace("_", " ")
        self.add(f"[{stamp}] {text}", event.type)

    def clear(self) -> None:
        self.entries.clear()

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        x: int, y: int, w: int, h: int,
    ) -> None:
        pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
        pygame.draw.line(surface, (50, 50, 60), (x, y), (x + w, y))

        line_h = 14
        max_lines = max(1, (h - 8) // line_h)
        ty = y + 4
        for text, color in list(self.entries)[-max_lines:]:
            surface.blit(font.render(text, True, color), (x + 6, ty))
            ty += line_h
