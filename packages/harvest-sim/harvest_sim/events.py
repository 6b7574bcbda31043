from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

Handler = Callable[["Event"], None]


@dataclass
class Event:
    tick: int
    real_time: float
    sim_time: float
    type: str
    data: dict[str, Any]


class EventLog:
    """Bounded record of what happened during a run, with per-type subscribers.

    Handlers run synchronously inside ``emit``.
    """

    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._events: deque[Event] = deque(maxlen=maxlen)
        self._subscribers: dict[str, list[Handler]] = {}

    def subscribe(self, type: str, handler: Handler) -> None:
        self._subscribers.setdefault(type, []).append(handler)

    def unsubscribe(self, type: str, handler: Handler) -> None:
        handlers = self._subscribers.get(type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def emit(self, tick: int, real_time: float, sim_time: float, type: str, **data: Any) -> Event:
        event = Event(tick=tick, real_time=real_time, sim_time=sim_time, type=type, data=data)
        self._events.append(event)
        for handler in list(self._subscribers.get(type, ())):
            handler(event)
        for handler in list(self._subscribers.get("*", ())):
            handler(event)
        return event

    def query(self, type: str | None = None, after: int | None = None) -> list[Event]:
        result: list[Event] = list(self._events)
        if type is not None:
            result = [e for e in result if e.type == type]
        if after is not None:
            result = [e for e in result if e.tick > after]
        return result

    def last(self, type: str) -> Event | None:
        for e in reversed(self._events):
            if e.type == type:
                return e
        return None

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
