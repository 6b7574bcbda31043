"""FSMGuards registry."""
from __future__ import annotations

from typing import Any, Callable

Guard = Callable[[Any], bool]


class FSMGuards:
    """Maps guard name strings to predicates over the machine's subject."""

    def __init__(self) -> None:
        self._guards: dict[str, Guard] = {}

    def register(self, name: str, fn: Guard) -> None:
        """Register a named guard. Overwrites if already registered."""
        self._guards[name] = fn

    def check(self, name: str, subject: Any) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](subject)

    def has(self, name: str) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)
