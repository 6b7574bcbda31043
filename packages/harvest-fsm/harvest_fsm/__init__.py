"""harvest-fsm - Finite state machine primitives for the harvest engine."""
from __future__ import annotations

from harvest_fsm.components import FSM
from harvest_fsm.guards import FSMGuards
from harvest_fsm.systems import evaluate, find_transition, make_fsm_system

__all__ = ["FSM", "FSMGuards", "evaluate", "find_transition", "make_fsm_system"]
