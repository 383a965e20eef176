"""flick-fsm - Menu/playing/dead/won state machine for flick games."""
from __future__ import annotations

from flick_fsm.components import FSM
from flick_fsm.guards import FSMGuards
from flick_fsm.systems import force_state, make_fsm_system

__all__ = ["FSM", "FSMGuards", "force_state", "make_fsm_system"]
