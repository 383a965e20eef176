"""System factory for FSM evaluation, plus forced transitions."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from flick.types import UnknownStateError

from flick_fsm.components import FSM
from flick_fsm.guards import FSMGuards

if TYPE_CHECKING:
    from flick import TickContext

logger = logging.getLogger(__name__)

OnTransition = Callable[[Any, "TickContext | None", str, str], None]

# Oldest entries are dropped past this many recorded transitions.
_HISTORY_LIMIT = 64


def _enter(
    context: Any,
    ctx: "TickContext | None",
    fsm: FSM,
    target: str,
    on_transition: OnTransition | None,
) -> None:
    old = fsm.state
    fsm.state = target
    fsm.history.append((old, target))
    del fsm.history[:-_HISTORY_LIMIT]
    logger.info("state %s -> %s", old, target)
    if on_transition is not None:
        on_transition(context, ctx, old, target)


def force_state(
    context: Any,
    fsm: FSM,
    target: str,
    on_transition: OnTransition | None = None,
    ctx: "TickContext | None" = None,
) -> None:
    """Jump to ``target`` regardless of guards (manual reset).

    Forcing the current state still fires ``on_transition`` so that
    re-entry side effects (a reset) run every time.
    """
    if target not in fsm.states():
        raise UnknownStateError(target, f"State machine has no state {target!r}")
    _enter(context, ctx, fsm, target, on_transition)


def make_fsm_system(
    guards: FSMGuards,
    fsm: Callable[[Any], FSM] = lambda c: c.fsm,
    on_transition: OnTransition | None = None,
) -> Callable[[Any, "TickContext"], None]:
    """Return a system that evaluates the context's FSM once per frame."""

    def fsm_system(context: Any, ctx: "TickContext") -> None:
        machine = fsm(context)
        for guard_name, target in machine.transitions.get(machine.state, ()):
            if guards.check(guard_name, context):
                _enter(context, ctx, machine, target, on_transition)
                return

    return fsm_system
