"""FSM component."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FSM:
    """Flat finite state machine. Transition table maps states to guard/target pairs.

    Edges are tried in order; the first guard that passes wins and at
    most one transition happens per frame. ``initial`` is the state a
    freshly built machine starts in (``state`` by default).
    """

    state: str
    transitions: dict[str, list[list[str]]]
    initial: str = ""
    history: list[tuple[str, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.initial:
            self.initial = self.state

    def states(self) -> set[str]:
        """Every state named in the table, as a source or a target."""
        known = {self.initial, self.state, *self.transitions}
        for edges in self.transitions.values():
            known.update(target for _, target in edges)
        return known
