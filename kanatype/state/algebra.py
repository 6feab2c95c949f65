"""Building and concatenating template automata."""

from typing import Dict, List, NamedTuple, Optional

from .base import State, copy_graph
from .machine import StateMachine


class Transition(NamedTuple):
    source: str
    input: str
    target: str


def make_transition(source: str, input: str, target: str) -> Transition:
    return Transition(source, input, target)


def build_from_transitions(
    initial: str,
    transitions: List[Transition],
    metas: Optional[Dict[str, int]] = None,
) -> StateMachine:
    """Build a template from transitions between states named by display.

    The accepting state is the one displayed as ``''``. *metas* assigns
    weights by display; by default only the accepting state weighs 1.
    """
    if metas is None:
        metas = {'': 1}
    states: Dict[str, State] = {}

    def get_state(name: str) -> State:
        if name not in states:
            states[name] = State(name, metas.get(name, 0))
        return states[name]

    for t in transitions:
        get_state(t.source).add_transition(t.input, get_state(t.target))
    return StateMachine(get_state(initial))


def append_states(first: State, second: State) -> State:
    """Concatenate two graphs.

    Every accepting node of *first* is replaced by a copy of *second* whose
    metas are offset by the highest meta among those accepting nodes, so
    weights keep accumulating across the join.
    """
    offset = max(state.meta for state in first.closure() if state.is_end())
    tail = second.transform(lambda display, meta: (display, meta + offset))
    suffix = second.display
    return copy_graph(first, lambda display, meta: (display + suffix, meta), end=tail)


def append_machines(first: StateMachine, second: StateMachine) -> StateMachine:
    return StateMachine(append_states(first.initial_state, second.initial_state))
