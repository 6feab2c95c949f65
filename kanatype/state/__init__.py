"""Meta-weighted automata and their runners."""

from .base import (
    State,
    TransitionResult,
    Observer,
    AutomatonError,
    AmbiguousPrefixError,
)
from .machine import StateMachine
from .algebra import (
    Transition,
    make_transition,
    build_from_transitions,
    append_states,
    append_machines,
)

__all__ = [
    'State',
    'TransitionResult',
    'Observer',
    'AutomatonError',
    'AmbiguousPrefixError',
    'StateMachine',
    'Transition',
    'make_transition',
    'build_from_transitions',
    'append_states',
    'append_machines',
]
