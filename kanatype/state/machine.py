"""Runner over a shared template automaton."""

from typing import Callable, List, Optional, Tuple

from .base import Observer, State, TransitionResult


class StateMachine:
    """Tracks the typing progress through one template graph.

    The graph itself is shared with every other runner cloned from the same
    template; only ``current_state`` changes while typing.
    """

    def __init__(self, initial_state: State):
        self.initial_state = initial_state
        self.current_state = initial_state
        self.next_machine: Optional['StateMachine'] = None
        self.observers: List[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        if observer not in self.observers:
            self.observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        if observer in self.observers:
            self.observers.remove(observer)

    def _notify(self, result: TransitionResult, state: State) -> None:
        for observer in list(self.observers):
            observer(result, state.meta, state.is_end())

    def _move(self, result: TransitionResult, state: State) -> None:
        self.current_state = state
        self._notify(result, state)

    def transition(self, input: str) -> TransitionResult:
        """Consume one input character and classify it.

        A character that does not continue the current spelling may still be
        accepted by skipping exactly one expected character: either the
        remainder of this kana (when the next runner accepts the character)
        or one character of this kana's spelling. Skips are reported as
        ``SKIPPED`` before the ``SUCCESS`` of the character itself.
        """
        next_state = self.current_state.transition(input)
        if next_state is not None:
            self._move(TransitionResult.SUCCESS, next_state)
            return TransitionResult.SUCCESS

        for skipped_state in self.current_state.transitions.values():
            if skipped_state.is_end():
                if (self.next_machine is not None
                        and self.next_machine.current_state.transition(input) is not None):
                    self._move(TransitionResult.SKIPPED, skipped_state)
                    self.next_machine.transition(input)
                    return TransitionResult.SKIPPED
            else:
                next_state = skipped_state.transition(input)
                if next_state is not None:
                    self._move(TransitionResult.SKIPPED, skipped_state)
                    self._move(TransitionResult.SUCCESS, next_state)
                    return TransitionResult.SKIPPED

        self._notify(TransitionResult.FAILED, self.current_state)
        return TransitionResult.FAILED

    def is_finished(self) -> bool:
        return self.current_state.is_end()

    def is_started(self) -> bool:
        return self.current_state is not self.initial_state

    def reset(self) -> None:
        self.current_state = self.initial_state

    def clone(self) -> 'StateMachine':
        """Return a fresh runner on the same template graph."""
        return StateMachine(self.initial_state)

    def transform(self, fn: Callable[[str, int], Tuple[str, int]]) -> 'StateMachine':
        return StateMachine(self.initial_state.transform(fn))

    def merge(self, other: 'StateMachine') -> 'StateMachine':
        return StateMachine(self.initial_state.merge(other.initial_state))

    def get_word(self) -> str:
        """Canonical spelling of the whole template."""
        return self.initial_state.display

    def get_display(self) -> str:
        """What is still left to type."""
        return self.current_state.display

    def get_meta(self) -> int:
        return self.current_state.meta

    def __repr__(self) -> str:
        return f"StateMachine({self.get_word()!r}, at={self.get_display()!r})"
