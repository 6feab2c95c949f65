"""Typing state for one lyric line."""

from typing import Callable, List, TypeVar

from kanatype.logger import logger
from kanatype.state import StateMachine
from .mapping import MAX_KEY_LENGTH, lookup
from .normalizer import normalize_input

T = TypeVar('T')


class KanaInputState:
    """Splits a lyric line into kana tokens and tracks typing across them.

    Every token gets its own runner, chained to the next one so that a
    keystroke which already belongs to the following kana can be accepted.
    """

    def __init__(self, line: str):
        self.kana: List[str] = []
        self.state_machines: List[StateMachine] = []
        self.current_index = 0

        normalized = normalize_input(line)
        position = 0
        while position < len(normalized):
            for length in range(MAX_KEY_LENGTH, 0, -1):
                chunk = normalized[position:position + length]
                if len(chunk) < length:
                    continue
                template = lookup(chunk)
                if template is not None:
                    self._push(line[position:position + length], template.clone())
                    position += length - 1
                    break
            else:
                logger.debug(f"Skipping untypeable character {line[position]!r} in {line!r}")
            position += 1

    def _push(self, kana: str, machine: StateMachine) -> None:
        if self.state_machines:
            self.state_machines[-1].next_machine = machine
        self.kana.append(kana)
        self.state_machines.append(machine)

    def map(self, func: Callable[[str, StateMachine], T]) -> List[T]:
        """Apply *func* to every (original kana, runner) pair, in order."""
        return [func(kana, machine) for kana, machine in zip(self.kana, self.state_machines)]

    def handle_input(self, input: str) -> bool:
        """Feed one keystroke; return True when it completes the line.

        Keystrokes after the line is complete are ignored and return False.
        """
        if self.is_finished():
            return False

        self.state_machines[self.current_index].transition(input)
        while (self.current_index < len(self.state_machines)
               and self.state_machines[self.current_index].is_finished()):
            self.current_index += 1
        return self.is_finished()

    def is_finished(self) -> bool:
        return self.current_index >= len(self.state_machines)

    def get_remaining_input(self) -> str:
        return ''.join(
            machine.get_display() for machine in self.state_machines[self.current_index:]
        )
