"""Score keeping for a sequence of typed lines."""

from typing import List, Optional, Tuple

from kanatype import POINTS_PER_HIT, POINTS_PER_KANA
from kanatype.kana import KanaInputState
from kanatype.logger import logger
from kanatype.schema import Score
from kanatype.state import Observer, StateMachine, TransitionResult


class ScoreTracker:
    """Observes the runners of the current line and accumulates a ``Score``.

    Only ``SUCCESS`` keystrokes earn points. Kana completed through a skip
    still count as typed but are not rewarded, and both skips and failures
    break the combo.
    """

    def __init__(self, points_per_hit: int = POINTS_PER_HIT, points_per_kana: int = POINTS_PER_KANA):
        self.points_per_hit = points_per_hit
        self.points_per_kana = points_per_kana
        self.score = Score()
        self.input_state: Optional[KanaInputState] = None
        self._attached: List[Tuple[StateMachine, Observer]] = []

    def set_input_state(self, input_state: Optional[KanaInputState]) -> None:
        """Start tracking *input_state*, detaching from the previous line."""
        self.destroy()
        self.input_state = input_state
        if input_state is not None:
            self._attached = input_state.map(self._attach)

    def _attach(self, kana: str, machine: StateMachine) -> Tuple[StateMachine, Observer]:
        observer = self._make_observer(machine)
        machine.add_observer(observer)
        return machine, observer

    def _make_observer(self, machine: StateMachine) -> Observer:
        # Metas are cumulative per runner, remember the last one to get deltas
        last_meta = machine.get_meta()

        def observer(result: TransitionResult, meta: int, is_end: bool) -> None:
            nonlocal last_meta
            completed = max(meta - last_meta, 0)
            last_meta = max(meta, last_meta)
            self._record(result, completed)

        return observer

    def _record(self, result: TransitionResult, completed: int) -> None:
        score = self.score
        score.kana += completed
        if result is TransitionResult.SUCCESS:
            score.hit += 1
            score.combo += 1
            score.max_combo = max(score.max_combo, score.combo)
            score.score += self.points_per_hit + self.points_per_kana * completed
        elif result is TransitionResult.SKIPPED:
            score.skipped += 1
            score.combo = 0
        else:
            score.missed += 1
            score.combo = 0

    def interval_end(self, finished: bool) -> None:
        """Close the current line, counting untyped kana as missed."""
        if finished:
            self.score.finished += 1
        elif self.input_state is not None:
            remaining = sum(
                len(kana) - machine.get_meta()
                for kana, machine in zip(self.input_state.kana, self.input_state.state_machines)
            )
            self.score.missed += remaining
            logger.info(f"Line ended with {remaining} kana left untyped")

    def destroy(self) -> None:
        for machine, observer in self._attached:
            machine.remove_observer(observer)
        self._attached = []
        self.input_state = None
