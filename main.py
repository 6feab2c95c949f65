#!/usr/bin/env python3
import argparse
import sys
from typing import List, Optional

from kanatype.kana import KanaInputState, validate_mapping
from kanatype.logger import logger
from kanatype.schema import Score, TransitionEvent
from kanatype.scoring import ScoreTracker
from kanatype.state import StateMachine, TransitionResult


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replay romaji keystrokes against a kana lyric line."
    )
    parser.add_argument("line", nargs="?", help="Lyric line in kana (or kanji with --reading)")
    parser.add_argument("keys", nargs="?", default="", help="Keystrokes to replay, one character each")
    parser.add_argument("--reading", action="store_true",
                        help="Convert kanji in LINE to its kana reading first")
    parser.add_argument("--json", action="store_true", help="Print the final score as JSON")
    parser.add_argument("--check-table", action="store_true",
                        help="Validate every entry of the kana table and exit")
    args = parser.parse_args(argv)
    if not args.check_table and args.line is None:
        parser.error("LINE is required unless --check-table is given")
    return args


def check_table() -> bool:
    """Validate the kana table, logging every problem found."""
    problems = validate_mapping()
    for problem in problems:
        logger.error(problem)
    if problems:
        logger.error(f"Kana table has {len(problems)} problems")
        return False
    logger.info("Kana table is valid")
    return True


def replay(line: str, keys: str) -> Score:
    """Type *keys* into *line* and return the resulting score."""
    input_state = KanaInputState(line)
    tracker = ScoreTracker()
    tracker.set_input_state(input_state)
    events: List[TransitionEvent] = []
    current_key = ""

    def log_events(kana: str, machine: StateMachine) -> None:
        def observer(result: TransitionResult, meta: int, is_end: bool) -> None:
            event = TransitionEvent(key=current_key, kana=kana, result=result, meta=meta, is_end=is_end)
            events.append(event)
            logger.info(f"{event.key!r} -> {event.kana}: {event.result.name} (meta={event.meta}, end={event.is_end})")
        machine.add_observer(observer)

    input_state.map(log_events)

    completed = False
    for key in keys:
        current_key = key
        if input_state.handle_input(key):
            completed = True
            break

    tracker.interval_end(completed)
    remaining = input_state.get_remaining_input()
    if remaining:
        logger.info(f"Remaining input: {remaining}")
    else:
        logger.info(f"Line completed after {len(events)} classifications")
    return tracker.score


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    if args.check_table:
        return 0 if check_table() else 1

    line = args.line
    if args.reading:
        from kanatype.kana.reading import to_kana_reading
        line = to_kana_reading(line)
        logger.info(f"Reading: {line}")

    score = replay(line, args.keys)
    if args.json:
        print(score.model_dump_json())
    else:
        logger.info(
            f"Score: {score.score}, Max combo: {score.max_combo}, Hit: {score.hit}, "
            f"Skipped: {score.skipped}, Missed: {score.missed}, Finished: {score.finished}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
