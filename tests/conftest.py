"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanatype.kana import KanaInputState
from kanatype.state import TransitionResult, build_from_transitions
from kanatype.state import make_transition as t


@pytest.fixture
def type_line():
    """Type keys into a fresh KanaInputState and record every classification.

    Returns the input state and a list of ``(kana, result, meta, is_end)``.
    """
    def _type_line(keys, line):
        input_state = KanaInputState(line)
        events = []
        input_state.map(lambda kana, machine: machine.add_observer(
            lambda result, meta, is_end: events.append((kana, result, meta, is_end))
        ))
        for key in keys:
            input_state.handle_input(key)
        return input_state, events
    return _type_line


@pytest.fixture
def assert_typed(type_line):
    """Assert that keys type the whole line with SUCCESS only."""
    def _assert_typed(keys, line):
        input_state, events = type_line(keys, line)
        assert input_state.is_finished(), f"Expected {keys} to finish {line}"
        assert all(result is TransitionResult.SUCCESS for _, result, _, _ in events), \
            f"Expected {keys} to match {line}, got {events}"
        boundaries = sum(meta for _, _, meta, is_end in events if is_end)
        assert boundaries == len(line), f"{line}: expected {len(line)} boundaries, got {boundaries}"
    return _assert_typed


@pytest.fixture
def assert_rejected(type_line):
    """Assert that keys do not type the line cleanly."""
    def _assert_rejected(keys, line):
        input_state, events = type_line(keys, line)
        clean = input_state.is_finished() and all(
            result is TransitionResult.SUCCESS for _, result, _, _ in events
        )
        assert not clean, f"Expected {keys} to fail on {line}"
    return _assert_rejected


@pytest.fixture
def ha_machine():
    """Runner for the single spelling "ha"."""
    return build_from_transitions('ha', [t('ha', 'h', 'a'), t('a', 'a', '')])


@pytest.fixture
def ro_machine():
    """Runner for the single spelling "ro"."""
    return build_from_transitions('ro', [t('ro', 'r', 'o'), t('o', 'o', '')])
