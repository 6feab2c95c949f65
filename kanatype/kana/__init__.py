"""Kana-specific automata, lookup table and line typing state."""

from .builders import (
    literal,
    digraph,
    shi,
    chi,
    tsu,
    fu,
    ji,
    sh,
    ch,
    j,
    whitespace,
    small_kana,
    small_tsu,
    n,
)
from .mapping import KANA_MAPPING, lookup, validate_mapping
from .normalizer import normalize_input
from .input_state import KanaInputState

__all__ = [
    'literal',
    'digraph',
    'shi',
    'chi',
    'tsu',
    'fu',
    'ji',
    'sh',
    'ch',
    'j',
    'whitespace',
    'small_kana',
    'small_tsu',
    'n',
    'KANA_MAPPING',
    'lookup',
    'validate_mapping',
    'normalize_input',
    'KanaInputState',
]
