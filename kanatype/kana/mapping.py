"""The static kana → template automaton table.

Keys are normalized (hiragana, lowercase) strings of one to three
characters; values are template ``StateMachine`` objects that must be
cloned before use.
"""

from typing import Dict, List, Optional

from kanatype import VALIDATE_TABLE
from kanatype.logger import logger
from kanatype.state import StateMachine, TransitionResult, append_machines
from .builders import (
    ch,
    chi,
    digraph,
    fu,
    j,
    ji,
    literal,
    n,
    sh,
    shi,
    small_kana,
    small_tsu,
    tsu,
    whitespace,
)

KanaMapping = Dict[str, StateMachine]

# Longest key in the table, used for greedy lookahead
MAX_KEY_LENGTH = 3

SINGLE_KANA_MAPPING: KanaMapping = {
    "あ": literal('a'),
    "い": literal('i'),
    "う": literal('u'),
    "え": literal('e'),
    "お": literal('o'),
    "か": literal('ka'),
    "き": literal('ki'),
    "く": literal('ku'),
    "け": literal('ke'),
    "こ": literal('ko'),
    "さ": literal('sa'),
    "し": shi(),
    "す": literal('su'),
    "せ": literal('se'),
    "そ": literal('so'),
    "た": literal('ta'),
    "ち": chi(),
    "つ": tsu(),
    "て": literal('te'),
    "と": literal('to'),
    "な": literal('na'),
    "に": literal('ni'),
    "ぬ": literal('nu'),
    "ね": literal('ne'),
    "の": literal('no'),
    "は": literal('ha'),
    "ひ": literal('hi'),
    "ふ": fu(),
    "へ": literal('he'),
    "ほ": literal('ho'),
    "ま": literal('ma'),
    "み": literal('mi'),
    "む": literal('mu'),
    "め": literal('me'),
    "も": literal('mo'),
    "や": literal('ya'),
    "ゆ": literal('yu'),
    "よ": literal('yo'),
    "ら": literal('ra'),
    "り": literal('ri'),
    "る": literal('ru'),
    "れ": literal('re'),
    "ろ": literal('ro'),
    "わ": literal('wa'),
    "ゐ": literal('wi'),
    "ゑ": literal('we'),
    "を": literal('wo'),
    "ん": literal('nn'),
    "が": literal('ga'),
    "ぎ": literal('gi'),
    "ぐ": literal('gu'),
    "げ": literal('ge'),
    "ご": literal('go'),
    "ざ": literal('za'),
    "じ": ji(),
    "ず": literal('zu'),
    "ぜ": literal('ze'),
    "ぞ": literal('zo'),
    "だ": literal('da'),
    "ぢ": literal('di'),
    "づ": literal('du'),
    "で": literal('de'),
    "ど": literal('do'),
    "ば": literal('ba'),
    "び": literal('bi'),
    "ぶ": literal('bu'),
    "べ": literal('be'),
    "ぼ": literal('bo'),
    "ぱ": literal('pa'),
    "ぴ": literal('pi'),
    "ぷ": literal('pu'),
    "ぺ": literal('pe'),
    "ぽ": literal('po'),
    "ゔ": literal('vu'),
    "ー": literal('-'),
    " ": whitespace(),
}

for letter in 'abcdefghijklmnopqrstuvwxyz':
    SINGLE_KANA_MAPPING[letter] = literal(letter)

for small, big in [
    ('ぁ', 'あ'),
    ('ぃ', 'い'),
    ('ぅ', 'う'),
    ('ぇ', 'え'),
    ('ぉ', 'お'),
    ('ゃ', 'や'),
    ('ゅ', 'ゆ'),
    ('ょ', 'よ'),
    ('ゎ', 'わ'),
    ('っ', 'つ'),
    ('ゕ', 'か'),
    ('ゖ', 'け'),
]:
    SINGLE_KANA_MAPPING[small] = small_kana(SINGLE_KANA_MAPPING[big])


def compound(kana: str, spelling: StateMachine) -> StateMachine:
    """Two kana typed either with their joint *spelling* or one by one."""
    first, second = kana
    return spelling.merge(
        append_machines(SINGLE_KANA_MAPPING[first], SINGLE_KANA_MAPPING[second])
    )


DOUBLE_KANA_MAPPING: KanaMapping = {}

for first, consonant in [
    ('き', 'k'), ('に', 'n'), ('ひ', 'h'), ('み', 'm'), ('り', 'r'),
    ('ぎ', 'g'), ('ぢ', 'd'), ('び', 'b'), ('ぴ', 'p'),
]:
    for small, vowel in [('ゃ', 'a'), ('ゅ', 'u'), ('ょ', 'o')]:
        DOUBLE_KANA_MAPPING[first + small] = compound(
            first + small, digraph(consonant + 'y' + vowel)
        )

for small, vowel in [('ゃ', 'a'), ('ゅ', 'u'), ('ょ', 'o'), ('ぇ', 'e')]:
    DOUBLE_KANA_MAPPING['し' + small] = compound('し' + small, sh(vowel))
    DOUBLE_KANA_MAPPING['ち' + small] = compound('ち' + small, ch(vowel))
    DOUBLE_KANA_MAPPING['じ' + small] = compound('じ' + small, j(vowel))

for kana, spelling in [
    ('ふぁ', 'fa'), ('ふぃ', 'fi'), ('ふぇ', 'fe'), ('ふぉ', 'fo'),
    ('てぃ', 'thi'), ('でぃ', 'dhi'),
    ('うぃ', 'wi'), ('うぇ', 'we'),
]:
    DOUBLE_KANA_MAPPING[kana] = compound(kana, digraph(spelling))

# Kana that can follow っ
GEMINATE_SINGLE_KANA = [
    "か", "き", "く", "け", "こ",
    "さ", "し", "す", "せ", "そ",
    "た", "ち", "つ", "て", "と",
    "は", "ひ", "ふ", "へ", "ほ",
    "が", "ぎ", "ぐ", "げ", "ご",
    "ざ", "じ", "ず", "ぜ", "ぞ",
    "だ", "ぢ", "づ", "で", "ど",
    "ば", "び", "ぶ", "べ", "ぼ",
    "ぱ", "ぴ", "ぷ", "ぺ", "ぽ",
]
GEMINATE_DOUBLE_KANA = [
    "きゃ", "きゅ", "きょ",
    "しゃ", "しゅ", "しょ",
    "ちゃ", "ちゅ", "ちょ",
    "ぎゃ", "ぎゅ", "ぎょ",
    "じゃ", "じゅ", "じょ",
    "ぢゃ", "ぢゅ", "ぢょ",
    "びゃ", "びゅ", "びょ",
    "ぴゃ", "ぴゅ", "ぴょ",
]

# Kana that can follow ん typed as a single "n"
MORAIC_N_SINGLE_KANA = GEMINATE_SINGLE_KANA + [
    "ま", "み", "む", "め", "も",
    "ら", "り", "る", "れ", "ろ",
    "わ", "を", "ゔ",
]
MORAIC_N_DOUBLE_KANA = GEMINATE_DOUBLE_KANA + [
    "ひゃ", "ひゅ", "ひょ",
    "みゃ", "みゅ", "みょ",
    "りゃ", "りゅ", "りょ",
    "しぇ", "ちぇ", "じぇ",
    "ふぁ", "ふぃ", "ふぇ", "ふぉ",
    "てぃ", "でぃ",
]


def geminate(base: StateMachine) -> StateMachine:
    """っ before *base*: doubled consonant, or っ typed on its own."""
    return small_tsu(base).merge(append_machines(SINGLE_KANA_MAPPING['っ'], base))


TRIPLE_KANA_MAPPING: KanaMapping = {}

for kana in GEMINATE_SINGLE_KANA:
    DOUBLE_KANA_MAPPING['っ' + kana] = geminate(SINGLE_KANA_MAPPING[kana])
for kana in GEMINATE_DOUBLE_KANA:
    TRIPLE_KANA_MAPPING['っ' + kana] = geminate(DOUBLE_KANA_MAPPING[kana])
for kana in MORAIC_N_SINGLE_KANA:
    DOUBLE_KANA_MAPPING['ん' + kana] = n(SINGLE_KANA_MAPPING[kana])
for kana in MORAIC_N_DOUBLE_KANA:
    TRIPLE_KANA_MAPPING['ん' + kana] = n(DOUBLE_KANA_MAPPING[kana])

KANA_MAPPING: KanaMapping = {
    **SINGLE_KANA_MAPPING,
    **DOUBLE_KANA_MAPPING,
    **TRIPLE_KANA_MAPPING,
}


def lookup(kana: str) -> Optional[StateMachine]:
    """Return the template for a normalized kana string, if any."""
    return KANA_MAPPING.get(kana)


def validate_mapping(mapping: Optional[KanaMapping] = None) -> List[str]:
    """Check the structural invariants of every template in *mapping*.

    Returns a list of human-readable problems, empty when the table is sound:
    metas never decrease along an edge, every accepting state weighs as many
    kana as its key has characters, and the canonical spelling of each
    template is accepted without skips or failures.
    """
    if mapping is None:
        mapping = KANA_MAPPING
    problems: List[str] = []

    for kana, template in mapping.items():
        ends = 0
        for state in template.initial_state.closure():
            if state.is_end():
                ends += 1
                if state.meta != len(kana):
                    problems.append(
                        f"{kana!r}: accepting state weighs {state.meta}, expected {len(kana)}"
                    )
            for input, next_state in state.transitions.items():
                if next_state.meta < state.meta:
                    problems.append(
                        f"{kana!r}: meta drops from {state.meta} to {next_state.meta} "
                        f"on {input!r} after {state.display!r}"
                    )
        if ends == 0:
            problems.append(f"{kana!r}: no accepting state")
            continue

        machine = template.clone()
        word = machine.get_word()
        for key in word:
            result = machine.transition(key)
            if result is not TransitionResult.SUCCESS:
                problems.append(f"{kana!r}: spelling {word!r} got {result.name} on {key!r}")
                break
        else:
            if not machine.is_finished():
                problems.append(f"{kana!r}: spelling {word!r} does not finish")

    return problems


logger.debug(f"Built kana table with {len(KANA_MAPPING)} entries")

if VALIDATE_TABLE:
    for problem in validate_mapping():
        logger.warning(f"Kana table: {problem}")
