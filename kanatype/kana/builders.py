"""Template automata for kana spellings.

Most kana map to exactly one romaji spelling, but several have alternatives
(し as "shi" or "si"), small kana can be typed with an explicit "l"/"x"
prefix, and っ and ん change how the *following* kana is typed. Each builder
below returns a fresh template ``StateMachine``; metas count how many kana
have been completed at each node.
"""

from kanatype.state import (
    AmbiguousPrefixError,
    State,
    StateMachine,
    append_machines,
    build_from_transitions,
)
from kanatype.state import make_transition as t

# A single "n" followed by one of these would be read as な/に/.../にゃ
AMBIGUOUS_AFTER_N = frozenset('naiueoy')


def literal(source: str, *boundaries: int) -> StateMachine:
    """Build the chain automaton that accepts exactly *source*.

    The meta after typing ``i`` characters is the number of *boundaries*
    that are ``<= i``. By default the only boundary is the end of the
    spelling.
    """
    if not boundaries:
        boundaries = (len(source),)
    transitions = []
    metas = {}
    for i in range(len(source) + 1):
        metas[source[i:]] = sum(1 for b in boundaries if b <= i)
        if i < len(source):
            transitions.append(t(source[i:], source[i], source[i+1:]))
    return build_from_transitions(source, transitions, metas)


def digraph(source: str) -> StateMachine:
    """Literal spelling of two kana, the first completed one key before the end."""
    return literal(source, len(source) - 1, len(source))


def shi() -> StateMachine:
    return build_from_transitions('shi', [
        t('shi', 's', 'hi'),
        t('hi', 'h', 'i'),
        t('hi', 'i', ''),
        t('i', 'i', ''),
    ])


def chi() -> StateMachine:
    return build_from_transitions('chi', [
        t('chi', 'c', 'hi'),
        t('chi', 't', 'i'),
        t('hi', 'h', 'i'),
        t('i', 'i', ''),
    ])


def tsu() -> StateMachine:
    return build_from_transitions('tsu', [
        t('tsu', 't', 'su'),
        t('su', 's', 'u'),
        t('su', 'u', ''),
        t('u', 'u', ''),
    ])


def fu() -> StateMachine:
    return build_from_transitions('fu', [
        t('fu', 'f', 'u'),
        t('fu', 'h', 'u'),
        t('u', 'u', ''),
    ])


def ji() -> StateMachine:
    return build_from_transitions('ji', [
        t('ji', 'j', 'i'),
        t('ji', 'z', 'i'),
        t('i', 'i', ''),
    ])


def sh(end: str) -> StateMachine:
    """しゃ family: "sha" or "sya"."""
    source = 'sh' + end
    middle = 'h' + end
    return build_from_transitions(source, [
        t(source, 's', middle),
        t(middle, 'h', end),
        t(middle, 'y', end),
        t(end, end, ''),
    ], {end: 1, '': 2})


def ch(end: str) -> StateMachine:
    """ちゃ family: "cha" or "tya"."""
    source = 'ch' + end
    middle = 'h' + end
    alt_middle = 'y' + end
    return build_from_transitions(source, [
        t(source, 'c', middle),
        t(middle, 'h', end),
        t(source, 't', alt_middle),
        t(alt_middle, 'y', end),
        t(end, end, ''),
    ], {end: 1, '': 2})


def j(end: str) -> StateMachine:
    """じゃ family: "ja", "jya" or "zya"."""
    source = 'j' + end
    alt_middle = 'y' + end
    return build_from_transitions(source, [
        t(source, 'j', end),
        t(source, 'z', alt_middle),
        t(end, 'y', end),
        t(alt_middle, 'y', end),
        t(end, end, ''),
    ], {end: 1, '': 2})


def whitespace() -> StateMachine:
    return build_from_transitions('_', [
        t('_', '_', ''),
        t('_', ' ', ''),
    ])


def small_kana(base: StateMachine) -> StateMachine:
    """Accept *base* as is, or prefixed by the small-kana marker "l" or "x"."""
    initial = base.initial_state
    state = State(initial.display, initial.meta)
    for input, next_state in initial.transitions.items():
        state.add_transition(input, next_state)
    state.add_transition('l', initial)
    state.add_transition('x', initial)
    return StateMachine(state)


def small_tsu(base: StateMachine) -> StateMachine:
    """っ followed by *base*: the first key of every spelling is doubled.

    A starting state with multiple transitions has one spelling per
    transition, so one intermediate state is created per transition and
    named after the spelling it leads to.
    """
    shifted = base.initial_state.transform(lambda display, meta: (display, meta + 1))
    state = State(shifted.display[:1] + shifted.display)
    for input, next_state in shifted.transitions.items():
        intermediate = State(input + next_state.display)
        intermediate.add_transition(input, next_state)
        state.add_transition(input, intermediate)
    return StateMachine(state)


def n(base: StateMachine) -> StateMachine:
    """ん followed by *base*, typed as either "n" or "nn".

    Raises:
        AmbiguousPrefixError: if *base* itself can start with a key that
            would make a single "n" ambiguous
    """
    conflicts = AMBIGUOUS_AFTER_N & base.initial_state.transitions.keys()
    if conflicts:
        raise AmbiguousPrefixError(base.get_word(), conflicts)
    single = append_machines(literal('n'), base)
    double = append_machines(literal('nn'), base)
    return single.merge(double)
