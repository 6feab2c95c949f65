"""Automaton graph nodes, transition results and graph errors.

A template automaton is a graph of ``State`` nodes. Each node carries a
*display*, the romaji still left to type from that node, and a *meta*, the
number of kana completed on reaching it. A node without outgoing transitions
is accepting.

Templates are built once and never mutated afterwards, so the algebra below
always returns new nodes and is free to reference unchanged subgraphs of its
inputs.
"""

from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple


class TransitionResult(Enum):
    """Classification of one keystroke."""
    FAILED = "failed"
    SUCCESS = "success"
    SKIPPED = "skipped"


# (result, meta of the node reached, whether that node is accepting)
Observer = Callable[[TransitionResult, int, bool], None]


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class AutomatonError(Exception):
    """Raised when a template automaton cannot be built as declared."""
    def __init__(self, display: str, inputs: Iterable[str], reason: str):
        self.display = display
        self.inputs = sorted(inputs)
        self.reason = reason
        super().__init__(
            f"Invalid automaton '{display}' on inputs {self.inputs}: {reason}"
        )


class AmbiguousPrefixError(AutomatonError):
    """Raised when a moraic "n" would be ambiguous with the kana after it."""
    def __init__(self, display: str, inputs: Iterable[str]):
        super().__init__(
            display,
            inputs,
            "a single 'n' could also start the following kana",
        )


class State:
    """A labeled automaton node with input-keyed outgoing edges."""

    def __init__(self, display: str, meta: int = 0):
        self.display = display
        self.meta = meta
        self.transitions: Dict[str, 'State'] = {}

    def add_transition(self, input: str, state: 'State') -> None:
        self.transitions[input] = state

    def transition(self, input: str) -> Optional['State']:
        return self.transitions.get(input)

    def is_end(self) -> bool:
        return not self.transitions

    def closure(self) -> Iterator['State']:
        """Yield every node reachable from this one, each exactly once."""
        seen = {id(self)}
        stack = [self]
        while stack:
            state = stack.pop()
            yield state
            for next_state in state.transitions.values():
                if id(next_state) not in seen:
                    seen.add(id(next_state))
                    stack.append(next_state)

    def transform(self, fn: Callable[[str, int], Tuple[str, int]]) -> 'State':
        """Copy the graph, rewriting every ``(display, meta)`` pair with *fn*."""
        return copy_graph(self, fn)

    def merge(self, other: 'State', _memo: Optional[Dict] = None) -> 'State':
        """Union two graphs that spell the same kana.

        Edges only present in *other* are shared as they are; edges present
        in both have their targets merged recursively. The merged node keeps
        this node's display and meta.
        """
        if self is other:
            return self
        if _memo is None:
            _memo = {}
        key = (id(self), id(other))
        if key in _memo:
            return _memo[key]

        if self.is_end() != other.is_end():
            # One side would lose its accepting node
            inputs = self.transitions.keys() | other.transitions.keys()
            raise AutomatonError(
                self.display,
                inputs,
                f"cannot merge accepting and non-accepting nodes "
                f"('{self.display}' and '{other.display}')",
            )
        if self.is_end():
            return self

        merged = State(self.display, self.meta)
        _memo[key] = merged
        for input, next_state in self.transitions.items():
            alternative = other.transitions.get(input)
            if alternative is None:
                merged.add_transition(input, next_state)
            else:
                merged.add_transition(input, next_state.merge(alternative, _memo))
        for input, alternative in other.transitions.items():
            if input not in self.transitions:
                merged.add_transition(input, alternative)
        return merged

    def __repr__(self) -> str:
        return f"State({self.display!r}, meta={self.meta}, inputs={list(self.transitions)})"


def copy_graph(
    root: State,
    fn: Callable[[str, int], Tuple[str, int]],
    end: Optional[State] = None,
) -> State:
    """Copy the graph under *root*, relabeling each node with *fn*.

    When *end* is given, every accepting node is replaced by it instead of
    being copied. Shared nodes and cycles are preserved.
    """
    memo: Dict[int, State] = {}

    def visit(state: State) -> State:
        copied = memo.get(id(state))
        if copied is not None:
            return copied
        if end is not None and state.is_end():
            memo[id(state)] = end
            return end
        display, meta = fn(state.display, state.meta)
        copied = State(display, meta)
        memo[id(state)] = copied
        for input, next_state in state.transitions.items():
            copied.add_transition(input, visit(next_state))
        return copied

    return visit(root)
