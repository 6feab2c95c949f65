"""Tests for automaton construction errors."""
import pytest
from kanatype.state import AutomatonError, AmbiguousPrefixError


class TestAutomatonError:
    """Test AutomatonError."""

    def test_attributes(self):
        """Errors carry the display, sorted inputs and reason."""
        error = AutomatonError('shi', {'s', 'c'}, 'test reason')
        assert error.display == 'shi'
        assert error.inputs == ['c', 's']
        assert error.reason == 'test reason'
        assert 'shi' in str(error)
        assert 'test reason' in str(error)

    def test_ambiguous_prefix_is_automaton_error(self):
        """AmbiguousPrefixError is a specialised AutomatonError."""
        error = AmbiguousPrefixError('na', ['n'])
        assert isinstance(error, AutomatonError)
        assert error.inputs == ['n']
        assert "'n'" in str(error)

    def test_raised_by_merge(self):
        """Merging a spelling with its own prefix raises."""
        from kanatype.kana import literal
        with pytest.raises(AutomatonError):
            literal('ka').merge(literal('kan'))
