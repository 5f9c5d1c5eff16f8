"""
Tests for pattern-level field interference.
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldcore.core.activation import pattern_of, byte_to_pattern
from fieldcore.errors import InvalidPatternLength
from fieldcore.resonance.interference import (
    field_interference, will_destructively_interfere, phase_relationship,
)

patterns = st.integers(min_value=0, max_value=255).map(byte_to_pattern)


class TestFieldInterference:
    def test_constructive(self):
        result = field_interference(pattern_of(7), pattern_of(8))
        assert result.interference_type == "constructive"
        assert result.pattern == pattern_of(15)
        assert result.cancelled == ()
        assert result.coherence == 1.0

    def test_inverse_pair_cancels(self):
        result = field_interference(pattern_of(48), pattern_of(48))
        assert result.interference_type == "destructive"
        assert result.cancelled == (4, 5)
        assert result.pattern == pattern_of(0)
        assert result.coherence == 0.0

    def test_mixed(self):
        result = field_interference(pattern_of(49), pattern_of(49))
        assert result.interference_type == "mixed"
        assert result.pattern == pattern_of(1)

    def test_empty_inputs(self):
        assert field_interference(pattern_of(0), pattern_of(0)).coherence == 1.0

    def test_rejects_short_pattern(self):
        with pytest.raises(InvalidPatternLength):
            field_interference((True,), pattern_of(1))

    def test_will_destructively_interfere(self):
        assert will_destructively_interfere(pattern_of(48), pattern_of(49))
        assert not will_destructively_interfere(pattern_of(16), pattern_of(48))


class TestPhaseRelationship:
    def test_identical(self):
        assert phase_relationship(pattern_of(7), pattern_of(7)) == pytest.approx(0.0, abs=1e-7)

    def test_orthogonal(self):
        assert phase_relationship(pattern_of(1), pattern_of(2)) == pytest.approx(math.pi / 2)

    def test_empty(self):
        assert phase_relationship(pattern_of(0), pattern_of(5)) == 0.0

    @given(patterns, patterns)
    def test_range_and_symmetry(self, a, b):
        angle = phase_relationship(a, b)
        assert 0.0 <= angle <= math.pi / 2 + 1e-12
        assert angle == phase_relationship(b, a)
