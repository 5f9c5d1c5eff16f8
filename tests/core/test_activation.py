"""
Property-based and unit tests for field activation.

Core invariants:
    - pattern_of(n) == pattern_of(n + 256k) while n and n + 256k share a sign
    - pattern_of(-n) == pattern_of(n)
    - pattern_to_byte(pattern_of(n)) == |n| mod 256
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldcore.core.activation import (
    pattern_of, active_indices, indices_of, is_field_active, field_byte,
    pattern_to_byte, byte_to_pattern, union_pattern, xor_pattern,
    pattern_string, field_signature,
)
from fieldcore.errors import InvalidFieldIndex, InvalidPatternLength, InvalidByteValue


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestPatternOf:
    def test_zero_is_empty(self):
        assert pattern_of(0) == (False,) * 8
        assert active_indices(0) == []

    def test_seven(self):
        assert pattern_of(7) == (True, True, True, False, False, False, False, False)
        assert active_indices(7) == [0, 1, 2]

    def test_forty_eight(self):
        assert active_indices(48) == [4, 5]

    def test_all_fields(self):
        assert active_indices(255) == list(range(8))

    def test_wraps_at_256(self):
        assert pattern_of(256) == pattern_of(0)
        assert pattern_of(257) == pattern_of(1)

    def test_negative_uses_absolute_value(self):
        assert pattern_of(-7) == pattern_of(7)
        assert field_byte(-300) == 44

    def test_large_integer(self):
        n = 2 ** 200 + 77
        assert pattern_of(n) == pattern_of(77)

    def test_is_field_active(self):
        assert is_field_active(77, 6)
        assert not is_field_active(77, 1)

    def test_is_field_active_rejects_bad_index(self):
        with pytest.raises(InvalidFieldIndex):
            is_field_active(7, 8)
        with pytest.raises(InvalidFieldIndex):
            is_field_active(7, True)


class TestPatternHelpers:
    def test_byte_round_trip_known(self):
        assert pattern_to_byte(pattern_of(77)) == 77
        assert byte_to_pattern(77) == pattern_of(77)

    def test_pattern_to_byte_rejects_wrong_length(self):
        with pytest.raises(InvalidPatternLength):
            pattern_to_byte((True,) * 7)

    @pytest.mark.parametrize("value", [-1, 256, 1000, True, 3.0])
    def test_byte_to_pattern_rejects_out_of_range(self, value):
        with pytest.raises(InvalidByteValue):
            byte_to_pattern(value)

    def test_union(self):
        assert union_pattern(pattern_of(7), pattern_of(11)) == pattern_of(15)
        assert union_pattern() == (False,) * 8

    def test_xor(self):
        assert xor_pattern(pattern_of(7), pattern_of(11)) == pattern_of(12)

    def test_indices_of(self):
        assert indices_of(pattern_of(12)) == [2, 3]

    def test_pattern_string(self):
        assert pattern_string(pattern_of(7)) == "11100000"
        assert pattern_string(pattern_of(128)) == "00000001"

    def test_pattern_string_rejects_wrong_length(self):
        with pytest.raises(InvalidPatternLength):
            pattern_string((True, False))

    def test_signature(self):
        assert field_signature(pattern_of(12)) == "φ+½"
        assert field_signature(pattern_of(0)) == "∅"


# ── Property tests ───────────────────────────────────────────────────────────

class TestActivationProperties:
    @given(st.integers(min_value=0), st.integers(min_value=0, max_value=50))
    def test_periodic(self, n, k):
        assert pattern_of(n) == pattern_of(n + 256 * k)

    @given(st.integers(min_value=0), st.integers(min_value=0, max_value=50))
    def test_periodic_below_zero(self, n, k):
        assert pattern_of(-n) == pattern_of(-(n + 256 * k))

    def test_period_does_not_cross_zero(self):
        # 1 and 1 - 256 = -255 sit on opposite sides of zero; |-255| = 255
        assert pattern_of(1) != pattern_of(1 - 256)
        assert pattern_of(1 - 256) == pattern_of(255)

    @given(st.integers())
    def test_sign_invariant(self, n):
        assert pattern_of(-n) == pattern_of(n)

    @given(st.integers())
    def test_byte_matches_abs_mod(self, n):
        assert pattern_to_byte(pattern_of(n)) == abs(n) % 256

    @given(st.integers(min_value=0, max_value=255))
    def test_byte_round_trip(self, b):
        assert pattern_to_byte(byte_to_pattern(b)) == b

    @given(st.integers())
    def test_pattern_shape(self, n):
        pattern = pattern_of(n)
        assert len(pattern) == 8
        assert all(isinstance(bit, bool) for bit in pattern)

    @given(st.integers())
    def test_active_indices_sorted(self, n):
        indices = active_indices(n)
        assert indices == sorted(indices)
        assert all(pattern_of(n)[i] for i in indices)
