"""
Tests for the constant table and the substrate built on it.

Core invariants:
    - alpha4 * alpha5 = 1 within 1e-15
    - every alpha is strictly positive
    - a table that breaks either is rejected at substrate construction
"""

import dataclasses

import pytest

from fieldcore.core.fields import (
    FIELD_COUNT, DEFAULT_TABLE, DEFAULT_FIELDS, FieldConstantTable,
    CONSTITUTIONAL_PRIMES, PHASE_ENCODING, verify_consistency,
)
from fieldcore.core.substrate import FieldSubstrate
from fieldcore.errors import FieldConsistencyError, InvalidFieldIndex


def table_with_alpha(index: int, alpha: float) -> FieldConstantTable:
    fields = list(DEFAULT_FIELDS)
    fields[index] = dataclasses.replace(fields[index], alpha=alpha)
    return FieldConstantTable(tuple(fields))


# ── Constant table ───────────────────────────────────────────────────────────

class TestConstantTable:
    def test_eight_fields(self):
        assert len(DEFAULT_TABLE) == FIELD_COUNT == 8

    def test_default_constants(self):
        assert DEFAULT_TABLE.alphas == (
            1.0, 1.8392867552141612, 1.618033988749895, 0.5,
            0.15915494309189535, 6.283185307179586, 0.199612, 0.014134725,
        )

    def test_names_and_symbols(self):
        assert DEFAULT_TABLE.names == (
            "identity", "tribonacci", "golden", "half",
            "inv_freq", "freq", "phase", "zeta",
        )
        assert DEFAULT_TABLE.symbols[2] == "φ"
        assert DEFAULT_TABLE.symbols[7] == "ζ"

    def test_inverse_pair_identity(self):
        alphas = DEFAULT_TABLE.alphas
        assert abs(alphas[4] * alphas[5] - 1.0) < 1e-15

    def test_all_alphas_positive(self):
        assert all(a > 0 for a in DEFAULT_TABLE.alphas)

    def test_primitive_is_power_of_two(self):
        for f in DEFAULT_TABLE:
            assert f.primitive == 2 ** f.index

    def test_phase_constant_encodes_primes(self):
        assert 7 in CONSTITUTIONAL_PRIMES and 7129 in CONSTITUTIONAL_PRIMES
        assert DEFAULT_TABLE.alphas[6] == PHASE_ENCODING

    def test_table_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_TABLE.fields = ()


class TestVerifyConsistency:
    def test_default_table_passes(self):
        assert verify_consistency() is True

    def test_broken_identity_fails(self):
        assert verify_consistency(table_with_alpha(5, 6.0)) is False

    def test_non_positive_alpha_fails(self):
        assert verify_consistency(table_with_alpha(3, 0.0)) is False
        assert verify_consistency(table_with_alpha(3, -0.5)) is False

    def test_short_table_fails(self):
        assert verify_consistency(FieldConstantTable(DEFAULT_FIELDS[:7])) is False


# ── Substrate ────────────────────────────────────────────────────────────────

class TestFieldSubstrate:
    def test_rejects_inconsistent_table(self):
        with pytest.raises(FieldConsistencyError):
            FieldSubstrate(table_with_alpha(4, 0.2))

    def test_constants_shared_by_reference(self):
        substrate = FieldSubstrate()
        assert substrate.table is DEFAULT_TABLE
        assert substrate.constants == DEFAULT_TABLE.alphas

    def test_field_lookup(self):
        substrate = FieldSubstrate()
        assert substrate.constant(5) == 6.283185307179586
        assert substrate.field_name(2) == "golden"
        assert substrate.field_symbol(4) == "1/2π"
        assert "Zeta" in substrate.field_description(7)

    @pytest.mark.parametrize("index", [-1, 8, 100, True, 2.0, "3"])
    def test_invalid_field_index(self, index):
        substrate = FieldSubstrate()
        with pytest.raises(InvalidFieldIndex):
            substrate.field(index)

    def test_invalid_index_is_value_error(self):
        with pytest.raises(ValueError):
            FieldSubstrate().constant(9)

    def test_signature(self):
        substrate = FieldSubstrate()
        assert substrate.signature(7) == "I+T+φ"
        assert substrate.signature(48) == "1/2π+2π"
        assert substrate.signature(0) == "∅"
        assert substrate.signature(256) == "∅"
