"""
Property-based and unit tests for the arithmetic operators.

Core invariants:
    - results are exact integer arithmetic
    - vanishing fields are in the operand union and absent from the result
    - emergent fields are in the result and absent from the operand union
    - vanishing and emergent never overlap
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fieldcore.core.activation import pattern_of, union_pattern
from fieldcore.errors import FieldDivisionByZero, InvalidFieldIndex
from fieldcore.universe import FieldUniverse

operands = st.integers(min_value=-10 ** 6, max_value=10 ** 6)


@pytest.fixture(scope="module")
def ops():
    return FieldUniverse().operators


# ── Multiplication and addition ──────────────────────────────────────────────

class TestMultiply:
    def test_seven_times_eleven(self, ops):
        result = ops.multiply(7, 11)
        assert result.result == 77
        assert result.vanishing == (1,)
        assert result.emergent == (6,)
        assert result.artifacts.naive == pattern_of(15)
        assert result.result_pattern == pattern_of(77)

    def test_carry_and_complexity(self, ops):
        result = ops.multiply(7, 11)
        assert result.carry == pattern_of(1 + 64)
        kinds = {t.field: t.kind for t in result.transitions}
        assert kinds[0] == "interference"
        assert kinds[6] == "emergent"
        assert kinds[3] == "simple"
        assert result.complexity == 4

    def test_energy_and_pages(self, ops):
        result = ops.multiply(7, 11)
        r7, r11, r77 = (ops.dynamics.calculate_resonance(n) for n in (7, 11, 77))
        assert result.energy_change == pytest.approx(r77 - r7 * r11)
        assert result.operand_pages == (0, 0)
        assert result.result_page == 1
        assert result.crossed_boundary

    def test_by_zero(self, ops):
        result = ops.multiply(0, 123)
        assert result.result == 0
        assert result.emergent == ()

    def test_big_integers_exact(self, ops):
        a, b = 2 ** 90 + 7, 3 ** 60 + 11
        assert ops.multiply(a, b).result == a * b


class TestAdd:
    def test_seven_plus_eleven(self, ops):
        result = ops.add(7, 11)
        assert result.result == 18
        assert result.vanishing == (0, 2, 3)
        assert result.emergent == (4,)
        assert result.carry is None
        assert result.complexity == 0

    def test_merger_kinds(self, ops):
        kinds = {t.field: t.kind for t in ops.add(7, 11).transitions}
        assert kinds[1] == "preserved"
        assert kinds[4] == "created"
        assert kinds[0] == "destroyed"
        assert kinds[7] == "transformed"

    def test_energy_change(self, ops):
        result = ops.add(1, 1)
        assert result.energy_change == pytest.approx(
            ops.dynamics.calculate_resonance(2) - 2.0
        )

    def test_subtract(self, ops):
        result = ops.subtract(10, 3)
        assert result.result == 7
        assert result.operands == (10, -3)

    def test_no_artifacts_without_carries(self, ops):
        assert ops.add(1, 2).artifacts.is_clean


# ── Modular and chained forms ────────────────────────────────────────────────

class TestModular:
    def test_add_modulo(self, ops):
        result = ops.add_modulo(200, 100, 256)
        assert result.base.result == 300
        assert result.modular_result == 44
        assert result.modular_pattern == pattern_of(44)
        assert result.reduction_occurred

    def test_multiply_modulo(self, ops):
        result = ops.multiply_modulo(7, 11, 100)
        assert result.modular_result == 77
        assert not result.reduction_occurred

    def test_modulo_by_zero(self, ops):
        with pytest.raises(FieldDivisionByZero):
            ops.multiply_modulo(7, 11, 0)
        with pytest.raises(ZeroDivisionError):
            ops.modulo(5, 0)

    def test_modulo_sign(self, ops):
        assert ops.modulo(-7, 3) == 2


class TestChains:
    def test_add_chain(self, ops):
        chain = ops.add_chain([1, 2, 3, 4])
        assert chain.final_result == 10
        assert len(chain.steps) == 3
        assert chain.operation == "addition-chain"
        assert chain.final_pattern == pattern_of(10)

    def test_multiply_chain(self, ops):
        chain = ops.multiply_chain([2, 3, 4])
        assert chain.final_result == 24
        assert chain.initial_pattern == pattern_of(2)
        assert chain.total_artifacts == sum(s.artifacts.count for s in chain.steps)

    def test_single_element_chain(self, ops):
        chain = ops.add_chain([5])
        assert chain.final_result == 5
        assert chain.steps == ()

    def test_empty_chain(self, ops):
        with pytest.raises(ValueError):
            ops.multiply_chain([])

    def test_power(self, ops):
        result = ops.power(2, 10)
        assert result.result == 1024
        assert len(result.steps) == 9
        assert len(result.field_cascade) == 10
        assert result.field_cascade[-1] == pattern_of(1024)

    def test_power_edge_cases(self, ops):
        assert ops.power(3, 0).result == 1
        assert ops.power(5, 1).result == 5
        with pytest.raises(ValueError):
            ops.power(2, -1)


# ── Division, GCD, LCM ───────────────────────────────────────────────────────

class TestDivision:
    def test_divide(self, ops):
        result = ops.divide(17, 5)
        assert (result.quotient, result.remainder) == (3, 2)
        assert result.reconstructs_original
        assert not result.exact

    def test_floor_semantics(self, ops):
        result = ops.divide(-7, 2)
        assert (result.quotient, result.remainder) == (-4, 1)
        assert result.reconstructs_original

    def test_divide_by_zero(self, ops):
        with pytest.raises(FieldDivisionByZero):
            ops.divide(1, 0)

    def test_gcd_steps(self, ops):
        result = ops.gcd(48, 18)
        assert result.gcd == 6
        assert [(s.x, s.y, s.quotient, s.remainder) for s in result.steps] == [
            (48, 18, 2, 12), (18, 12, 1, 6), (12, 6, 2, 0),
        ]
        assert result.common_fields == ()

    def test_gcd_common_fields(self, ops):
        assert ops.gcd(12, 4).common_fields == (2,)

    def test_gcd_signs_and_zero(self, ops):
        assert ops.gcd(-12, 18).gcd == 6
        assert ops.gcd(0, 0).gcd == 0
        assert ops.gcd(0, 9).gcd == 9

    def test_lcm(self, ops):
        result = ops.lcm(4, 6)
        assert (result.lcm, result.gcd) == (12, 2)
        assert ops.lcm(0, 5).lcm == 0


# ── Artifact searches ────────────────────────────────────────────────────────

class TestArtifactSearch:
    def test_find_producers(self, ops):
        producers = ops.find_artifact_producers(6, "emergent", 1, 11)
        assert (7, 11) in producers
        for a, b in producers:
            assert 6 in ops.multiply(a, b).emergent

    def test_find_producers_validates(self, ops):
        with pytest.raises(InvalidFieldIndex):
            ops.find_artifact_producers(8, "emergent", 1, 5)
        with pytest.raises(ValueError):
            ops.find_artifact_producers(1, "sideways", 1, 5)

    def test_analyze_sequence(self, ops):
        analysis = ops.analyze_sequence([7, 11])
        assert analysis.total_artifacts == 2
        assert analysis.distribution == {"vanishing-1": 1, "emergent-6": 1}
        assert analysis.most_active_field == 1
        assert analysis.average_per_operation == 2.0

    def test_analyze_short_sequence(self, ops):
        with pytest.raises(ValueError):
            ops.analyze_sequence([7])


# ── Property tests ───────────────────────────────────────────────────────────

class TestArtifactProperties:
    @given(operands, operands)
    def test_multiply_artifact_definitions(self, a, b):
        ops = FieldUniverse().operators
        result = ops.multiply(a, b)
        naive = union_pattern(pattern_of(a), pattern_of(b))
        actual = pattern_of(a * b)
        assert result.result == a * b
        assert result.vanishing == tuple(i for i in range(8) if naive[i] and not actual[i])
        assert result.emergent == tuple(i for i in range(8) if actual[i] and not naive[i])
        assert not set(result.vanishing) & set(result.emergent)

    @given(operands, operands)
    def test_add_artifact_definitions(self, a, b):
        ops = FieldUniverse().operators
        result = ops.add(a, b)
        naive = union_pattern(pattern_of(a), pattern_of(b))
        assert result.result == a + b
        assert all(naive[i] and not result.result_pattern[i] for i in result.vanishing)
        assert all(result.result_pattern[i] and not naive[i] for i in result.emergent)

    @given(operands, operands)
    def test_multiply_commutes(self, a, b):
        ops = FieldUniverse().operators
        assert ops.multiply(a, b).artifacts == ops.multiply(b, a).artifacts
