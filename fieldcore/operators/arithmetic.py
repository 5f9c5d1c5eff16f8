"""
Arithmetic operators: layer 3.

Every operation computes its integer result exactly (Python ints are
arbitrary precision) and then reports what happened to the fields:

    multiply  -- field entanglement; artifacts against the operand union
    add       -- field merger; same comparison, different carry behaviour
    normalize -- prime decomposition; artifacts against the factor union

Nothing here approximates the result or simulates carries. The result's
pattern is whatever pattern_of(result) is. The only surprise is that
carries do not respect a bitwise union, and that is what gets reported.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.activation import indices_of, field_signature, check_field_index
from ..core.cache import RecordCache
from ..core.records import ArtifactReport, NumberRecord
from ..core.substrate import FieldSubstrate
from ..errors import DegenerateNormalization, FieldDivisionByZero
from ..resonance.dynamics import ResonanceDynamics
from ..topology.space import PageTopology
from .artifacts import (
    operation_artifacts, carry_pattern,
    merger_transitions, entanglement_transitions,
)
from .normalization import (
    trial_division, is_prime, division_steps, Normalization,
)

ARTIFACT_KINDS = ("vanishing", "emergent")


@dataclass(frozen=True)
class OperationResult:
    """
    One binary operation and its field-level side effects.

    For multiplication, carry is the carry operator pattern and complexity
    the entanglement complexity; for addition carry is None and
    complexity 0.
    """
    operation: str
    operands: tuple
    result: int
    operand_patterns: tuple
    result_pattern: tuple
    artifacts: ArtifactReport
    transitions: tuple
    operand_resonances: tuple
    result_resonance: float
    energy_change: float
    operand_pages: tuple
    result_page: int
    carry: Optional[tuple] = None
    complexity: int = 0

    @property
    def vanishing(self) -> tuple:
        return self.artifacts.vanishing

    @property
    def emergent(self) -> tuple:
        return self.artifacts.emergent

    @property
    def crossed_boundary(self) -> bool:
        """The result landed on a page neither operand is on."""
        return any(page != self.result_page for page in self.operand_pages)


@dataclass(frozen=True)
class ModularResult:
    base: OperationResult
    modulus: int
    modular_result: int
    modular_pattern: tuple
    modular_resonance: float

    @property
    def reduction_occurred(self) -> bool:
        return self.base.result != self.modular_result


@dataclass(frozen=True)
class ChainResult:
    operation: str
    operands: tuple
    final_result: int
    steps: tuple
    initial_pattern: tuple
    final_pattern: tuple
    total_transitions: int
    total_artifacts: int
    total_complexity: int = 0


@dataclass(frozen=True)
class PowerResult:
    base: int
    exponent: int
    result: int
    steps: tuple
    field_cascade: tuple


@dataclass(frozen=True)
class DivisionResult:
    dividend: int
    divisor: int
    quotient: int
    remainder: int
    artifacts: ArtifactReport       # of quotient * divisor
    quotient_pattern: tuple
    remainder_pattern: tuple
    reconstructs_original: bool

    @property
    def exact(self) -> bool:
        return self.remainder == 0


@dataclass(frozen=True)
class GCDStep:
    x: int
    y: int
    quotient: int
    remainder: int
    x_pattern: tuple
    y_pattern: tuple


@dataclass(frozen=True)
class GCDResult:
    a: int
    b: int
    gcd: int
    steps: tuple
    common_fields: tuple


@dataclass(frozen=True)
class LCMResult:
    a: int
    b: int
    lcm: int
    gcd: int
    resonance: float


@dataclass(frozen=True)
class SequenceAnalysis:
    sequence: tuple
    total_artifacts: int
    distribution: dict
    most_active_field: int = -1
    average_per_operation: float = 0.0


class ArithmeticOperators:

    def __init__(
        self,
        substrate: FieldSubstrate,
        dynamics: ResonanceDynamics,
        topology: PageTopology,
        cache: Optional[RecordCache] = None,
    ):
        self.substrate = substrate
        self.dynamics = dynamics
        self.topology = topology
        self.cache = cache

    # --- Records ---

    def _build_record(self, n: int) -> NumberRecord:
        pattern = self.substrate.pattern_of(n)
        return NumberRecord(
            value=n,
            pattern=pattern,
            resonance=self.dynamics.calculate_resonance(n),
            location=self.topology.locate(n),
            signature=field_signature(pattern, self.substrate.table),
            active_fields=tuple(indices_of(pattern)),
        )

    def record(self, n: int) -> NumberRecord:
        if self.cache is None:
            return self._build_record(n)
        return self.cache.get_or_compute(n, self._build_record)

    # --- Addition: field merger ---

    def add(self, a: int, b: int) -> OperationResult:
        total = a + b
        pa, pb, pr = (self.substrate.pattern_of(x) for x in (a, b, total))
        ra, rb, rr = (self.dynamics.calculate_resonance(x) for x in (a, b, total))
        return OperationResult(
            operation="addition",
            operands=(a, b),
            result=total,
            operand_patterns=(pa, pb),
            result_pattern=pr,
            artifacts=operation_artifacts((pa, pb), pr),
            transitions=tuple(merger_transitions(pa, pb, pr)),
            operand_resonances=(ra, rb),
            result_resonance=rr,
            energy_change=rr - (ra + rb),
            operand_pages=(self.topology.locate(a).page, self.topology.locate(b).page),
            result_page=self.topology.locate(total).page,
        )

    def subtract(self, a: int, b: int) -> OperationResult:
        """Addition of the negation; the operands recorded are (a, -b)."""
        return self.add(a, -b)

    # --- Multiplication: field entanglement ---

    def multiply(self, a: int, b: int) -> OperationResult:
        product = a * b
        pa, pb, pr = (self.substrate.pattern_of(x) for x in (a, b, product))
        ra, rb, rr = (self.dynamics.calculate_resonance(x) for x in (a, b, product))
        carry = carry_pattern(pa, pb, pr)
        transitions, complexity = entanglement_transitions(pa, pb, pr, carry)
        return OperationResult(
            operation="multiplication",
            operands=(a, b),
            result=product,
            operand_patterns=(pa, pb),
            result_pattern=pr,
            artifacts=operation_artifacts((pa, pb), pr),
            transitions=tuple(transitions),
            operand_resonances=(ra, rb),
            result_resonance=rr,
            energy_change=rr - ra * rb,
            operand_pages=(self.topology.locate(a).page, self.topology.locate(b).page),
            result_page=self.topology.locate(product).page,
            carry=carry,
            complexity=complexity,
        )

    def power(self, base: int, exponent: int) -> PowerResult:
        """
        base ** exponent by repeated multiplication, keeping each step.

        field_cascade holds the pattern of base, base^2, ..., base^exponent.
        """
        if exponent < 0:
            raise ValueError(f"Negative exponents not supported: {exponent}")
        if exponent == 0:
            return PowerResult(base, exponent, 1, (), ())

        steps = []
        cascade = [self.substrate.pattern_of(base)]
        result = base
        for _ in range(exponent - 1):
            step = self.multiply(result, base)
            steps.append(step)
            result = step.result
            cascade.append(step.result_pattern)
        return PowerResult(base, exponent, result, tuple(steps), tuple(cascade))

    # --- Modular forms ---

    def modulo(self, a: int, modulus: int) -> int:
        """a mod modulus, with the sign of the modulus (non-negative for modulus > 0)."""
        if modulus == 0:
            raise FieldDivisionByZero("Modulo")
        return a % modulus

    def _modular(self, base: OperationResult, modulus: int) -> ModularResult:
        reduced = self.modulo(base.result, modulus)
        return ModularResult(
            base=base,
            modulus=modulus,
            modular_result=reduced,
            modular_pattern=self.substrate.pattern_of(reduced),
            modular_resonance=self.dynamics.calculate_resonance(reduced),
        )

    def add_modulo(self, a: int, b: int, modulus: int) -> ModularResult:
        if modulus == 0:
            raise FieldDivisionByZero("Modulo")
        return self._modular(self.add(a, b), modulus)

    def multiply_modulo(self, a: int, b: int, modulus: int) -> ModularResult:
        if modulus == 0:
            raise FieldDivisionByZero("Modulo")
        return self._modular(self.multiply(a, b), modulus)

    # --- Chains ---

    def _chain(self, numbers, operation, name) -> ChainResult:
        numbers = list(numbers)
        if not numbers:
            raise ValueError(f"Cannot perform chain {name} on an empty sequence")

        steps = []
        accumulator = numbers[0]
        for n in numbers[1:]:
            step = operation(accumulator, n)
            steps.append(step)
            accumulator = step.result

        if name == "addition":
            changed = sum(1 for s in steps for t in s.transitions if t.kind != "preserved")
        else:
            changed = sum(1 for s in steps for t in s.transitions if t.kind != "simple")

        return ChainResult(
            operation=f"{name}-chain",
            operands=tuple(numbers),
            final_result=accumulator,
            steps=tuple(steps),
            initial_pattern=self.substrate.pattern_of(numbers[0]),
            final_pattern=self.substrate.pattern_of(accumulator),
            total_transitions=changed,
            total_artifacts=sum(s.artifacts.count for s in steps),
            total_complexity=sum(s.complexity for s in steps),
        )

    def add_chain(self, numbers) -> ChainResult:
        return self._chain(numbers, self.add, "addition")

    def multiply_chain(self, numbers) -> ChainResult:
        return self._chain(numbers, self.multiply, "multiplication")

    # --- Division, GCD, LCM ---

    def divide(self, a: int, b: int) -> DivisionResult:
        """
        Floor division, checked by recompiling q * b + r.

        The artifacts are those of the multiplication q * b that division
        has to undo.
        """
        if b == 0:
            raise FieldDivisionByZero("Division")
        quotient, remainder = divmod(a, b)
        recompiled = self.multiply(quotient, b)
        restored = self.add(recompiled.result, remainder)
        return DivisionResult(
            dividend=a,
            divisor=b,
            quotient=quotient,
            remainder=remainder,
            artifacts=recompiled.artifacts,
            quotient_pattern=self.substrate.pattern_of(quotient),
            remainder_pattern=self.substrate.pattern_of(remainder),
            reconstructs_original=restored.result == a,
        )

    def gcd(self, a: int, b: int) -> GCDResult:
        """Euclid's algorithm on |a|, |b|, with the pattern at every step."""
        x, y = abs(a), abs(b)
        steps = []
        while y != 0:
            quotient, remainder = divmod(x, y)
            steps.append(GCDStep(
                x=x, y=y, quotient=quotient, remainder=remainder,
                x_pattern=self.substrate.pattern_of(x),
                y_pattern=self.substrate.pattern_of(y),
            ))
            x, y = y, remainder

        pa = self.substrate.pattern_of(a)
        pb = self.substrate.pattern_of(b)
        pg = self.substrate.pattern_of(x)
        common = tuple(i for i in range(len(pg)) if pg[i] and pa[i] and pb[i])
        return GCDResult(abs(a), abs(b), x, tuple(steps), common)

    def lcm(self, a: int, b: int) -> LCMResult:
        a, b = abs(a), abs(b)
        divisor = self.gcd(a, b).gcd
        value = 0 if divisor == 0 else a * b // divisor
        return LCMResult(a, b, value, divisor, self.dynamics.calculate_resonance(value))

    # --- Normalization ---

    def factorize(self, n: int) -> list:
        """Prime factors in non-decreasing order; [] for n < 2."""
        return trial_division(n)

    def is_prime(self, n: int) -> bool:
        """Exact primality. Use this, not the resonance heuristic, when it matters."""
        return is_prime(n)

    def normalize(self, n: int) -> Normalization:
        """
        Decompose n into prime records and reconcile the patterns.

        Raises DegenerateNormalization for n < 2.
        """
        if n < 2:
            raise DegenerateNormalization(n)
        factors = trial_division(n)
        original = self.record(n)
        factor_records = tuple(self.record(f) for f in factors)
        return Normalization(
            original=original,
            factors=factor_records,
            steps=division_steps(n, factors),
            reconciliation=operation_artifacts(
                [r.pattern for r in factor_records], original.pattern,
            ),
        )

    # --- Artifact searches ---

    def find_artifact_producers(self, field_index: int, kind: str, low: int, high: int) -> list:
        """
        Pairs (a, b), low <= a <= b <= high, whose product shows the given
        artifact on the given field.
        """
        check_field_index(field_index)
        if kind not in ARTIFACT_KINDS:
            raise ValueError(f"Unknown artifact kind: {kind!r}. Choose from: {ARTIFACT_KINDS}")

        producers = []
        for a in range(low, high + 1):
            for b in range(a, high + 1):
                report = self.multiply(a, b).artifacts
                if field_index in getattr(report, kind):
                    producers.append((a, b))
        return producers

    def analyze_sequence(self, numbers) -> SequenceAnalysis:
        """Artifacts of multiplying each adjacent pair in a sequence."""
        numbers = list(numbers)
        if len(numbers) < 2:
            raise ValueError("Sequence analysis needs at least two numbers")

        distribution = {}
        per_field = {}
        for a, b in zip(numbers, numbers[1:]):
            report = self.multiply(a, b).artifacts
            for kind in ARTIFACT_KINDS:
                for i in getattr(report, kind):
                    key = f"{kind}-{i}"
                    distribution[key] = distribution.get(key, 0) + 1
                    per_field[i] = per_field.get(i, 0) + 1

        total = sum(distribution.values())
        most_active = max(sorted(per_field), key=lambda i: per_field[i]) if per_field else -1
        return SequenceAnalysis(
            sequence=tuple(numbers),
            total_artifacts=total,
            distribution=distribution,
            most_active_field=most_active,
            average_per_operation=total / (len(numbers) - 1),
        )
