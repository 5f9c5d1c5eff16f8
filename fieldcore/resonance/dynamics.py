"""
Resonance dynamics: layer 1.

    R(n) = ∏_{i active in n} alpha_i        (empty product = 1.0)

Resonance squeezes an 8-bit pattern into one real number. It is lossy on
purpose: distinct patterns can share a value, most visibly any two
patterns that differ only in field 0, since alpha0 = 1. That collision is
exactly why is_prime_via_resonance() is a heuristic and nothing more.
"""

from dataclasses import dataclass
import math

from ..core.activation import byte_to_pattern, indices_of
from ..core.fields import CYCLE_SIZE
from ..core.substrate import FieldSubstrate

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2

# Resonance wells: values near which numbers behave like attractors.
RESONANCE_WELLS = (0.5, 1.0, GOLDEN_RATIO, math.pi, 2 * math.pi)
WELL_TOLERANCE = 0.01

# Upper edges of the resonance bands, checked in order.
RESONANCE_BANDS = (
    (0.1, "ultra-low"),
    (0.5, "very-low"),
    (1.0, "low"),
)


def resonance_of_pattern(pattern, alphas) -> float:
    resonance = 1.0
    for i, active in enumerate(pattern):
        if active:
            resonance *= alphas[i]
    return resonance


def classify_resonance(resonance: float) -> str:
    if resonance == 0:
        return "void"
    for edge, label in RESONANCE_BANDS:
        if resonance < edge:
            return label
    if abs(resonance - 1.0) < 0.001:
        return "unity"
    if resonance < 2.0:
        return "moderate"
    if resonance < 5.0:
        return "high"
    if resonance < 10.0:
        return "very-high"
    return "ultra-high"


def is_at_resonance_well(resonance: float, tolerance: float = WELL_TOLERANCE) -> bool:
    return any(abs(resonance - well) < tolerance for well in RESONANCE_WELLS)


@dataclass(frozen=True)
class ResonanceSignature:
    value: int
    resonance: float
    classification: str
    is_well: bool
    active_field_count: int


@dataclass(frozen=True)
class ResonanceMinimum:
    """
    Neighbourhood of n in the resonance landscape.

    neighbors holds (position, resonance) pairs for n-1, n, n+1.
    laplacian is R(n+1) - 2R(n) + R(n-1).
    """
    value: int
    resonance: float
    is_local_minimum: bool
    laplacian: float
    neighbors: tuple


class ResonanceDynamics:
    """
    Resonance of integers over one substrate, with bounds and neighbourhood
    queries.

    is_prime_via_resonance() returns False for every integer: the identity
    field makes R(2k) == R(2k + 1), so a strict local minimum never occurs.
    Use ArithmeticOperators.is_prime() for primality.
    """

    def __init__(self, substrate: FieldSubstrate):
        self.substrate = substrate
        self._bounds = None

    @property
    def constants(self) -> tuple:
        return self.substrate.constants

    def calculate_resonance(self, n: int) -> float:
        return resonance_of_pattern(self.substrate.pattern_of(n), self.constants)

    def resonance_bounds(self) -> tuple:
        """
        Exact (min, max) of R over all 256 patterns.

        Every integer's resonance is one of these 256 values, so this is a
        hard bound for all n.
        """
        if self._bounds is None:
            values = [resonance_of_pattern(byte_to_pattern(b), self.constants)
                      for b in range(CYCLE_SIZE)]
            self._bounds = (min(values), max(values))
        return self._bounds

    def resonance_evidence(self, n: int) -> list:
        """One line per active field, then the total."""
        pattern = self.substrate.pattern_of(n)
        evidence = []
        for i in indices_of(pattern):
            symbol = self.substrate.field_symbol(i)
            evidence.append(f"Field {symbol} active: alpha{i} = {self.constants[i]}")
        evidence.append(f"Total resonance: {self.calculate_resonance(n)}")
        return evidence

    def resonance_signature(self, n: int) -> ResonanceSignature:
        pattern = self.substrate.pattern_of(n)
        resonance = resonance_of_pattern(pattern, self.constants)
        return ResonanceSignature(
            value=n,
            resonance=resonance,
            classification=classify_resonance(resonance),
            is_well=is_at_resonance_well(resonance),
            active_field_count=sum(pattern),
        )

    def resonance_minimum(self, n: int) -> ResonanceMinimum:
        resonance = self.calculate_resonance(n)
        if n <= 1:
            return ResonanceMinimum(n, resonance, False, 0.0, ())

        previous = self.calculate_resonance(n - 1)
        following = self.calculate_resonance(n + 1)
        return ResonanceMinimum(
            value=n,
            resonance=resonance,
            is_local_minimum=resonance < previous and resonance < following,
            laplacian=following - 2 * resonance + previous,
            neighbors=((n - 1, previous), (n, resonance), (n + 1, following)),
        )

    def is_prime_via_resonance(self, n: int) -> bool:
        """
        HEURISTIC. True when R(n) is a strict local minimum against n-1 and n+1.

        Not a primality test. Because alpha0 = 1, every even n shares its
        resonance with n+1, so the strict comparison can never hold for
        n > 1 and this returns False for every prime too. False means
        "unknown", never "composite". Use
        ArithmeticOperators.is_prime() when the answer matters.
        """
        return self.resonance_minimum(n).is_local_minimum
