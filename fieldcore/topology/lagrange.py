"""
Lagrange points: positions classified as structurally stable.

Classification rules, first match wins:

    1. PRIMARY     |R - 1| < 1e-15
    2. TRIBONACCI  field 1 on, field 2 off, R > 1.5
    3. GOLDEN      field 2 on, field 1 off, R > 1.4
    4. DEEP        field 7 on
    5. SECONDARY   R within 0.01 of 0.5, φ, π or 2π
    otherwise      not a Lagrange point (None)

Primary points sit at n mod 256 in {0, 1, 48, 49}: the empty pattern,
the identity field alone, and the 4x5 pair with and without identity.
"""

import math

from ..core.fields import IDENTITY_TOLERANCE
from ..core.records import LagrangeType, LagrangePoint
from ..resonance.dynamics import GOLDEN_RATIO

PRIMARY_LAGRANGE_POINTS = (0, 1, 48, 49)

SECONDARY_WELLS = (0.5, GOLDEN_RATIO, math.pi, 2 * math.pi)
SECONDARY_TOLERANCE = 0.01

TRIBONACCI_THRESHOLD = 1.5
GOLDEN_THRESHOLD = 1.4

DEFAULT_SEARCH_RADIUS = 100
DEFAULT_MAX_STEPS = 50

BASE_GRAVITY = {
    LagrangeType.PRIMARY:    1.0,
    LagrangeType.TRIBONACCI: 0.7,
    LagrangeType.GOLDEN:     0.7,
    LagrangeType.DEEP:       0.8,
    LagrangeType.SECONDARY:  0.5,
}


def classify(pattern, resonance: float):
    """Apply the five rules to a pattern and its resonance. Returns a LagrangeType or None."""
    if abs(resonance - 1.0) < IDENTITY_TOLERANCE:
        return LagrangeType.PRIMARY
    if pattern[1] and not pattern[2] and resonance > TRIBONACCI_THRESHOLD:
        return LagrangeType.TRIBONACCI
    if pattern[2] and not pattern[1] and resonance > GOLDEN_THRESHOLD:
        return LagrangeType.GOLDEN
    if pattern[7]:
        return LagrangeType.DEEP
    if any(abs(resonance - well) < SECONDARY_TOLERANCE for well in SECONDARY_WELLS):
        return LagrangeType.SECONDARY
    return None


def describe_lagrange_point(position: int, kind: LagrangeType, symbols: list) -> str:
    fields = ",".join(symbols)
    if kind is LagrangeType.PRIMARY:
        if position == 0:
            return "L0: The void - empty field state"
        if position == 1:
            return "L1: Unity - pure identity field"
        phase = position % 256
        if phase in (48, 49):
            return f"L{phase}: Perfect resonance - fields {fields}"
        return f"Primary Lagrange point - fields {fields}"
    if kind is LagrangeType.TRIBONACCI:
        return f"Tribonacci well - recursive patterns, fields {fields}"
    if kind is LagrangeType.GOLDEN:
        return f"Golden well - harmonic proportions, fields {fields}"
    if kind is LagrangeType.DEEP:
        return f"Deep well - Zeta structure, fields {fields}"
    return f"Secondary resonance well - fields {fields}"


def nearest_reference_point(n: int, references=PRIMARY_LAGRANGE_POINTS) -> int:
    """Closest reference by absolute distance; the earlier one wins a tie."""
    best = references[0]
    for point in references[1:]:
        if abs(n - point) < abs(n - best):
            best = point
    return best


def lagrange_gravity(point: LagrangePoint, from_position: int) -> float:
    """
    Attraction of a Lagrange point felt at from_position, in (0, 1].

    Deeper wells pull harder; the pull falls off as 1 / (1 + 0.1 * distance).
    """
    distance = abs(from_position - point.position)
    if distance == 0:
        return 1.0
    return BASE_GRAVITY[point.type] / (1 + distance * 0.1)
