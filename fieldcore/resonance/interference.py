"""
Field interference between two patterns.

A simple model of how fields combine when two numbers meet:

    both active, field 4 or 5   -> cancels (1/2π and 2π annihilate)
    both active, other field    -> stays (constructive)
    exactly one active          -> stays (superposition)
    neither active              -> stays off

This is a pattern-level model only. The exact, arithmetic-level answer
to "what happened to the fields" lives in fieldcore.operators.
"""

from dataclasses import dataclass
import math

from ..core.fields import FIELD_COUNT
from ..errors import InvalidPatternLength

CANCELLING_FIELDS = (4, 5)


@dataclass(frozen=True)
class InterferenceResult:
    pattern: tuple
    cancelled: tuple
    interference_type: str   # "constructive" | "destructive" | "mixed"
    coherence: float         # active in result / active in both inputs


def _check_lengths(a, b):
    for p in (a, b):
        if len(p) != FIELD_COUNT:
            raise InvalidPatternLength(len(p), FIELD_COUNT)


def field_interference(a, b) -> InterferenceResult:
    _check_lengths(a, b)

    result = []
    cancelled = []
    constructive = 0
    for i in range(FIELD_COUNT):
        if a[i] and b[i]:
            if i in CANCELLING_FIELDS:
                result.append(False)
                cancelled.append(i)
            else:
                result.append(True)
                constructive += 1
        else:
            result.append(bool(a[i] or b[i]))

    if not cancelled:
        kind = "constructive"
    elif constructive == 0:
        kind = "destructive"
    else:
        kind = "mixed"

    total_active = sum(a) + sum(b)
    coherence = sum(result) / total_active if total_active else 1.0
    return InterferenceResult(tuple(result), tuple(cancelled), kind, coherence)


def will_destructively_interfere(a, b) -> bool:
    """Both patterns carry the full 4/5 pair, so the pair cancels outright."""
    _check_lengths(a, b)
    return all(a[i] and b[i] for i in CANCELLING_FIELDS)


def phase_relationship(a, b) -> float:
    """
    Angle in radians between two patterns read as 0/1 vectors.

    0 means identical direction, π/2 means no shared fields. Returns 0 when
    either pattern is empty.
    """
    _check_lengths(a, b)
    dot = sum(1 for i in range(FIELD_COUNT) if a[i] and b[i])
    norm_a = math.sqrt(sum(a))
    norm_b = math.sqrt(sum(b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    cosine = dot / (norm_a * norm_b)
    return math.acos(max(-1.0, min(1.0, cosine)))
