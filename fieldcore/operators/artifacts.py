"""
Denormalization artifacts.

When two numbers combine, the naive expectation is that the result keeps
every field either operand had: the bitwise OR of their patterns. Binary
carries do not respect that. The actual result pattern is just
pattern_of(result), and the mismatch splits into

    vanishing -- in the naive union, missing from the result
    emergent  -- absent from the union, present in the result

Example: 7 = {0,1,2}, 11 = {0,1,3}, union {0,1,2,3}.
77 = 0b01001101 = {0,2,3,6}, so field 1 vanishes and field 6 emerges.
"""

from dataclasses import dataclass

from ..core.activation import union_pattern, xor_pattern
from ..core.fields import FIELD_COUNT
from ..core.records import ArtifactReport


def compare_patterns(naive, actual) -> ArtifactReport:
    vanishing = tuple(i for i in range(FIELD_COUNT) if naive[i] and not actual[i])
    emergent = tuple(i for i in range(FIELD_COUNT) if actual[i] and not naive[i])
    return ArtifactReport(tuple(naive), tuple(actual), vanishing, emergent)


def operation_artifacts(operand_patterns, result_pattern) -> ArtifactReport:
    """Artifacts of an operation against the OR of its operand patterns."""
    return compare_patterns(union_pattern(*operand_patterns), result_pattern)


def carry_pattern(pattern_a, pattern_b, result_pattern) -> tuple:
    """
    The carry operator C(a, b).

    Marks each field where the result differs from a XOR b, i.e. where the
    arithmetic did something other than toggle bits independently.
    """
    return xor_pattern(xor_pattern(pattern_a, pattern_b), result_pattern)


@dataclass(frozen=True)
class FieldTransition:
    """
    What one field did during an operation.

    Addition kinds:        preserved, created, destroyed, transformed
    Multiplication kinds:  simple, vanishing, emergent, interference
    """
    field: int
    before_a: bool
    before_b: bool
    after: bool
    kind: str
    carry: bool = False


def merger_transitions(pattern_a, pattern_b, result_pattern) -> list:
    """Per-field transitions for addition."""
    transitions = []
    for i in range(FIELD_COUNT):
        a, b, after = pattern_a[i], pattern_b[i], result_pattern[i]
        if a and b and after:
            kind = "preserved"
        elif not a and not b and after:
            kind = "created"
        elif (a or b) and not after:
            kind = "destroyed"
        else:
            kind = "transformed"
        transitions.append(FieldTransition(i, a, b, after, kind))
    return transitions


# Complexity weight each multiplication transition adds.
ENTANGLEMENT_WEIGHTS = {"simple": 0, "interference": 1, "vanishing": 2, "emergent": 3}


def entanglement_transitions(pattern_a, pattern_b, result_pattern, carry) -> tuple:
    """
    Per-field transitions for multiplication, plus their total complexity.

    A field without a carry bit is "simple". With one, it either vanished,
    emerged, or interfered in some other way.
    """
    transitions = []
    complexity = 0
    for i in range(FIELD_COUNT):
        a, b, after = pattern_a[i], pattern_b[i], result_pattern[i]
        if not carry[i]:
            kind = "simple"
        elif (a or b) and not after:
            kind = "vanishing"
        elif not a and not b and after:
            kind = "emergent"
        else:
            kind = "interference"
        complexity += ENTANGLEMENT_WEIGHTS[kind]
        transitions.append(FieldTransition(i, a, b, after, kind, carry=carry[i]))
    return transitions, complexity
