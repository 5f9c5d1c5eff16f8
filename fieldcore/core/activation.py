"""
Field activation: integer -> 8-bit pattern.

    b_i(n) = floor(|n| / 2^i) mod 2,   i = 0..7

A pattern is a tuple of eight bools, index 0 first. It depends only on
|n| mod 256, so pattern_of(-n) == pattern_of(n), and pattern_of(n) ==
pattern_of(n + 256k) whenever n and n + 256k are on the same side of
zero. Across zero the period breaks: pattern_of(-255) is pattern_of(255),
not pattern_of(1).
"""

from .fields import FIELD_COUNT, CYCLE_SIZE, DEFAULT_TABLE, FieldConstantTable
from ..errors import InvalidFieldIndex, InvalidPatternLength, InvalidByteValue


def field_byte(n: int) -> int:
    """The byte that drives the pattern: |n| mod 256."""
    return abs(n) % CYCLE_SIZE


def pattern_of(n: int) -> tuple:
    byte = field_byte(n)
    return tuple(((byte >> i) & 1) == 1 for i in range(FIELD_COUNT))


def active_indices(n: int) -> list:
    return indices_of(pattern_of(n))


def indices_of(pattern) -> list:
    """Sorted indices where a pattern is true."""
    return [i for i, active in enumerate(pattern) if active]


def check_field_index(index) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidFieldIndex(index)
    if index < 0 or index >= FIELD_COUNT:
        raise InvalidFieldIndex(index)
    return index


def is_field_active(n: int, index: int) -> bool:
    check_field_index(index)
    return pattern_of(n)[index]


def pattern_to_byte(pattern) -> int:
    if len(pattern) != FIELD_COUNT:
        raise InvalidPatternLength(len(pattern), FIELD_COUNT)
    byte = 0
    for i, active in enumerate(pattern):
        if active:
            byte |= 1 << i
    return byte


def byte_to_pattern(byte: int) -> tuple:
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise InvalidByteValue(byte)
    if byte < 0 or byte > 255:
        raise InvalidByteValue(byte)
    return tuple(((byte >> i) & 1) == 1 for i in range(FIELD_COUNT))


def union_pattern(*patterns) -> tuple:
    """Bitwise OR of any number of patterns; all-false for none."""
    return tuple(any(p[i] for p in patterns) for i in range(FIELD_COUNT))


def xor_pattern(a, b) -> tuple:
    return tuple(a[i] != b[i] for i in range(FIELD_COUNT))


def pattern_string(pattern) -> str:
    """'11100000' for 7: index 0 first, one character per field."""
    if len(pattern) != FIELD_COUNT:
        raise InvalidPatternLength(len(pattern), FIELD_COUNT)
    return "".join("1" if active else "0" for active in pattern)


def field_signature(pattern, table: FieldConstantTable = DEFAULT_TABLE) -> str:
    """
    Symbol signature of the active fields.

        7   -> "I+T+φ"
        48  -> "1/2π+2π"
        0   -> "∅"
    """
    active = indices_of(pattern)
    if not active:
        return "∅"
    return "+".join(table[i].symbol for i in active)
