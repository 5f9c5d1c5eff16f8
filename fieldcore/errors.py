"""
Error conditions raised by the field core.

Everything here is raised synchronously to the immediate caller. Nothing
in fieldcore retries: every function is deterministic, so a retry would
reproduce the same result.
"""


class FieldCoreError(Exception):
    """Base class for all fieldcore errors."""


class InvalidFieldIndex(FieldCoreError, ValueError):
    def __init__(self, index):
        self.index = index
        super().__init__(f"Invalid field index: {index!r}, must be 0-7")


class InvalidPatternLength(FieldCoreError, ValueError):
    def __init__(self, length, expected=8):
        self.length = length
        self.expected = expected
        super().__init__(f"Invalid pattern length: {length}, expected {expected}")


class InvalidByteValue(FieldCoreError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid byte value: {value!r}, must be 0-255")


class DegenerateNormalization(FieldCoreError, ValueError):
    """normalize() was asked to decompose something below 2."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Cannot normalize {value}: no prime decomposition below 2")


class FieldDivisionByZero(FieldCoreError, ZeroDivisionError):
    def __init__(self, operation="Division"):
        self.operation = operation
        super().__init__(f"{operation} by zero")


class FieldConsistencyError(FieldCoreError):
    """
    The constant table or a start-up invariant failed its self-check.

    Page size 48 and the primary Lagrange points at 48/49 both depend on
    alpha4 * alpha5 == 1, so nothing built on a broken table is usable.
    """
