"""
fieldcore: integers as records in a deterministic eight-field structure.

Every integer n carries
    - a field pattern: the eight bits of |n| mod 256
    - a resonance: the product of the constants of its active fields
    - a page location: 48-wide pages, 256-wide cycles
    - possibly a Lagrange classification (primary, tribonacci, golden,
      deep, secondary)

Arithmetic is exact. What the operators add is an account of the fields
that vanish or emerge relative to the naive union of operand patterns.

Usage:
    from fieldcore import FieldUniverse
    universe = FieldUniverse()
    universe.multiply(7, 11).emergent      # (6,)
    universe.normalize(12).factor_values   # [2, 2, 3]
"""

from .errors import (
    FieldCoreError, InvalidFieldIndex, InvalidPatternLength, InvalidByteValue,
    DegenerateNormalization, FieldDivisionByZero, FieldConsistencyError,
)
from .core import (
    FIELD_COUNT, CYCLE_SIZE, DEFAULT_TABLE, FieldConstantTable, FieldDefinition,
    FieldSubstrate, RecordCache, NumberRecord, PageLocation, LagrangeType,
    LagrangePoint, ArtifactReport, pattern_of, pattern_to_byte, byte_to_pattern,
)
from .resonance import ResonanceDynamics, field_interference, phase_relationship
from .topology import (
    PAGE_SIZE, PRIMARY_LAGRANGE_POINTS, PageTopology, lagrange_gravity,
)
from .operators import ArithmeticOperators, OperationResult, Normalization
from .universe import FieldUniverse, create_universe, default_universe
from .invariants import INVARIANTS, run_invariant_suite, print_invariant_results
from .reporting import print_record, print_artifacts, print_lagrange_points, print_page_info

__all__ = [
    "FieldCoreError", "InvalidFieldIndex", "InvalidPatternLength", "InvalidByteValue",
    "DegenerateNormalization", "FieldDivisionByZero", "FieldConsistencyError",
    "FIELD_COUNT", "CYCLE_SIZE", "DEFAULT_TABLE", "FieldConstantTable", "FieldDefinition",
    "FieldSubstrate", "RecordCache", "NumberRecord", "PageLocation", "LagrangeType",
    "LagrangePoint", "ArtifactReport", "pattern_of", "pattern_to_byte", "byte_to_pattern",
    "ResonanceDynamics", "field_interference", "phase_relationship",
    "PAGE_SIZE", "PRIMARY_LAGRANGE_POINTS", "PageTopology", "lagrange_gravity",
    "ArithmeticOperators", "OperationResult", "Normalization",
    "FieldUniverse", "create_universe", "default_universe",
    "INVARIANTS", "run_invariant_suite", "print_invariant_results",
    "print_record", "print_artifacts", "print_lagrange_points", "print_page_info",
]
