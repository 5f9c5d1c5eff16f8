from .fields import (
    FIELD_COUNT, CYCLE_SIZE, IDENTITY_TOLERANCE, CONSTITUTIONAL_PRIMES,
    FieldDefinition, FieldConstantTable, DEFAULT_FIELDS, DEFAULT_TABLE,
    verify_consistency,
)
from .activation import (
    field_byte, pattern_of, active_indices, indices_of, is_field_active,
    pattern_to_byte, byte_to_pattern, union_pattern, xor_pattern,
    pattern_string, field_signature,
)
from .records import PageLocation, LagrangeType, LagrangePoint, ArtifactReport, NumberRecord
from .cache import RecordCache
from .substrate import FieldSubstrate

__all__ = [
    "FIELD_COUNT", "CYCLE_SIZE", "IDENTITY_TOLERANCE", "CONSTITUTIONAL_PRIMES",
    "FieldDefinition", "FieldConstantTable", "DEFAULT_FIELDS", "DEFAULT_TABLE",
    "verify_consistency",
    "field_byte", "pattern_of", "active_indices", "indices_of", "is_field_active",
    "pattern_to_byte", "byte_to_pattern", "union_pattern", "xor_pattern",
    "pattern_string", "field_signature",
    "PageLocation", "LagrangeType", "LagrangePoint", "ArtifactReport", "NumberRecord",
    "RecordCache",
    "FieldSubstrate",
]
