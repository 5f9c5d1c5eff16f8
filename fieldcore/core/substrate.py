"""
Field substrate: layer 0.

Binds the activation functions to one constant table and checks that
table once, at construction. Everything above this layer asks the
substrate for patterns and constants instead of reaching for globals.
"""

import logging

from .fields import (
    FIELD_COUNT, DEFAULT_TABLE, FieldConstantTable, FieldDefinition,
    verify_consistency,
)
from .activation import (
    pattern_of, active_indices, is_field_active, check_field_index,
    field_signature,
)
from ..errors import FieldConsistencyError

logger = logging.getLogger(__name__)


class FieldSubstrate:

    def __init__(self, table: FieldConstantTable = DEFAULT_TABLE):
        if not verify_consistency(table):
            logger.error("Field constant table failed its consistency check: %r", table)
            raise FieldConsistencyError(
                "Field constant table is inconsistent: "
                "alpha4 * alpha5 must equal 1.0 and all alphas must be positive"
            )
        self.table = table

    @property
    def constants(self) -> tuple:
        return self.table.alphas

    @property
    def field_count(self) -> int:
        return FIELD_COUNT

    def pattern_of(self, n: int) -> tuple:
        return pattern_of(n)

    def active_indices(self, n: int) -> list:
        return active_indices(n)

    def is_field_active(self, n: int, index: int) -> bool:
        return is_field_active(n, index)

    def field(self, index: int) -> FieldDefinition:
        return self.table[check_field_index(index)]

    def constant(self, index: int) -> float:
        return self.field(index).alpha

    def field_name(self, index: int) -> str:
        return self.field(index).name

    def field_symbol(self, index: int) -> str:
        return self.field(index).symbol

    def field_description(self, index: int) -> str:
        return self.field(index).description

    def signature(self, n: int) -> str:
        return field_signature(pattern_of(n), self.table)

    def verify_consistency(self) -> bool:
        return verify_consistency(self.table)
