"""
Value records: NumberRecord, PageLocation, LagrangePoint, ArtifactReport.

These are the atoms handed upward to whatever consumes the core (lineage
graphs, simulations, query layers). All of them are pure values computed
from integers: frozen, comparable, no back-references, no identity beyond
the integer they describe.

Patterns are stored as tuples of 8 bools. Field index lists are sorted.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import json


@dataclass(frozen=True)
class PageLocation:
    """Where n sits in the 48-number page and 256-number cycle structure."""
    page: int
    offset: int
    cycle: int
    phase: int

    def to_dict(self):
        return {"page": self.page, "offset": self.offset,
                "cycle": self.cycle, "phase": self.phase}


class LagrangeType(Enum):
    PRIMARY = "primary"
    TRIBONACCI = "tribonacci"
    GOLDEN = "golden"
    DEEP = "deep"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class LagrangePoint:
    position: int
    resonance: float
    type: LagrangeType
    active_fields: tuple
    description: str

    def to_dict(self):
        return {
            "position": self.position,
            "resonance": self.resonance,
            "type": self.type.value,
            "active_fields": list(self.active_fields),
            "description": self.description,
        }

    def __repr__(self):
        return f"LagrangePoint({self.position}, {self.type.value})"


@dataclass(frozen=True)
class ArtifactReport:
    """
    The difference between a naive pattern and the actual one.

    vanishing: indices true in the naive pattern, false in the actual one
    emergent:  indices false in the naive pattern, true in the actual one

    For multiplication and addition the naive pattern is the OR of the
    operand patterns; for normalization it is the OR of the factor patterns.
    """
    naive: tuple
    actual: tuple
    vanishing: tuple = ()
    emergent: tuple = ()

    @property
    def is_clean(self) -> bool:
        """No field vanished and none emerged."""
        return not self.vanishing and not self.emergent

    @property
    def count(self) -> int:
        return len(self.vanishing) + len(self.emergent)

    def to_dict(self):
        return {
            "naive": list(self.naive),
            "actual": list(self.actual),
            "vanishing": list(self.vanishing),
            "emergent": list(self.emergent),
        }


@dataclass(frozen=True)
class NumberRecord:
    """
    Everything the core knows about one integer.

    This is the record that normalize() decomposes: a composite is a
    denormalized record, its prime factors are the normalized form.
    """
    value: int
    pattern: tuple
    resonance: float
    location: PageLocation
    signature: str
    active_fields: tuple = field(default=())

    @property
    def is_primitive(self) -> bool:
        """Exactly one field active (the powers of two below 256, mod 256)."""
        return len(self.active_fields) == 1

    def __repr__(self):
        return f"NumberRecord({self.value}: {self.signature})"

    def to_dict(self):
        return {
            "value": self.value,
            "pattern": list(self.pattern),
            "active_fields": list(self.active_fields),
            "resonance": self.resonance,
            "location": self.location.to_dict(),
            "signature": self.signature,
        }

    @classmethod
    def from_dict(cls, d):
        return cls(
            value=d["value"],
            pattern=tuple(d["pattern"]),
            resonance=d["resonance"],
            location=PageLocation(**d["location"]),
            signature=d["signature"],
            active_fields=tuple(d.get("active_fields", ())),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
