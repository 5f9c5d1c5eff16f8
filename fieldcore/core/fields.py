"""
The eight fields and their constant table.

Every integer activates a subset of eight fields, one per bit of
n mod 256. Each field carries a positive constant (its alpha). The table
is built once, frozen, and handed by reference to every component that
needs it.

The load-bearing identity is

    alpha4 * alpha5 = (1/2π) * 2π = 1

which gives 48 (fields 4,5) and 49 (fields 0,4,5) a resonance of exactly
one. That is where the 48-number page comes from.
"""

from dataclasses import dataclass

FIELD_COUNT = 8
CYCLE_SIZE = 256

# Tolerance for the alpha4 * alpha5 identity and for "resonance is exactly 1".
IDENTITY_TOLERANCE = 1e-15

# Primes the constants are encoded from.
CONSTITUTIONAL_PRIMES = (2, 5, 7, 23, 107, 211, 379, 1321, 7129)

# alpha6 = (4 * 7 * 7129) / 10**6
PHASE_ENCODING = (4 * 7 * 7129) / 1_000_000


@dataclass(frozen=True)
class FieldDefinition:
    """One column of the eight-field schema."""
    index: int
    alpha: float
    name: str
    symbol: str
    kind: str
    description: str

    @property
    def primitive(self) -> int:
        """The power of two whose pattern activates only this field."""
        return 1 << self.index

    def __repr__(self):
        return f"FieldDefinition({self.index}: {self.symbol}={self.alpha})"


@dataclass(frozen=True)
class FieldConstantTable:
    """Immutable, ordered table of the eight field definitions."""
    fields: tuple

    @property
    def alphas(self) -> tuple:
        return tuple(f.alpha for f in self.fields)

    @property
    def names(self) -> tuple:
        return tuple(f.name for f in self.fields)

    @property
    def symbols(self) -> tuple:
        return tuple(f.symbol for f in self.fields)

    def __len__(self):
        return len(self.fields)

    def __getitem__(self, index) -> FieldDefinition:
        return self.fields[index]

    def __iter__(self):
        return iter(self.fields)


DEFAULT_FIELDS = (
    FieldDefinition(0, 1.0, "identity", "I", "primary_key",
                    "Identity: unity and existence"),
    FieldDefinition(1, 1.8392867552141612, "tribonacci", "T", "relation",
                    "Tribonacci: recursion and growth"),
    FieldDefinition(2, 1.618033988749895, "golden", "φ", "recursive",
                    "Golden ratio: harmony and proportion"),
    FieldDefinition(3, 0.5, "half", "½", "binary_left",
                    "Half: duality and reflection"),
    FieldDefinition(4, 0.15915494309189535, "inv_freq", "1/2π", "inverse_transform",
                    "Inverse frequency: wavelength space"),
    FieldDefinition(5, 6.283185307179586, "freq", "2π", "forward_transform",
                    "Frequency: cyclic nature"),
    FieldDefinition(6, 0.199612, "phase", "θ", "state_coupling",
                    "Phase: interference patterns"),
    FieldDefinition(7, 0.014134725, "zeta", "ζ", "deep_pointer",
                    "Zeta: deep mathematical structure"),
)

DEFAULT_TABLE = FieldConstantTable(DEFAULT_FIELDS)


def verify_consistency(table: FieldConstantTable = DEFAULT_TABLE) -> bool:
    """
    Self-check of the constant table. Meant for start-up, not per call.

    Holds when the table has exactly eight fields, every alpha is strictly
    positive, alpha4 * alpha5 is one to within 1e-15, and the phase
    constant matches its constitutional encoding.
    """
    if len(table) != FIELD_COUNT:
        return False
    if [f.index for f in table] != list(range(FIELD_COUNT)):
        return False
    alphas = table.alphas
    if any(not (a > 0.0) for a in alphas):
        return False
    if abs(alphas[4] * alphas[5] - 1.0) >= IDENTITY_TOLERANCE:
        return False
    if abs(alphas[6] - PHASE_ENCODING) >= IDENTITY_TOLERANCE:
        return False
    return True
