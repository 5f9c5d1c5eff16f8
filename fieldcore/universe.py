"""
FieldUniverse: the four layers wired together over one constant table.

    substrate  -> dynamics  -> topology  -> operators

Each layer only sees the ones below it. The universe owns them, checks
the start-up invariants once, and is the usual entry point:

    universe = FieldUniverse()
    universe.record(77)
    universe.multiply(7, 11).emergent        # (6,)
    universe.nearest_lagrange_point(10)      # L9, secondary

Everything is deterministic and read-only after construction, so one
instance can be shared freely between threads.
"""

import logging
import threading
from typing import Optional

from .core.cache import RecordCache
from .core.fields import DEFAULT_TABLE, FieldConstantTable
from .core.activation import pattern_string
from .core.records import NumberRecord
from .core.substrate import FieldSubstrate
from .errors import FieldConsistencyError
from .resonance.dynamics import ResonanceDynamics
from .topology.pages import PAGE_SIZE
from .topology.lagrange import PRIMARY_LAGRANGE_POINTS, DEFAULT_SEARCH_RADIUS, DEFAULT_MAX_STEPS
from .topology.space import PageTopology
from .operators.arithmetic import ArithmeticOperators

logger = logging.getLogger(__name__)


class FieldUniverse:

    def __init__(self, table: FieldConstantTable = DEFAULT_TABLE,
                 cache: Optional[RecordCache] = None):
        self.substrate = FieldSubstrate(table)
        self.dynamics = ResonanceDynamics(self.substrate)
        self.topology = PageTopology(self.substrate, self.dynamics)
        self.cache = cache if cache is not None else RecordCache()
        self.operators = ArithmeticOperators(
            self.substrate, self.dynamics, self.topology, cache=self.cache,
        )
        self._check_primary_phases()

    def _check_primary_phases(self):
        phases = self.topology.primary_phases()
        if phases != set(PRIMARY_LAGRANGE_POINTS):
            logger.error(
                "Primary Lagrange phases %s do not match the expected %s",
                sorted(phases), list(PRIMARY_LAGRANGE_POINTS),
            )
            raise FieldConsistencyError(
                f"Primary Lagrange points at phases {sorted(phases)}, "
                f"expected {list(PRIMARY_LAGRANGE_POINTS)}"
            )

    # --- Records ---

    def record(self, n: int) -> NumberRecord:
        return self.operators.record(n)

    def search_patterns(self, field_pattern: Optional[str] = None,
                        resonance_range: Optional[tuple] = None,
                        page_range: tuple = (0, 10)) -> list:
        """
        Records on pages page_range[0]..page_range[1] (inclusive) that match.

        field_pattern is an 8-character string like "11100000", field 0
        first. resonance_range is an inclusive (low, high) pair. Either
        filter may be omitted.
        """
        first_page, last_page = page_range
        low, high = resonance_range if resonance_range is not None else (None, None)
        matches = []
        for n in range(first_page * PAGE_SIZE, (last_page + 1) * PAGE_SIZE):
            record = self.record(n)
            if field_pattern is not None and pattern_string(record.pattern) != field_pattern:
                continue
            if resonance_range is not None and not (low <= record.resonance <= high):
                continue
            matches.append(record)
        return matches

    # --- Substrate ---

    def pattern_of(self, n: int) -> tuple:
        return self.substrate.pattern_of(n)

    def active_indices(self, n: int) -> list:
        return self.substrate.active_indices(n)

    def constants(self) -> tuple:
        return self.substrate.constants

    # --- Resonance ---

    def resonance(self, n: int) -> float:
        return self.dynamics.calculate_resonance(n)

    def resonance_bounds(self) -> tuple:
        return self.dynamics.resonance_bounds()

    def resonance_signature(self, n: int):
        return self.dynamics.resonance_signature(n)

    # --- Topology ---

    def locate(self, n: int):
        return self.topology.locate(n)

    def lagrange_point(self, n: int):
        return self.topology.lagrange_point(n)

    def find_lagrange_points(self, start: int, end: int) -> list:
        return self.topology.find_lagrange_points(start, end)

    def nearest_lagrange_point(self, n: int, radius: int = DEFAULT_SEARCH_RADIUS):
        return self.topology.nearest_lagrange_point(n, radius)

    def gradient_descent(self, n: int, max_steps: int = DEFAULT_MAX_STEPS) -> list:
        return self.topology.gradient_descent(n, max_steps)

    def page_info(self, page: int):
        return self.topology.page_info(page)

    # --- Operators ---

    def multiply(self, a: int, b: int):
        return self.operators.multiply(a, b)

    def add(self, a: int, b: int):
        return self.operators.add(a, b)

    def normalize(self, n: int):
        return self.operators.normalize(n)

    def factorize(self, n: int) -> list:
        return self.operators.factorize(n)

    def is_prime(self, n: int) -> bool:
        return self.operators.is_prime(n)


def create_universe(table: FieldConstantTable = DEFAULT_TABLE,
                    cache_size: Optional[int] = None) -> FieldUniverse:
    """A fresh universe with its own bounded (or unbounded) record cache."""
    return FieldUniverse(table, cache=RecordCache(max_size=cache_size))


_default = None
_default_lock = threading.Lock()


def default_universe() -> FieldUniverse:
    """The shared process-wide universe over the default table, built on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = FieldUniverse()
    return _default
