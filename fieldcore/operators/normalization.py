"""
Normalization: prime factorization read as record decomposition.

A prime is a normalized record: it cannot be split further. A composite
is denormalized, and its pattern carries artifacts relative to the union
of its factors' patterns. Reconciliation reports them:

    vanishing -- in some factor's pattern, not in the original's
    emergent  -- in the original's pattern, in no factor's

Factoring is exact trial division up to sqrt(n). It is correct for every
n but slow for large n with two big prime factors; nothing here tries to
be clever about that.
"""

from dataclasses import dataclass, field

from ..core.records import ArtifactReport, NumberRecord


def trial_division(n: int) -> list:
    """
    Prime factors of n in non-decreasing order, with multiplicity.

    Empty for n < 2.
    """
    if n < 2:
        return []
    factors = []
    while n % 2 == 0:
        factors.append(2)
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 2
    if n > 1:
        factors.append(n)
    return factors


def is_prime(n: int) -> bool:
    """Exact primality by trial division."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


@dataclass(frozen=True)
class NormalizationStep:
    divisor: int
    result: int

    @property
    def operation(self) -> str:
        return f"divide by {self.divisor}"


@dataclass(frozen=True)
class Normalization:
    original: NumberRecord
    factors: tuple                  # NumberRecords, non-decreasing by value
    steps: tuple = field(default=())
    reconciliation: ArtifactReport = None

    @property
    def factor_values(self) -> list:
        return [f.value for f in self.factors]

    @property
    def is_normalized(self) -> bool:
        """The original was already prime."""
        return len(self.factors) == 1

    @property
    def vanishing(self) -> tuple:
        return self.reconciliation.vanishing

    @property
    def emergent(self) -> tuple:
        return self.reconciliation.emergent

    def to_dict(self):
        return {
            "original": self.original.to_dict(),
            "factors": [f.to_dict() for f in self.factors],
            "steps": [{"operation": s.operation, "result": s.result} for s in self.steps],
            "reconciliation": self.reconciliation.to_dict(),
        }


def division_steps(n: int, factors) -> tuple:
    steps = []
    remaining = n
    for factor in factors:
        remaining //= factor
        steps.append(NormalizationStep(factor, remaining))
    return tuple(steps)
