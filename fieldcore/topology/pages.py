"""
Page structure.

A page is 48 consecutive integers. The size comes from the 4x5 field
identity: 48 = 0b00110000 activates exactly fields 4 and 5, whose
constants multiply to one. A cycle is 256 consecutive integers, one full
period of the field pattern.

    page   = n // 48        offset = n % 48
    cycle  = n // 256       phase  = n % 256

Python floor semantics apply to negative n, so offset and phase are
always non-negative.
"""

from dataclasses import dataclass
import math

from ..core.fields import CYCLE_SIZE
from ..core.records import PageLocation

PAGE_SIZE = 48


def locate(n: int) -> PageLocation:
    return PageLocation(
        page=n // PAGE_SIZE,
        offset=n % PAGE_SIZE,
        cycle=n // CYCLE_SIZE,
        phase=n % CYCLE_SIZE,
    )


def page_numbers(page: int) -> list:
    start = page * PAGE_SIZE
    return list(range(start, start + PAGE_SIZE))


def is_page_boundary(n: int) -> bool:
    """First or last slot of a page."""
    return n % PAGE_SIZE in (0, PAGE_SIZE - 1)


def next_page_boundary(n: int) -> int:
    """
    The next boundary at or after n.

    A page start is its own boundary, the page end hands over to the next
    page's start, anything in between moves to the end of its page.
    """
    page, offset = divmod(n, PAGE_SIZE)
    if offset == 0:
        return n
    if offset == PAGE_SIZE - 1:
        return (page + 1) * PAGE_SIZE
    return page * PAGE_SIZE + PAGE_SIZE - 1


def navigate_pages(current: int, target: int) -> list:
    """Pages visited walking from current to target, both ends included."""
    step = 1 if target >= current else -1
    return list(range(current, target + step, step))


@dataclass(frozen=True)
class PageResonanceStats:
    mean: float
    variance: float
    skew: float
    kurtosis: float   # excess kurtosis (normal = 0)
    min: float
    max: float


def moment_stats(values) -> PageResonanceStats:
    """
    Population moments of a non-empty sequence.

    Skew is the third standardized moment, kurtosis the fourth minus 3.
    Both are 0 when the values have no spread.
    """
    values = list(values)
    count = len(values)
    mean = math.fsum(values) / count
    centered = [v - mean for v in values]
    variance = math.fsum(c * c for c in centered) / count
    std = math.sqrt(variance)
    if std > 0:
        skew = math.fsum((c / std) ** 3 for c in centered) / count
        kurtosis = math.fsum((c / std) ** 4 for c in centered) / count - 3
    else:
        skew = 0.0
        kurtosis = 0.0
    return PageResonanceStats(
        mean=mean,
        variance=variance,
        skew=skew,
        kurtosis=kurtosis,
        min=min(values),
        max=max(values),
    )
