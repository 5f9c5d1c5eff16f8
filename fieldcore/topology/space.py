"""
Page topology: layer 2.

Locates integers in the page/cycle structure, classifies Lagrange points,
and runs the two bounded searches over them:

    nearest_lagrange_point  -- outward linear scan, forward before backward
    gradient_descent        -- fixed-direction walk toward the nearest
                               known primary point

Classification is not monotonic in distance, so neither search has a
closed form. Both are bounded loops that report exhaustion (None, or a
path that ends where max_steps ran out) rather than raising.
"""

from dataclasses import dataclass
import logging
from typing import Optional

from ..core.activation import indices_of
from ..core.fields import CYCLE_SIZE
from ..core.records import LagrangeType, LagrangePoint, PageLocation
from ..core.substrate import FieldSubstrate
from ..resonance.dynamics import ResonanceDynamics, resonance_of_pattern
from .pages import (
    PAGE_SIZE, locate, page_numbers, moment_stats, PageResonanceStats,
)
from .lagrange import (
    PRIMARY_LAGRANGE_POINTS, DEFAULT_SEARCH_RADIUS, DEFAULT_MAX_STEPS,
    classify, describe_lagrange_point, nearest_reference_point,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageInfo:
    page: int
    start: int
    end: int
    stats: PageResonanceStats
    average_active_fields: float


@dataclass(frozen=True)
class TopologyAnalysis:
    page_count: int
    lagrange_points: tuple
    average_resonance: float
    resonance_variance: float
    primary_count: int
    page_utilization: float


class PageTopology:

    def __init__(self, substrate: FieldSubstrate, dynamics: ResonanceDynamics):
        self.substrate = substrate
        self.dynamics = dynamics

    # --- Location ---

    def locate(self, n: int) -> PageLocation:
        return locate(n)

    def page_numbers(self, page: int) -> list:
        return page_numbers(page)

    # --- Classification ---

    def detect_type(self, n: int) -> Optional[LagrangeType]:
        pattern = self.substrate.pattern_of(n)
        return classify(pattern, resonance_of_pattern(pattern, self.substrate.constants))

    def is_lagrange_point(self, n: int) -> bool:
        return self.detect_type(n) is not None

    def lagrange_point(self, n: int) -> Optional[LagrangePoint]:
        """The full LagrangePoint at n, or None if n is not one."""
        pattern = self.substrate.pattern_of(n)
        resonance = resonance_of_pattern(pattern, self.substrate.constants)
        kind = classify(pattern, resonance)
        if kind is None:
            return None
        active = indices_of(pattern)
        symbols = [self.substrate.field_symbol(i) for i in active]
        return LagrangePoint(
            position=n,
            resonance=resonance,
            type=kind,
            active_fields=tuple(active),
            description=describe_lagrange_point(n, kind, symbols),
        )

    def find_lagrange_points(self, start: int, end: int) -> list:
        """Every Lagrange point in [start, end], in order."""
        points = []
        for n in range(start, end + 1):
            point = self.lagrange_point(n)
            if point is not None:
                points.append(point)
        return points

    def primary_phases(self) -> set:
        """Phases in one cycle that classify as PRIMARY."""
        return {b for b in range(CYCLE_SIZE)
                if self.detect_type(b) is LagrangeType.PRIMARY}

    # --- Searches ---

    def nearest_lagrange_point(self, n: int, radius: int = DEFAULT_SEARCH_RADIUS):
        """
        n itself if it classifies, else the first hit scanning outward.

        At each distance d = 1..radius the forward position n+d is tried
        before the backward one n-d, and n-d is tried only while n >= d.
        From n >= 0 the scan never goes below zero. From negative n the
        scan runs forward only, through positions that stay negative until
        it passes zero; those classify by |n|. Returns None once the radius
        is exhausted.
        """
        point = self.lagrange_point(n)
        if point is not None:
            return point

        for distance in range(1, radius + 1):
            point = self.lagrange_point(n + distance)
            if point is not None:
                return point
            if n >= distance:
                point = self.lagrange_point(n - distance)
                if point is not None:
                    return point

        logger.debug("No Lagrange point within radius %d of %d", radius, n)
        return None

    def gradient_descent(self, n: int, max_steps: int = DEFAULT_MAX_STEPS) -> list:
        """
        Walk from n toward the nearest known primary point.

        The target is whichever of {0, 1, 48, 49} is closest to n, and the
        direction is fixed once. The walk stops on the first position that
        classifies, on reaching the target, or after max_steps moves. The
        path always starts with n; it is exactly [n] when n already
        classifies.

        This approximates descent by distance to a known point, not by the
        local slope of resonance.
        """
        path = [n]
        if self.is_lagrange_point(n):
            return path

        target = nearest_reference_point(n, PRIMARY_LAGRANGE_POINTS)
        step = 1 if n < target else -1
        current = n
        for _ in range(max_steps):
            if current == target:
                break
            current += step
            path.append(current)
            if self.is_lagrange_point(current):
                break
        return path

    # --- Page statistics ---

    def page_resonance_stats(self, page: int) -> PageResonanceStats:
        return moment_stats(self.dynamics.calculate_resonance(n)
                            for n in page_numbers(page))

    def page_info(self, page: int) -> PageInfo:
        numbers = page_numbers(page)
        active = sum(len(self.substrate.active_indices(n)) for n in numbers)
        return PageInfo(
            page=page,
            start=numbers[0],
            end=numbers[-1],
            stats=self.page_resonance_stats(page),
            average_active_fields=active / len(numbers),
        )

    def analyze_range(self, start: int, end: int) -> TopologyAnalysis:
        """
        Page count, Lagrange points and resonance moments for [start, end].

        Utilization is the share of the touched pages' slots that fall
        inside the range.
        """
        if end < start:
            raise ValueError(f"Empty range: start {start} > end {end}")

        first_page = start // PAGE_SIZE
        last_page = end // PAGE_SIZE
        page_count = last_page - first_page + 1

        points = self.find_lagrange_points(start, end)
        primary = sum(1 for p in points if p.type is LagrangeType.PRIMARY)

        resonances = [self.dynamics.calculate_resonance(n) for n in range(start, end + 1)]
        stats = moment_stats(resonances)

        return TopologyAnalysis(
            page_count=page_count,
            lagrange_points=tuple(points),
            average_resonance=stats.mean,
            resonance_variance=stats.variance,
            primary_count=primary,
            page_utilization=len(resonances) / (page_count * PAGE_SIZE),
        )
