"""
Invariant suite: the structural facts every FieldUniverse must satisfy.

Each entry in INVARIANTS is a description plus a check over a universe.
run_invariant_suite() evaluates them all, in the same shape as a proof
suite: name -> {holds, description, detail}. Checks sample a fixed,
small range, so the suite runs in well under a second.
"""

import math

from .core.activation import pattern_to_byte
from .core.fields import CYCLE_SIZE, IDENTITY_TOLERANCE
from .core.records import LagrangeType
from .topology.pages import PAGE_SIZE
from .topology.lagrange import PRIMARY_LAGRANGE_POINTS

SAMPLE_RANGE = range(0, 2 * CYCLE_SIZE)
ARITHMETIC_RANGE = range(0, 40)


def _constant_identity(universe):
    alphas = universe.substrate.constants
    product = alphas[4] * alphas[5]
    return abs(product - 1.0) < IDENTITY_TOLERANCE, f"alpha4 * alpha5 = {product!r}"


def _pattern_periodicity(universe):
    for n in SAMPLE_RANGE:
        if universe.pattern_of(n) != universe.pattern_of(n + CYCLE_SIZE):
            return False, f"pattern({n}) != pattern({n + CYCLE_SIZE})"
        if universe.pattern_of(n) != universe.pattern_of(-n):
            return False, f"pattern({n}) != pattern({-n})"
    return True, f"checked n in [0, {SAMPLE_RANGE.stop})"


def _byte_round_trip(universe):
    for n in SAMPLE_RANGE:
        if pattern_to_byte(universe.pattern_of(n)) != n % CYCLE_SIZE:
            return False, f"byte(pattern({n})) != {n % CYCLE_SIZE}"
    return True, "pattern and byte agree"


def _resonance_bounded(universe):
    low, high = universe.resonance_bounds()
    for n in SAMPLE_RANGE:
        r = universe.resonance(n)
        if not (0 < r and low <= r <= high and math.isfinite(r)):
            return False, f"R({n}) = {r} outside [{low}, {high}]"
    return True, f"R in [{low:.6g}, {high:.6g}]"


def _primary_phases(universe):
    phases = universe.topology.primary_phases()
    return phases == set(PRIMARY_LAGRANGE_POINTS), f"primary phases {sorted(phases)}"


def _perfect_resonance(universe):
    r48, r49 = universe.resonance(48), universe.resonance(49)
    ok = (abs(r48 - 1.0) < 1e-10 and abs(r49 - 1.0) < 1e-10
          and universe.topology.detect_type(48) is LagrangeType.PRIMARY
          and universe.topology.detect_type(49) is LagrangeType.PRIMARY)
    return ok, f"R(48) = {r48!r}, R(49) = {r49!r}"


def _page_location(universe):
    for n in SAMPLE_RANGE:
        loc = universe.locate(n)
        if loc.page * PAGE_SIZE + loc.offset != n or loc.cycle * CYCLE_SIZE + loc.phase != n:
            return False, f"location of {n} does not recompose: {loc}"
    return True, "page and cycle decompositions recompose"


def _artifact_partition(universe):
    for a in ARITHMETIC_RANGE:
        for b in ARITHMETIC_RANGE:
            for result in (universe.multiply(a, b), universe.add(a, b)):
                report = result.artifacts
                naive, actual = report.naive, report.actual
                if any(not naive[i] or actual[i] for i in report.vanishing):
                    return False, f"{result.operation}({a}, {b}) has a bad vanishing field"
                if any(naive[i] or not actual[i] for i in report.emergent):
                    return False, f"{result.operation}({a}, {b}) has a bad emergent field"
    return True, "vanishing and emergent fields match their definitions"


def _known_artifacts(universe):
    result = universe.multiply(7, 11)
    ok = result.result == 77 and result.vanishing == (1,) and result.emergent == (6,)
    return ok, f"7 x 11: vanishing {result.vanishing}, emergent {result.emergent}"


def _normalization_product(universe):
    for n in range(2, 300):
        factors = universe.factorize(n)
        if math.prod(factors) != n or any(not universe.is_prime(f) for f in factors):
            return False, f"factorize({n}) = {factors}"
        if factors != sorted(factors):
            return False, f"factors of {n} not sorted: {factors}"
    return True, "factorizations multiply back and are prime"


def _search_results_classify(universe):
    for n in range(0, 120):
        point = universe.nearest_lagrange_point(n)
        if point is not None and universe.topology.detect_type(point.position) is None:
            return False, f"nearest({n}) returned unclassified {point.position}"
        path = universe.gradient_descent(n)
        if path[0] != n:
            return False, f"descent from {n} starts at {path[0]}"
    return True, "search results classify, descent paths start at the origin"


INVARIANTS = {
    "constant_identity": {
        "description": "alpha4 * alpha5 = 1 within 1e-15",
        "check": _constant_identity,
    },
    "pattern_periodicity": {
        "description": "Patterns repeat every 256 and ignore sign",
        "check": _pattern_periodicity,
    },
    "byte_round_trip": {
        "description": "A pattern read back as a byte is |n| mod 256",
        "check": _byte_round_trip,
    },
    "resonance_bounded": {
        "description": "Resonance is positive and within the exact bounds over all patterns",
        "check": _resonance_bounded,
    },
    "primary_phases": {
        "description": "Primary Lagrange points are exactly phases 0, 1, 48, 49",
        "check": _primary_phases,
    },
    "perfect_resonance": {
        "description": "R(48) = R(49) = 1 and both are primary",
        "check": _perfect_resonance,
    },
    "page_location": {
        "description": "n = 48 * page + offset = 256 * cycle + phase",
        "check": _page_location,
    },
    "artifact_partition": {
        "description": "Vanishing fields were naive-only, emergent fields are actual-only",
        "check": _artifact_partition,
    },
    "known_artifacts": {
        "description": "7 x 11 = 77 loses field 1 and gains field 6",
        "check": _known_artifacts,
    },
    "normalization_product": {
        "description": "Prime factors are sorted, prime, and multiply back to n",
        "check": _normalization_product,
    },
    "search_results_classify": {
        "description": "Nearest-point search only returns Lagrange points",
        "check": _search_results_classify,
    },
}


def run_invariant_suite(universe=None, verbose=True) -> dict:
    """
    Check every invariant against a universe (the default one if None).

    Returns dict: invariant_name -> {holds, description, detail}
    """
    if universe is None:
        from .universe import default_universe  # import here to avoid circularity
        universe = default_universe()

    results = {}
    for name, inv in INVARIANTS.items():
        holds, detail = inv["check"](universe)
        results[name] = {
            "holds": holds,
            "description": inv["description"],
            "detail": detail,
        }
        if verbose:
            status = "HOLDS" if holds else "FAILS"
            print(f"  {status:>5s}  {name}: {detail}")
    return results


def print_invariant_results(results: dict):
    """Pretty-print the invariant suite results."""
    print(f"\n{'='*60}")
    print("FIELD CORE: Invariant Suite Results")
    print(f"{'='*60}")

    all_hold = True
    for name, r in results.items():
        status = "HOLDS" if r["holds"] else "FAILS"
        if not r["holds"]:
            all_hold = False
        print(f"  {status:>5s}  {r['description']}")

    print(f"{'='*60}")
    if all_hold:
        print("  ALL INVARIANTS HOLD.")
    else:
        print("  SOME INVARIANTS FAILED. Check the constant table.")
    print(f"{'='*60}")
