"""
Reporting utilities.
"""

from .core.activation import pattern_string
from .core.records import ArtifactReport, NumberRecord


def print_record(record: NumberRecord):
    """Print one number's pattern, resonance and location."""
    loc = record.location
    print(f"\n{'='*60}")
    print(f"Number: {record.value}")
    print(f"  Pattern:   {pattern_string(record.pattern)}  ({record.signature})")
    print(f"  Resonance: {record.resonance:.10f}")
    print(f"  Page {loc.page}, offset {loc.offset} | cycle {loc.cycle}, phase {loc.phase}")
    print(f"{'='*60}")


def print_artifacts(operation: str, report: ArtifactReport):
    print(f"\n{operation}")
    print(f"  Naive:  {pattern_string(report.naive)}")
    print(f"  Actual: {pattern_string(report.actual)}")
    if report.is_clean:
        print("  No artifacts.")
        return
    if report.vanishing:
        print(f"  Vanishing fields: {', '.join(str(i) for i in report.vanishing)}")
    if report.emergent:
        print(f"  Emergent fields:  {', '.join(str(i) for i in report.emergent)}")


def print_lagrange_points(points):
    """One line per Lagrange point: position, type, resonance, description."""
    print(f"\n{'='*60}")
    print(f"Lagrange points ({len(points)}):")
    print(f"{'='*60}")
    for p in points:
        print(f"  {p.position:>6d}  {p.type.value:<10s}  R={p.resonance:<12.6f} {p.description}")


def print_page_info(info):
    s = info.stats
    print(f"\n{'='*60}")
    print(f"Page {info.page}: {info.start}..{info.end}")
    print(f"  Mean resonance: {s.mean:.6f}  (min {s.min:.6f}, max {s.max:.6f})")
    print(f"  Variance: {s.variance:.6f}  Skew: {s.skew:.4f}  Kurtosis: {s.kurtosis:.4f}")
    print(f"  Average active fields: {info.average_active_fields:.3f}")
    print(f"{'='*60}")
