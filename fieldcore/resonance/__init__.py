from .dynamics import (
    GOLDEN_RATIO, RESONANCE_WELLS, WELL_TOLERANCE,
    ResonanceDynamics, ResonanceSignature, ResonanceMinimum,
    resonance_of_pattern, classify_resonance, is_at_resonance_well,
)
from .interference import (
    InterferenceResult, field_interference, will_destructively_interfere,
    phase_relationship,
)

__all__ = [
    "GOLDEN_RATIO", "RESONANCE_WELLS", "WELL_TOLERANCE",
    "ResonanceDynamics", "ResonanceSignature", "ResonanceMinimum",
    "resonance_of_pattern", "classify_resonance", "is_at_resonance_well",
    "InterferenceResult", "field_interference", "will_destructively_interfere",
    "phase_relationship",
]
