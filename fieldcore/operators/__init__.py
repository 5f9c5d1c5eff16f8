from .artifacts import (
    FieldTransition, ENTANGLEMENT_WEIGHTS,
    compare_patterns, operation_artifacts, carry_pattern,
    merger_transitions, entanglement_transitions,
)
from .normalization import (
    Normalization, NormalizationStep, trial_division, is_prime, division_steps,
)
from .arithmetic import (
    ARTIFACT_KINDS, ArithmeticOperators, OperationResult, ModularResult,
    ChainResult, PowerResult, DivisionResult, GCDStep, GCDResult, LCMResult,
    SequenceAnalysis,
)

__all__ = [
    "FieldTransition", "ENTANGLEMENT_WEIGHTS",
    "compare_patterns", "operation_artifacts", "carry_pattern",
    "merger_transitions", "entanglement_transitions",
    "Normalization", "NormalizationStep", "trial_division", "is_prime", "division_steps",
    "ARTIFACT_KINDS", "ArithmeticOperators", "OperationResult", "ModularResult",
    "ChainResult", "PowerResult", "DivisionResult", "GCDStep", "GCDResult", "LCMResult",
    "SequenceAnalysis",
]
