"""Domain models for severity gating and run outcomes."""

from security_alert_gate.domain.models import Severity, SourceReport
from security_alert_gate.domain.outcome import (
    NO_CODE_SCANNING_RESULTS,
    GateOutcome,
    GateResult,
    MissingAnalysis,
    Success,
    ThresholdExceeded,
    TransportError,
)

__all__ = [
    "NO_CODE_SCANNING_RESULTS",
    "GateOutcome",
    "GateResult",
    "MissingAnalysis",
    "Severity",
    "SourceReport",
    "Success",
    "ThresholdExceeded",
    "TransportError",
]
