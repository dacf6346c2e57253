__version__ = "0.1.0"

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import ConfigurationError, GateConfig
from security_alert_gate.core import GatePipeline, decide
from security_alert_gate.domain import (
    GateOutcome,
    GateResult,
    MissingAnalysis,
    Severity,
    SourceReport,
    Success,
    ThresholdExceeded,
    TransportError,
)
from security_alert_gate.output import ActionsCommandOutput, ConsoleGateOutput, GateOutput
from security_alert_gate.sources import (
    AlertSource,
    CodeScanningSource,
    DependabotSource,
    SecretScanningSource,
    SourceRegistry,
)

__all__ = [
    "__version__",
    "GatePipeline",
    "GateConfig",
    "ConfigurationError",
    "GitHubClient",
    "decide",
    "Severity",
    "SourceReport",
    "GateOutcome",
    "GateResult",
    "Success",
    "MissingAnalysis",
    "ThresholdExceeded",
    "TransportError",
    "AlertSource",
    "SourceRegistry",
    "CodeScanningSource",
    "DependabotSource",
    "SecretScanningSource",
    "GateOutput",
    "ActionsCommandOutput",
    "ConsoleGateOutput",
]
