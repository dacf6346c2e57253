from security_alert_gate.sources.base import AlertSource
from security_alert_gate.sources.code_scanning import CodeScanningSource
from security_alert_gate.sources.dependabot import DependabotSource
from security_alert_gate.sources.registry import SourceRegistry
from security_alert_gate.sources.secret_scanning import SecretScanningSource

__all__ = [
    "AlertSource",
    "SourceRegistry",
    "CodeScanningSource",
    "DependabotSource",
    "SecretScanningSource",
]
