from security_alert_gate.core.decision import decide
from security_alert_gate.core.pipeline import GatePipeline

__all__ = ["GatePipeline", "decide"]
