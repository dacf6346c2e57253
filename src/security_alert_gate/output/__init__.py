from security_alert_gate.output.actions import ActionsCommandOutput
from security_alert_gate.output.base import GateOutput
from security_alert_gate.output.console import ConsoleGateOutput

__all__ = ["GateOutput", "ActionsCommandOutput", "ConsoleGateOutput"]
