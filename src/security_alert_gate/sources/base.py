from typing import Protocol, runtime_checkable

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport


@runtime_checkable
class AlertSource(Protocol):
    """Protocol for a security alert subsystem that can be fetched and filtered."""

    @property
    def name(self) -> str:
        ...

    async def collect(self, client: GitHubClient, config: GateConfig) -> SourceReport:
        ...
