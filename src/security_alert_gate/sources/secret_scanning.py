import logging

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport

logger = logging.getLogger(__name__)


class SecretScanningSource:
    """Secret scanning alerts carry no severity, so every open alert counts."""

    name: str = "secret_scanning"

    async def collect(self, client: GitHubClient, config: GateConfig) -> SourceReport:
        alerts = await client.list_secret_scanning_alerts(config.repository)
        logger.info("Secret scanning: %d open alert(s)", len(alerts))

        if not alerts:
            return SourceReport(source=self.name)

        return SourceReport(
            source=self.name,
            retained=tuple(alerts),
            summary=f"Found {len(alerts)} secret scanning alerts",
        )
