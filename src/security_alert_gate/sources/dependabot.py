import logging

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport

logger = logging.getLogger(__name__)

OPEN_STATE = "OPEN"


class DependabotSource:
    name: str = "dependabot"

    async def collect(self, client: GitHubClient, config: GateConfig) -> SourceReport:
        alerts = await client.list_vulnerability_alerts(config.owner, config.name)

        threshold = config.threshold
        retained = tuple(
            alert
            for alert in alerts
            if alert.state == OPEN_STATE and threshold.admits(alert.severity)
        )
        logger.info(
            "Dependabot: %d alert(s), %d open at or above %s",
            len(alerts),
            len(retained),
            config.severity,
        )

        if not retained:
            return SourceReport(source=self.name)

        return SourceReport(
            source=self.name,
            retained=retained,
            summary=(
                f"Found {len(retained)} dependency vulnerabilities "
                f"with {config.severity} severity and above"
            ),
        )
