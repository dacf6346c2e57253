import logging

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport

logger = logging.getLogger(__name__)


class CodeScanningSource:
    name: str = "code_scanning"

    async def collect(self, client: GitHubClient, config: GateConfig) -> SourceReport:
        snapshot = await client.list_code_scanning_alerts(config.repository)

        if not snapshot.analysis_found:
            logger.info("Code scanning has no analysis for %s", config.repository)
            return SourceReport(source=self.name, analysis_missing=True)

        threshold = config.threshold
        retained = tuple(
            alert for alert in snapshot.alerts if threshold.admits(alert.effective_severity)
        )
        logger.info(
            "Code scanning: %d open alert(s), %d at or above %s",
            len(snapshot.alerts),
            len(retained),
            config.severity,
        )

        if not retained:
            return SourceReport(source=self.name)

        return SourceReport(
            source=self.name,
            retained=retained,
            summary=f"Found {len(retained)} code scan issues with {config.severity} severity and above",
        )
