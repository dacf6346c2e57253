import logging
from collections.abc import Sequence

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import GateConfig
from security_alert_gate.core.decision import decide
from security_alert_gate.domain import (
    GateOutcome,
    GateResult,
    MissingAnalysis,
    SourceReport,
    TransportError,
)
from security_alert_gate.output import GateOutput
from security_alert_gate.sources import SourceRegistry

logger = logging.getLogger(__name__)


class GatePipeline:
    def __init__(
        self,
        client: GitHubClient,
        registry: SourceRegistry,
        config: GateConfig,
        outputs: Sequence[GateOutput] = (),
    ) -> None:
        self._client = client
        self._registry = registry
        self._config = config
        self._outputs = tuple(outputs)

    async def run(self) -> GateResult:
        outcomes: list[GateOutcome] = []
        reports: list[SourceReport] = []

        try:
            async for report in self._registry.collect_all(self._client, self._config):
                logger.info("%s: %d alert(s) retained", report.source, report.count)
                if report.analysis_missing and not self._config.allow_missing_analysis:
                    outcomes.append(MissingAnalysis())
                reports.append(report)
            outcomes.append(decide(reports, self._config))
        except Exception as exc:
            logger.exception("Security alert check for %s failed", self._config.repository)
            outcomes.append(TransportError(error=str(exc) or type(exc).__name__))

        result = GateResult(outcomes=tuple(outcomes))
        for output in self._outputs:
            await output.send(result)
        return result
