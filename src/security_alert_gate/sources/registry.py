from collections.abc import AsyncIterator

from security_alert_gate.api import GitHubClient
from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport
from security_alert_gate.sources.base import AlertSource
from security_alert_gate.sources.code_scanning import CodeScanningSource
from security_alert_gate.sources.dependabot import DependabotSource
from security_alert_gate.sources.secret_scanning import SecretScanningSource


class SourceRegistry:
    """Registry of alert sources, collected one after another in registration order."""

    def __init__(self) -> None:
        self._sources: list[AlertSource] = []

    def register(self, source: AlertSource) -> None:
        self._sources.append(source)

    @property
    def sources(self) -> tuple[AlertSource, ...]:
        return tuple(self._sources)

    async def collect_all(
        self, client: GitHubClient, config: GateConfig
    ) -> AsyncIterator[SourceReport]:
        for source in self._sources:
            yield await source.collect(client, config)

    @classmethod
    def default(cls) -> "SourceRegistry":
        """Code scanning, Dependabot and secret scanning, in that order."""
        registry = cls()
        registry.register(CodeScanningSource())
        registry.register(DependabotSource())
        registry.register(SecretScanningSource())
        return registry
