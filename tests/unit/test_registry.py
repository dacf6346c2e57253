import pytest

from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport
from security_alert_gate.sources import (
    CodeScanningSource,
    DependabotSource,
    SecretScanningSource,
    SourceRegistry,
)


class MockSource:
    """Mock implementation of AlertSource for testing."""

    def __init__(self, name: str, log: list[str]) -> None:
        self._name = name
        self._log = log

    @property
    def name(self) -> str:
        return self._name

    async def collect(self, client: object, config: GateConfig) -> SourceReport:
        self._log.append(self._name)
        return SourceReport(source=self._name)


class TestSourceRegistry:
    def test_register_adds_source(self) -> None:
        registry = SourceRegistry()
        source = MockSource("test", [])

        registry.register(source)

        assert registry.sources == (source,)

    def test_sources_returns_tuple(self) -> None:
        assert isinstance(SourceRegistry().sources, tuple)

    def test_default_registers_sources_in_fetch_order(self) -> None:
        registry = SourceRegistry.default()

        kinds = [type(source) for source in registry.sources]

        assert kinds == [CodeScanningSource, DependabotSource, SecretScanningSource]

    @pytest.mark.asyncio
    async def test_collect_all_runs_sources_in_order(self) -> None:
        log: list[str] = []
        registry = SourceRegistry()
        for name in ("first", "second", "third"):
            registry.register(MockSource(name, log))
        config = GateConfig(repository="octo/repo", severity="high", token="t")

        reports = [report async for report in registry.collect_all(None, config)]

        assert [r.source for r in reports] == ["first", "second", "third"]
        assert log == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_collect_all_empty_registry(self) -> None:
        config = GateConfig(repository="octo/repo", severity="high", token="t")

        reports = [report async for report in SourceRegistry().collect_all(None, config)]

        assert reports == []
