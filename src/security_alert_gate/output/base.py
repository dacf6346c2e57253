from typing import Protocol, runtime_checkable

from security_alert_gate.domain import GateResult


@runtime_checkable
class GateOutput(Protocol):
    """Protocol for destinations that report a run's outcomes."""

    @property
    def name(self) -> str:
        ...

    async def send(self, result: GateResult) -> None:
        ...
