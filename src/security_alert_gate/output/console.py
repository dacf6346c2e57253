from security_alert_gate.domain import GateResult


class ConsoleGateOutput:
    """Console output adapter for local runs."""

    def __init__(self, prefix: str = "[GATE]") -> None:
        self._prefix = prefix

    @property
    def name(self) -> str:
        return "console"

    async def send(self, result: GateResult) -> None:
        for outcome in result.outcomes:
            lines = outcome.message.splitlines() or [""]
            print(f"{self._prefix} [{outcome.level.upper()}] {lines[0]}")
            for line in lines[1:]:
                print(f"  {line}")

        status = "FAILED" if result.failed else "PASSED"
        print(f"{self._prefix} {status}")
