"""GitHub Actions workflow command output.

Errors and warnings become ``::error::``/``::warning::`` annotations on the
run; informational outcomes are printed as plain log lines.
"""

import sys
from typing import TextIO

from security_alert_gate.domain import GateResult


def escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsCommandOutput:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def name(self) -> str:
        return "actions"

    async def send(self, result: GateResult) -> None:
        stream = self._stream or sys.stdout
        for outcome in result.outcomes:
            if outcome.level in ("error", "warning"):
                stream.write(f"::{outcome.level}::{escape_data(outcome.message)}\n")
            else:
                stream.write(f"{outcome.message}\n")
        stream.flush()
