"""Run outcomes, combined into a single result at the end of a run."""

from dataclasses import dataclass, field
from typing import ClassVar

NO_CODE_SCANNING_RESULTS = "No code scanning results!"


@dataclass(frozen=True, slots=True)
class Success:
    """No alert at or above the threshold was found."""

    severity: str
    level: ClassVar[str] = "info"

    @property
    def message(self) -> str:
        return f"No security alerts with {self.severity} severity and above detected"

    @property
    def failed(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class MissingAnalysis:
    """Code scanning has never produced an analysis for the repository."""

    level: ClassVar[str] = "error"

    @property
    def message(self) -> str:
        return NO_CODE_SCANNING_RESULTS

    @property
    def failed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ThresholdExceeded:
    """At least one source retained alerts; ``fail`` decides error vs warning."""

    summary: tuple[str, ...]
    fail: bool = False

    @property
    def level(self) -> str:
        return "error" if self.fail else "warning"

    @property
    def message(self) -> str:
        return "\n".join(self.summary)

    @property
    def failed(self) -> bool:
        return self.fail


@dataclass(frozen=True, slots=True)
class TransportError:
    """A fetch or filter step raised; the remaining pipeline was skipped."""

    error: str
    level: ClassVar[str] = "error"

    @property
    def message(self) -> str:
        return self.error

    @property
    def failed(self) -> bool:
        return True


GateOutcome = Success | MissingAnalysis | ThresholdExceeded | TransportError


@dataclass(frozen=True, slots=True)
class GateResult:
    """All outcomes signalled during a run, in the order they occurred."""

    outcomes: tuple[GateOutcome, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> bool:
        return any(outcome.failed for outcome in self.outcomes)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0
