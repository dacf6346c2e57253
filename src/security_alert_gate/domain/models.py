"""Core domain models for severity gating and run outcomes."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Severity(IntEnum):
    """Severity ordinal, ordered for comparison (higher value = higher severity)."""

    UNKNOWN = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @classmethod
    def from_label(cls, label: str | None) -> "Severity":
        """Normalize a severity label to its ordinal.

        Case-insensitive; ``moderate`` and ``medium`` are the same level.
        Unrecognized or empty labels map to ``UNKNOWN`` rather than raising.
        """
        if not label:
            return cls.UNKNOWN
        return _LABELS.get(label.lower(), cls.UNKNOWN)

    @classmethod
    def is_known(cls, label: str | None) -> bool:
        return bool(label) and label.lower() in _LABELS

    def admits(self, label: str | None) -> bool:
        """Return True when *label* is at or above this threshold."""
        return Severity.from_label(label) >= self


_LABELS: dict[str, Severity] = {
    "critical": Severity.CRITICAL,
    "high": Severity.HIGH,
    "moderate": Severity.MEDIUM,
    "medium": Severity.MEDIUM,
    "low": Severity.LOW,
}


@dataclass(frozen=True, slots=True)
class SourceReport:
    """Filtered view of one alert source for the current run."""

    source: str
    retained: tuple[Any, ...] = field(default_factory=tuple)
    summary: str | None = None
    analysis_missing: bool = False

    @property
    def count(self) -> int:
        return len(self.retained)
