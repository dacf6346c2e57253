from collections.abc import Iterable

from security_alert_gate.config import GateConfig
from security_alert_gate.domain import SourceReport, Success, ThresholdExceeded


def decide(reports: Iterable[SourceReport], config: GateConfig) -> Success | ThresholdExceeded:
    """Turn the per-source reports into a single pass/warn/fail outcome.

    Summary lines keep the order in which the sources were fetched.
    """
    summary = tuple(report.summary for report in reports if report.summary)
    if not summary:
        return Success(severity=config.severity)
    return ThresholdExceeded(summary=summary, fail=config.fail_on_finding)
