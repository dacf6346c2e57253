from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class CodeScanAlert:
    number: int
    state: str
    rule_id: str
    rule_severity: str | None
    security_severity_level: str | None = None

    @property
    def effective_severity(self) -> str | None:
        return self.security_severity_level or self.rule_severity


@dataclass(frozen=True, slots=True)
class CodeScanSnapshot:
    alerts: tuple[CodeScanAlert, ...] = field(default_factory=tuple)
    analysis_found: bool = True


@dataclass(frozen=True, slots=True)
class DependencyAlert:
    state: str
    package_name: str
    severity: str
    advisory_description: str
    created_at: str


@dataclass(frozen=True, slots=True)
class SecretScanAlert:
    number: int
    state: str
    secret_type: str | None = None
