"""Gate configuration, resolved once from the GitHub Actions environment.

Action inputs arrive as ``INPUT_<NAME>`` environment variables (upper-cased,
spaces replaced by underscores, hyphens kept). Values are trimmed the same
way ``core.getInput`` trims them.
"""

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from security_alert_gate.domain import Severity

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class GateConfig:
    repository: str
    severity: str
    allow_missing_analysis: bool = False
    fail_on_finding: bool = False
    token: str = ""
    api_url: str = DEFAULT_API_URL
    graphql_url: str | None = None

    def __post_init__(self) -> None:
        parts = self.repository.split("/")
        if len(parts) != 2 or not all(parts):
            raise ConfigurationError(
                f"repository must be in 'owner/name' form, got {self.repository!r}"
            )
        if not self.severity:
            raise ConfigurationError(
                "severity is required: one of critical, high, moderate, medium, low"
            )
        if not Severity.is_known(self.severity):
            raise ConfigurationError(
                f"severity must be one of critical, high, moderate, medium, low; "
                f"got {self.severity!r}"
            )

    @property
    def owner(self) -> str:
        return self.repository.split("/")[0]

    @property
    def name(self) -> str:
        return self.repository.split("/")[1]

    @property
    def threshold(self) -> Severity:
        return Severity.from_label(self.severity)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GateConfig":
        env = os.environ if environ is None else environ

        repository = get_input(env, "repository") or repository_from_context(env)
        if not repository:
            raise ConfigurationError(
                "repository input is empty and no repository could be read from the workflow context"
            )

        token = get_input(env, "token") or env.get("GITHUB_TOKEN", "").strip()
        if not token:
            raise ConfigurationError("a GitHub token is required (token input or GITHUB_TOKEN)")

        api_url = env.get("GITHUB_API_URL", "").strip() or DEFAULT_API_URL

        return cls(
            repository=repository,
            severity=get_input(env, "severity"),
            allow_missing_analysis=get_input(env, "allow-not-found") == "true",
            fail_on_finding=get_input(env, "fail-action") == "true",
            token=token,
            api_url=api_url,
            graphql_url=env.get("GITHUB_GRAPHQL_URL", "").strip() or None,
        )


def get_input(environ: Mapping[str, str], name: str) -> str:
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = environ.get(key)
    if value is None:
        value = environ.get(key.replace("-", "_"), "")
    return value.strip()


def repository_from_context(environ: Mapping[str, str]) -> str:
    """Return ``owner/name`` from the workflow event payload, else ``GITHUB_REPOSITORY``."""
    event_path = environ.get("GITHUB_EVENT_PATH")
    if event_path:
        try:
            with open(event_path, encoding="utf-8") as f:
                event = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read event payload %s: %s", event_path, exc)
        else:
            full_name = (event.get("repository") or {}).get("full_name")
            if full_name:
                return full_name
    return environ.get("GITHUB_REPOSITORY", "").strip()
