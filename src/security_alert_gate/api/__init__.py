from security_alert_gate.api.client import NO_ANALYSIS_FOUND, GitHubClient
from security_alert_gate.api.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    GraphQLError,
    NotFoundError,
    RateLimitError,
)
from security_alert_gate.api.models import (
    CodeScanAlert,
    CodeScanSnapshot,
    DependencyAlert,
    SecretScanAlert,
)

__all__ = [
    "NO_ANALYSIS_FOUND",
    "GitHubClient",
    "CodeScanAlert",
    "CodeScanSnapshot",
    "DependencyAlert",
    "SecretScanAlert",
    "GitHubAPIError",
    "RateLimitError",
    "AuthenticationError",
    "NotFoundError",
    "GraphQLError",
]
