import logging
from typing import Any

import httpx

from security_alert_gate.api.exceptions import (
    AuthenticationError,
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

logger = logging.getLogger(__name__)

NO_ANALYSIS_FOUND = "no analysis found"

VULNERABILITY_ALERTS_QUERY = """
query ($org: String!, $repository: String!) {
  repository(owner: $org, name: $repository) {
    vulnerabilityAlerts(first: 100) {
      nodes {
        createdAt
        state
        securityVulnerability {
          package {
            name
          }
          severity
          advisory {
            description
          }
        }
      }
    }
  }
}
"""


class GitHubClient:
    """Client for the GitHub code scanning, Dependabot and secret scanning APIs.

    One page of up to ``PAGE_SIZE`` open alerts is read per source. Requests
    are never retried; a rate-limited response raises ``RateLimitError``.

    Usage:
        async with GitHubClient(token="...") as client:
            snapshot = await client.list_code_scanning_alerts("owner/name")
    """

    BASE_URL = "https://api.github.com"
    API_VERSION = "2022-11-28"
    PAGE_SIZE = 100

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        graphql_url: str | None = None,
    ) -> None:
        self.token = token
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.graphql_url = graphql_url or f"{self.base_url}/graphql"
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubClient":
        self._client = httpx.AsyncClient(timeout=30.0)
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.API_VERSION,
        }

        response = await self._client.request(
            method, url, headers=headers, params=params, json=json
        )

        if response.status_code == 429 or (
            response.status_code == 403
            and response.headers.get("x-ratelimit-remaining") == "0"
        ):
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "GitHub API rate limit exceeded",
                retry_after=_retry_after_seconds(retry_after),
            )

        if response.status_code == 401:
            raise AuthenticationError("Invalid or expired GitHub token")

        if response.status_code == 404:
            api_message = self._error_message(response)
            raise NotFoundError(
                f"Resource not found: {api_message or url}", api_message=api_message
            )

        response.raise_for_status()
        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message") is not None:
            return str(body["message"])
        return None

    async def list_code_scanning_alerts(self, repository: str) -> CodeScanSnapshot:
        url = f"{self.base_url}/repos/{repository}/code-scanning/alerts"
        try:
            data = await self._request(
                "GET", url, params={"per_page": self.PAGE_SIZE, "state": "open"}
            )
        except NotFoundError as exc:
            if exc.api_message == NO_ANALYSIS_FOUND:
                logger.debug("code scanning: %s", exc.api_message)
                return CodeScanSnapshot(analysis_found=False)
            raise

        logger.info("code scanning raw result: %s", data)

        if isinstance(data, dict) and data.get("message") == NO_ANALYSIS_FOUND:
            return CodeScanSnapshot(analysis_found=False)

        return CodeScanSnapshot(
            alerts=tuple(
                CodeScanAlert(
                    number=a["number"],
                    state=a["state"],
                    rule_id=a["rule"].get("id", ""),
                    rule_severity=a["rule"].get("severity"),
                    security_severity_level=a["rule"].get("security_severity_level"),
                )
                for a in data
            )
        )

    async def list_vulnerability_alerts(self, owner: str, name: str) -> list[DependencyAlert]:
        data = await self._request(
            "POST",
            self.graphql_url,
            json={
                "query": VULNERABILITY_ALERTS_QUERY,
                "variables": {"org": owner, "repository": name},
            },
        )

        logger.info("dependency alerts raw result: %s", data)

        if data.get("errors"):
            raise GraphQLError(data["errors"])

        repo = data["data"]["repository"]
        if repo is None:
            raise NotFoundError(f"Repository not found: {owner}/{name}")

        return [
            DependencyAlert(
                state=node["state"],
                package_name=node["securityVulnerability"]["package"]["name"],
                severity=node["securityVulnerability"]["severity"],
                advisory_description=node["securityVulnerability"]["advisory"]["description"],
                created_at=node["createdAt"],
            )
            for node in repo["vulnerabilityAlerts"]["nodes"]
        ]

    async def list_secret_scanning_alerts(self, repository: str) -> list[SecretScanAlert]:
        url = f"{self.base_url}/repos/{repository}/secret-scanning/alerts"
        data = await self._request(
            "GET", url, params={"per_page": self.PAGE_SIZE, "state": "open"}
        )

        logger.info("secret scanning raw result: %s", data)

        return [
            SecretScanAlert(
                number=a["number"],
                state=a["state"],
                secret_type=a.get("secret_type"),
            )
            for a in data
        ]


def _retry_after_seconds(value: str | None) -> float | None:
    # Retry-After may also be an HTTP date; only delta-seconds are reported
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None
