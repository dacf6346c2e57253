class GitHubAPIError(Exception):
    pass


class RateLimitError(GitHubAPIError):
    def __init__(
        self, message: str = "Rate limit exceeded", retry_after: float | None = None
    ) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class AuthenticationError(GitHubAPIError):
    pass


class NotFoundError(GitHubAPIError):
    def __init__(self, message: str = "Resource not found", api_message: str | None = None) -> None:
        super().__init__(message)
        self.api_message = api_message


class GraphQLError(GitHubAPIError):
    def __init__(self, errors: list[dict]) -> None:
        messages = [str(e.get("message", e)) for e in errors] or ["GraphQL request failed"]
        super().__init__("; ".join(messages))
        self.errors = errors
