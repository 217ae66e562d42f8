"""Error types for GitHub workflows client operations."""

import httpx


class GitHubWorkflowsError(Exception):
    """Base class for errors raised by this package."""


class RequestError(GitHubWorkflowsError, ValueError):
    """Raised when a request cannot be built. No network call was made."""


class DecodeError(GitHubWorkflowsError, ValueError):
    """Raised when a successful response body does not match the data model.

    ``response`` keeps the rate and pagination metadata of that response.
    """

    def __init__(self, message: str, response=None):
        self.response = response
        super().__init__(message)


class APIError(GitHubWorkflowsError, httpx.HTTPStatusError):
    """Raised when GitHub answers with a non-2xx status.

    The error body GitHub sends looks like::

        {"message": "Not Found", "documentation_url": "https://docs.github.com/..."}

    Validation failures add an ``errors`` list.
    """

    def __init__(
        self,
        response: httpx.Response,
        message: str,
        errors: list | None = None,
        documentation_url: str | None = None,
    ):
        self.status_code = response.status_code
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        super().__init__(
            f"{response.request.method} {response.request.url}: {response.status_code} {message}",
            request=response.request,
            response=response,
        )


class RateLimitError(APIError):
    """Raised when the primary rate limit is exhausted (X-RateLimit-Remaining: 0)."""

    def __init__(self, response: httpx.Response, message: str, rate, **kwargs):
        self.rate = rate
        super().__init__(response, message, **kwargs)
