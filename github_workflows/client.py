"""GitHub REST API client using httpx.

Builds requests against a base URL, sends them, and turns non-2xx responses
into APIError. There is no retry, throttling or caching at this layer.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar

import httpx
from pydantic import ValidationError

from .actions import ActionsService
from .errors import APIError, DecodeError, RateLimitError, RequestError
from .models import GitHubModel
from .settings import get_settings

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
MEDIA_TYPE = "application/vnd.github+json"

T = TypeVar("T")


@dataclass
class Rate:
    """Primary rate limit state from the X-RateLimit-* headers."""

    limit: int | None = None
    remaining: int | None = None
    reset: datetime | None = None

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "Rate":
        return cls(
            limit=_parse_int(headers.get("x-ratelimit-limit")),
            remaining=_parse_int(headers.get("x-ratelimit-remaining")),
            reset=_parse_epoch(headers.get("x-ratelimit-reset")),
        )


@dataclass
class Response:
    """Metadata of a GitHub API response, returned next to the decoded value."""

    http_response: httpx.Response
    rate: Rate
    next_page: int | None = None
    prev_page: int | None = None
    first_page: int | None = None
    last_page: int | None = None

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> "Response":
        pages = _parse_link_pages(resp.headers.get("link"))
        return cls(
            http_response=resp,
            rate=Rate.from_headers(resp.headers),
            next_page=pages.get("next"),
            prev_page=pages.get("prev"),
            first_page=pages.get("first"),
            last_page=pages.get("last"),
        )


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _parse_epoch(value: str | None) -> datetime | None:
    seconds = _parse_int(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_link_pages(link: str | None) -> dict[str, int]:
    """Extract page numbers per rel from a Link header.

    e.g. '<https://api.github.com/...?page=3>; rel="next", <...?page=5>; rel="last"'
    """
    pages: dict[str, int] = {}
    if not link:
        return pages
    for part in link.split(","):
        segments = part.split(";")
        if len(segments) < 2:
            continue
        target = segments[0].strip()
        if not (target.startswith("<") and target.endswith(">")):
            continue
        try:
            page = _parse_int(httpx.URL(target[1:-1]).params.get("page"))
        except httpx.InvalidURL:
            continue
        if page is None:
            continue
        for param in segments[1:]:
            name, _, value = param.strip().partition("=")
            if name == "rel":
                pages[value.strip('"')] = page
    return pages


def _check_response(resp: httpx.Response) -> None:
    """Raise APIError (or RateLimitError) for non-2xx responses."""
    if 200 <= resp.status_code < 300:
        return

    logger.warning(
        "GitHub API error %s for %s %s", resp.status_code, resp.request.method, resp.request.url
    )
    message = resp.text
    errors = None
    documentation_url = None
    try:
        body = resp.json() if resp.content else None
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message", message)
        errors = body.get("errors")
        documentation_url = body.get("documentation_url")

    rate = Rate.from_headers(resp.headers)
    if resp.status_code in (403, 429) and rate.remaining == 0:
        raise RateLimitError(
            resp, message, rate, errors=errors, documentation_url=documentation_url
        )
    raise APIError(resp, message, errors=errors, documentation_url=documentation_url)


class GitHubClient:
    """Thin client for GitHub REST API endpoints.

    Settings fill in whatever is not passed explicitly. Pass ``http_client``
    to supply a preconfigured httpx.Client (its lifetime stays with the caller).
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        settings = get_settings()
        self.base_url = base_url if base_url is not None else settings.github_api_url
        self.user_agent = user_agent or settings.github_user_agent
        token = token or settings.github_token

        self._headers = {
            "Accept": MEDIA_TYPE,
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": self.user_agent,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout if timeout is not None else settings.github_timeout,
        )

        self.actions = ActionsService(self)

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        A body of None means the request carries no body at all. Anything
        else is sent as JSON; models are serialized via to_dict().
        """
        if not self.base_url.endswith("/"):
            raise RequestError(f"base URL must have a trailing slash, but {self.base_url!r} does not")
        try:
            base = httpx.URL(self.base_url)
        except httpx.InvalidURL as e:
            raise RequestError(f"invalid base URL {self.base_url!r}: {e}") from e
        if not base.is_absolute_url:
            raise RequestError(f"base URL must be absolute, got {self.base_url!r}")

        url = base.join(path.lstrip("/"))
        headers = dict(self._headers)
        content = None
        if body is not None:
            payload = body.to_dict() if isinstance(body, GitHubModel) else body
            try:
                content = json.dumps(payload).encode()
            except (TypeError, ValueError) as e:
                raise RequestError(f"request body is not JSON serializable: {e}") from e
            headers["Content-Type"] = "application/json"

        return self._client.build_request(method, url, params=params, headers=headers, content=content)

    def do(
        self,
        request: httpx.Request,
        decode: Callable[[Any], T] | None = None,
    ) -> tuple[T | None, Response]:
        """Send a request and decode the JSON body with ``decode`` if given.

        Transport errors from httpx propagate unchanged.
        """
        logger.debug("%s %s", request.method, request.url)
        resp = self._client.send(request)
        _check_response(resp)

        response = Response.from_httpx(resp)
        if decode is None or not resp.content:
            return None, response
        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(
                f"invalid JSON in response to {request.method} {request.url}", response=response
            ) from e
        try:
            return decode(data), response
        except ValidationError as e:
            raise DecodeError(
                f"unexpected response to {request.method} {request.url}: {e}", response=response
            ) from e

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


# Singleton client built from settings
_clients: dict[tuple, GitHubClient] = {}


def get_client(base_url: str | None = None) -> GitHubClient:
    """Get or create a GitHubClient for the given base URL."""
    key = (base_url,)
    if key not in _clients:
        _clients[key] = GitHubClient(base_url=base_url)
    return _clients[key]
