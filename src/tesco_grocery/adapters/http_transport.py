"""HTTP transport for the grocery REST service."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from tesco_grocery.domain.errors import TransportError


class Transport(Protocol):
    """Interface for issuing a blocking GET and returning the raw body."""

    def get(self, url: str) -> bytes:
        """Fetch a fully formed URL and return the response body."""


@dataclass
class HttpxTransport(Transport):
    """HTTPX-backed blocking transport."""

    http_client: httpx.Client
    timeout: float = 15.0

    @classmethod
    def create(cls, timeout: float = 15.0) -> "HttpxTransport":
        """Create a transport with a managed httpx session."""
        return cls(http_client=httpx.Client(), timeout=timeout)

    def get(self, url: str) -> bytes:
        """Issue a GET request and return the body bytes.

        The HTTP status is not checked: the service reports failures through
        the StatusCode field of the body, including on non-2xx replies.
        """
        try:
            response = self.http_client.get(url, timeout=self.timeout)
        except httpx.HTTPError as exc:
            raise TransportError(_redact(str(exc), url)) from exc
        return response.content

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()


def _redact(message: str, url: str) -> str:
    """Strip the query string, which carries passwords and session keys."""
    base_url = url.split("?", 1)[0]
    for form in {url, str(httpx.URL(url))}:
        message = message.replace(form, base_url)
    return f"GET {base_url} failed: {message}"
