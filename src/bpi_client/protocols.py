"""Protocols for the collaborators injected into Document."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HttpResponseProtocol(Protocol):
    """What Document reads from an HTTP response."""

    status_code: int
    body: str | bytes


@runtime_checkable
class HttpClientProtocol(Protocol):
    """Protocol for synchronous HTTP clients."""

    def request(
        self,
        method: str,
        uri: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> HttpResponseProtocol:
        """Send one request and return the response, whatever its status."""
        ...
