"""HTTP transport over requests."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urljoin

import requests
from loguru import logger

from bpi_client.config import DEFAULT_TIMEOUT

# Methods whose parameters travel in the query string rather than the body.
_QUERY_STRING_METHODS = frozenset({"GET", "HEAD", "DELETE"})


@dataclass(frozen=True)
class HttpResponse:
    """A received response, reduced to what the BPI client needs."""

    status_code: int
    body: str | bytes
    headers: Mapping[str, str] = field(default_factory=dict)


class RequestsHttpClient:
    """Blocking HTTP client backed by a ``requests.Session``.

    Error statuses are returned, not raised; Document classifies them.
    Transport failures (connection errors, timeouts) propagate as
    ``requests`` exceptions.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.sess = session if session is not None else requests.Session()

    def resolve(self, uri: str) -> str:
        """Resolve a possibly relative URI against ``base_url``."""
        if not self.base_url:
            return uri
        return urljoin(self.base_url, uri)

    def request(
        self,
        method: str,
        uri: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> HttpResponse:
        method = method.upper()
        url = self.resolve(uri)
        logger.debug("Making request: {} {} {}", method, url, repr(dict(params))[:64])

        kwargs: dict[str, Any] = {"headers": dict(headers), "timeout": self.timeout}
        if params:
            if method in _QUERY_STRING_METHODS:
                kwargs["params"] = dict(params)
            else:
                kwargs["data"] = dict(params)

        r = self.sess.request(method, url, **kwargs)
        logger.debug("Response {} from {} ({} bytes)", r.status_code, url, len(r.content))
        return HttpResponse(status_code=r.status_code, body=r.content, headers=dict(r.headers))

    def close(self) -> None:
        self.sess.close()
