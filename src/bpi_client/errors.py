"""Exception hierarchy for the BPI client.

Protocol failures (HTTP status >= 400) carry the raw body and the status code
for diagnostics. Lookup and narrowing misses are separate types so callers can
recover from them without catching transport problems by accident.
"""


class BpiError(RuntimeError):
    """Base exception for all BPI client failures."""


class HttpError(BpiError):
    """Raised when the service answers with an error status."""

    def __init__(self, body: str, code: int) -> None:
        super().__init__(f"BPI service responded with HTTP {code}")
        self.body = body
        self.code = code


class ClientError(HttpError):
    """Raised for 4xx responses."""


class ServerError(HttpError):
    """Raised for 5xx responses."""


class MalformedResponse(BpiError):
    """Raised when a successful response body is not a BPI XML document."""


class UndefinedHypermedia(BpiError):
    """Raised when the response advertises no affordance with the requested relation."""

    def __init__(self, kind: str, rel: str) -> None:
        super().__init__(f"There is no such {kind} [{rel}]")
        self.kind = kind
        self.rel = rel


class EmptyList(BpiError, ValueError):
    """Raised when narrowing the item list leaves nothing."""


class ItemNotFound(BpiError, ValueError):
    """Raised when no item matches a single-item lookup."""


class MalformedFacet(BpiError):
    """Raised when a facet item cannot be turned into a facet group."""


class MissingParameter(BpiError, ValueError):
    """Raised when a query or template is sent without a required value."""


class UnknownField(BpiError, ValueError):
    """Raised when a template is given a value for a field it does not declare."""


class InvalidFieldValue(BpiError, ValueError):
    """Raised when a template value is not among the field's allowed options."""
