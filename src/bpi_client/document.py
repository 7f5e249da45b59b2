"""Cursor over the items of BPI responses, driving hypermedia navigation."""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from bpi_client.authorization import Authorization
from bpi_client.config import AUTH_HEADER, CONTENT_TYPE
from bpi_client.core.facets import Facets
from bpi_client.core.parser import parse_response
from bpi_client.core.view import ResponseView
from bpi_client.errors import (
    ClientError,
    EmptyList,
    HttpError,
    ItemNotFound,
    ServerError,
    UndefinedHypermedia,
)
from bpi_client.models.hypermedia import Link, Query, Template
from bpi_client.models.item import Item
from bpi_client.protocols import HttpClientProtocol
from bpi_client.status import ResponseStatus


@dataclass(frozen=True)
class RequestRecord:
    """The last request sent, for debugging."""

    method: str
    uri: str
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)


class Document:
    """A BPI session: the current response, a cursor into its items and the way to the next one.

    Every successful request, and every narrowing, replaces the working view
    as a whole and puts the cursor on the first item. Failed calls leave the
    view and the cursor as they were.

    Not thread safe; use one Document per session.
    """

    def __init__(self, http_client: HttpClientProtocol, authorization: Authorization) -> None:
        self._http_client = http_client
        self._authorization = authorization
        self._view = ResponseView()
        self._position = 0
        self._last_request: RequestRecord | None = None
        self._last_status: ResponseStatus | None = None
        self._last_body: str | bytes | None = None

    # --- Requests ---

    def load_endpoint(self, uri: str) -> "Document":
        """Load the service entry point."""
        return self.request("GET", uri)

    def request(
        self, method: str, uri: str, params: Mapping[str, Any] | None = None
    ) -> "Document":
        """Send a request and make its response the current one.

        Raises:
            ClientError: 4xx response.
            ServerError: 5xx response.
            HttpError: Any other error status.
            MalformedResponse: The body is not a BPI document.
        """
        params = dict(params or {})
        headers = {
            AUTH_HEADER: self._authorization.to_header_value(),
            "Content-Type": CONTENT_TYPE,
        }
        self._last_request = RequestRecord(method=method, uri=uri, params=params, headers=headers)

        response = self._http_client.request(method, uri, params, headers)
        status = ResponseStatus(response.status_code)
        body = response.body
        self._last_status = status
        self._last_body = body

        if status.is_error():
            text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
            logger.warning("{} {} failed with HTTP {}", method, uri, status.get_code())
            if status.is_client_error():
                raise ClientError(text, status.get_code())
            if status.is_server_error():
                raise ServerError(text, status.get_code())
            raise HttpError(text, status.get_code())

        self._replace_view(parse_response(body, status))
        logger.debug("{} {} -> {} items", method, uri, len(self._view))
        return self

    def status(self) -> ResponseStatus | None:
        """Status of the last response, None before the first request."""
        return self._last_status

    def dump_raw_response(self) -> str | bytes | None:
        """Body of the last response exactly as the HTTP client returned it."""
        return self._last_body

    def dump_raw_request(self) -> RequestRecord | None:
        """Method, URI, parameters and headers of the last request."""
        return self._last_request

    # --- Hypermedia ---

    def find_link(self, rel: str) -> Link | None:
        """Link with this relation, or None."""
        return self._view.find(Link, rel)

    def find_query(self, rel: str) -> Query | None:
        """Query with this relation, or None."""
        return self._view.find(Query, rel)

    def find_template(self, rel: str) -> Template | None:
        """Template with this relation, or None."""
        return self._view.find(Template, rel)

    def link(self, rel: str) -> Link:
        """Access hypermedia link.

        Raises:
            UndefinedHypermedia: No link with this relation.
        """
        found = self.find_link(rel)
        if found is None:
            raise UndefinedHypermedia("link", rel)
        return found

    def query(self, rel: str) -> Query:
        """Access hypermedia query.

        Raises:
            UndefinedHypermedia: No query with this relation.
        """
        found = self.find_query(rel)
        if found is None:
            raise UndefinedHypermedia("query", rel)
        return found

    def template(self, rel: str) -> Template:
        """Access hypermedia template.

        Raises:
            UndefinedHypermedia: No template with this relation.
        """
        found = self.find_template(rel)
        if found is None:
            raise UndefinedHypermedia("template", rel)
        return found

    def follow_link(self, link: Link) -> "Document":
        """GET the link target and make it the current response."""
        link.follow(self)
        return self

    def send_query(self, query: Query, params: Mapping[str, Any]) -> "Document":
        """Send the query with ``params`` and make its response the current one."""
        query.send(self, params)
        return self

    def post_template(self, template: Template) -> "Document":
        """Submit the filled template and make its response the current one."""
        template.post(self)
        return self

    def facets(self) -> Facets:
        """Facet groups of the current view, computed once per view."""
        return self._view.facets

    # --- Current item ---

    def is_type_of(self, item_type: str) -> bool:
        return self.current().is_type_of(item_type)

    def walk_properties(self, callback: Callable[[dict[str, str]], Any]) -> None:
        self.current().walk_properties(callback)

    def properties_to_dict(self) -> dict[str, str]:
        return self.current().properties_to_dict()

    # --- Narrowing ---

    @property
    def view(self) -> ResponseView:
        return self._view

    def items(self) -> tuple[Item, ...]:
        return self._view.items

    def first_item(self, attr: str, value: Any) -> "Document":
        """Narrow to the first item whose ``attr`` equals ``value``.

        Raises:
            ItemNotFound: No item matches; the document is left unchanged.
        """
        narrowed = self._view.first_by_attr(attr, value)
        if not narrowed.items:
            msg = f'Item with attribute "{attr}" and value "{value}" was not found'
            raise ItemNotFound(msg)
        self._replace_view(narrowed)
        return self

    def reduce_items_by_attr(self, attr: str, value: Any) -> "Document":
        """Narrow to every item whose ``attr`` equals ``value``, keeping their order.

        Raises:
            EmptyList: No item matches; the document is left unchanged.
        """
        narrowed = self._view.filter_by_attr(attr, value)
        if not narrowed.items:
            msg = f"No items remain after reduce was made by attr [{attr}], value [{value}]"
            raise EmptyList(msg)
        logger.debug(
            "Reduced {} items to {} by {}={!r}", len(self._view), len(narrowed), attr, value
        )
        self._replace_view(narrowed)
        return self

    def clear(self) -> None:
        """Drop the current items."""
        self._replace_view(ResponseView(status=self._view.status))

    def _replace_view(self, view: ResponseView) -> None:
        self._view = view
        self._position = 0

    # --- Cursor ---

    def rewind(self) -> None:
        self._position = 0

    def current(self) -> Item:
        """The item under the cursor.

        Raises:
            IndexError: The cursor is past the last item.
        """
        if not self.valid():
            msg = f"Cursor position {self._position} is outside {self.count()} items"
            raise IndexError(msg)
        return self._view.items[self._position]

    def key(self) -> int:
        return self._position

    def next(self) -> None:
        self._position += 1

    def valid(self) -> bool:
        return 0 <= self._position < len(self._view.items)

    def count(self) -> int:
        return len(self._view.items)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Item]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.next()
