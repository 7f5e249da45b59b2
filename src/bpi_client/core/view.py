"""Immutable snapshot of a parsed BPI response."""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Any, TypeVar

from bpi_client.core.facets import Facets, build_facets
from bpi_client.models.hypermedia import Affordance
from bpi_client.models.item import Item
from bpi_client.status import ResponseStatus

A = TypeVar("A", bound=Affordance)


@dataclass(frozen=True)
class ResponseView:
    """The working set of items of one response.

    Narrowing never changes a view; it returns a new one that shares the body,
    the status and the response-level hypermedia.
    """

    items: tuple[Item, ...] = ()
    hypermedia: tuple[Affordance, ...] = ()
    status: ResponseStatus | None = None
    body: str = ""

    def __len__(self) -> int:
        return len(self.items)

    def filter_by_attr(self, attr: str, value: Any) -> "ResponseView":
        return replace(self, items=tuple(i for i in self.items if i.matches(attr, value)))

    def first_by_attr(self, attr: str, value: Any) -> "ResponseView":
        for item in self.items:
            if item.matches(attr, value):
                return replace(self, items=(item,))
        return replace(self, items=())

    def affordances(self) -> Iterator[Affordance]:
        """Affordances of the working items, in item order, then the response-level ones."""
        for item in self.items:
            yield from item.affordances
        yield from self.hypermedia

    def find(self, kind: type[A], rel: str) -> A | None:
        for affordance in self.affordances():
            if isinstance(affordance, kind) and affordance.rel == rel:
                return affordance
        return None

    @cached_property
    def facets(self) -> Facets:
        return build_facets(self.items)
