"""Aggregate facet items into facet groups for search UIs."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from bpi_client.errors import MalformedFacet
from bpi_client.models.item import Item

FACET_ITEM_TYPE = "facet"


@dataclass(frozen=True)
class FacetTerm:
    """One value of a facet group and how many results carry it."""

    value: str
    count: int
    title: str = ""


@dataclass(frozen=True)
class Facets(Mapping[str, tuple[FacetTerm, ...]]):
    """Read-only mapping of facet group name -> terms, in response order."""

    groups: Mapping[str, tuple[FacetTerm, ...]] = field(default_factory=dict)

    def __getitem__(self, name: str) -> tuple[FacetTerm, ...]:
        return self.groups[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        return {
            name: [{"value": t.value, "count": t.count, "title": t.title} for t in terms]
            for name, terms in self.groups.items()
        }


def build_facets(items: Iterable[Item]) -> Facets:
    """Group the terms of every ``facet`` item by the item's ``name``.

    Items of other types are ignored and no facet items at all yields an empty
    ``Facets``. A facet item that cannot be read raises ``MalformedFacet``.
    """
    groups: dict[str, list[FacetTerm]] = {}

    for item in items:
        if not item.is_type_of(FACET_ITEM_TYPE):
            continue
        name = item.get("name")
        if not name:
            msg = f"Facet item #{item.index} has no name"
            raise MalformedFacet(msg)

        terms = groups.setdefault(name, [])
        for prop in item.properties:
            if not prop.name:
                msg = f"Facet [{name}] has a term without a name"
                raise MalformedFacet(msg)
            try:
                count = int(prop.value.strip())
            except ValueError as e:
                msg = f"Facet [{name}] term {prop.name!r} has a non-numeric count {prop.value!r}"
                raise MalformedFacet(msg) from e
            title = prop.attributes.get("title", "")
            terms.append(FacetTerm(value=prop.name, count=count, title=title))

    return Facets({name: tuple(terms) for name, terms in groups.items()})
