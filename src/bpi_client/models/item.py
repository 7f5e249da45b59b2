"""Immutable views of the items in a BPI response."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from bpi_client.models.hypermedia import Affordance


@dataclass(frozen=True)
class Property:
    """A ``property`` element of an item."""

    name: str
    value: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def to_record(self) -> dict[str, str]:
        """Own attributes merged with the text content under ``@value``."""
        return {**self.attributes, "@value": self.value}


@dataclass(frozen=True)
class Item:
    """A single ``item`` element of a response."""

    index: int
    type: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    properties: tuple[Property, ...] = ()
    affordances: tuple[Affordance, ...] = ()

    def is_type_of(self, item_type: str) -> bool:
        return self.type == item_type

    def get(self, attr: str, default: str | None = None) -> str | None:
        return self.attributes.get(attr, default)

    def matches(self, attr: str, value: Any) -> bool:
        return attr in self.attributes and self.attributes[attr] == str(value)

    def walk_properties(self, callback: Callable[[dict[str, str]], Any]) -> None:
        """Call ``callback`` with each property record, in document order."""
        for prop in self.properties:
            callback(prop.to_record())

    def properties_to_dict(self) -> dict[str, str]:
        """Property name -> value; the last of duplicate names wins."""
        properties: dict[str, str] = {}

        def collect(record: dict[str, str]) -> None:
            properties[record.get("name", "")] = record["@value"]

        self.walk_properties(collect)
        return properties
