"""Hypermedia affordances advertised by BPI responses.

Affordances only describe a request. Executing it is always delegated back to
a Document, so an affordance can be inspected, stored or built by hand without
a live connection.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from loguru import logger

from bpi_client.errors import InvalidFieldValue, MissingParameter, UnknownField

if TYPE_CHECKING:
    from bpi_client.document import Document

_PLACEHOLDER_RE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_-]*)\}")


@dataclass(frozen=True)
class Link:
    """A plain navigation: GET ``href``."""

    rel: str
    href: str
    title: str = ""
    item_type: str | None = None

    def follow(self, document: "Document") -> None:
        document.request("GET", self.href)


@dataclass(frozen=True)
class QueryParam:
    """A parameter declared by a query."""

    name: str
    title: str = ""
    required: bool = False


@dataclass(frozen=True)
class Query:
    """A parameterized request.

    ``href`` may contain ``{name}`` placeholders; those are filled from the
    supplied parameters and the rest travel as request parameters.
    """

    rel: str
    href: str
    title: str = ""
    method: str = "GET"
    params: tuple[QueryParam, ...] = ()

    def placeholders(self) -> list[str]:
        return _PLACEHOLDER_RE.findall(self.href)

    def build(self, params: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """Return the request URI and the parameters left to send."""
        for param in self.params:
            if param.required and param.name not in params:
                msg = f"Query [{self.rel}] requires parameter {param.name!r}"
                raise MissingParameter(msg)

        placeholders = self.placeholders()
        missing = [name for name in placeholders if name not in params]
        if missing:
            msg = f"Query [{self.rel}] href needs {', '.join(missing)}"
            raise MissingParameter(msg)

        uri = _PLACEHOLDER_RE.sub(lambda m: quote(str(params[m.group(1)]), safe=""), self.href)
        rest = {k: v for k, v in params.items() if k not in placeholders}

        if self.params:
            declared = {p.name for p in self.params}
            dropped = sorted(set(rest) - declared)
            if dropped:
                logger.debug("Query [{}] dropping undeclared parameters {}", self.rel, dropped)
            rest = {k: v for k, v in rest.items() if k in declared}

        return uri, rest

    def send(self, document: "Document", params: Mapping[str, Any]) -> None:
        uri, rest = self.build(params)
        document.request(self.method, uri, rest)


@dataclass(frozen=True)
class TemplateField:
    """A form field of a template."""

    name: str
    type: str = "string"
    required: bool = False
    options: tuple[str, ...] = ()
    value: str | None = None


@dataclass(frozen=True)
class Template:
    """A form to fill in and submit, POST unless the service says otherwise."""

    rel: str
    href: str
    title: str = ""
    method: str = "POST"
    fields: tuple[TemplateField, ...] = ()

    def field(self, name: str) -> TemplateField:
        for f in self.fields:
            if f.name == name:
                return f
        msg = f"Template [{self.rel}] has no field {name!r}"
        raise UnknownField(msg)

    def with_values(self, **values: Any) -> "Template":
        """Return a copy with the given field values set."""
        for name in values:
            self.field(name)
        fields = tuple(
            replace(f, value=str(values[f.name])) if f.name in values else f for f in self.fields
        )
        return replace(self, fields=fields)

    def render(self) -> dict[str, str]:
        """Field name -> value for every field that has a value."""
        return {f.name: f.value for f in self.fields if f.value is not None}

    def validate(self) -> None:
        for f in self.fields:
            if f.value is None:
                if f.required:
                    msg = f"Template [{self.rel}] requires field {f.name!r}"
                    raise MissingParameter(msg)
                continue
            if f.options and f.value not in f.options:
                msg = f"Template [{self.rel}] field {f.name!r} must be one of {list(f.options)!r}"
                raise InvalidFieldValue(msg)

    def post(self, document: "Document") -> None:
        self.validate()
        document.request(self.method, self.href, self.render())


Affordance = Link | Query | Template
