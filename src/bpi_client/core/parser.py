"""Parse BPI XML bodies into response views.

Wire format::

    <bpi>
      <item type="entity" name="node">
        <property name="title" type="string">Hello</property>
        <hypermedia>
          <link rel="self" href="..."/>
        </hypermedia>
      </item>
      <hypermedia>
        <link rel="collection" href="..."/>
        <query rel="search" href="..."><param name="text" required="true"/></query>
        <template rel="push" href="..." method="POST"><field name="title"/></template>
      </hypermedia>
    </bpi>
"""

from bs4 import BeautifulSoup, Tag
from loguru import logger

from bpi_client.core.view import ResponseView
from bpi_client.errors import MalformedResponse
from bpi_client.models.hypermedia import (
    Affordance,
    Link,
    Query,
    QueryParam,
    Template,
    TemplateField,
)
from bpi_client.models.item import Item, Property
from bpi_client.status import ResponseStatus

_TRUE_VALUES = frozenset({"1", "true", "yes", "required"})


def _attrs(tag: Tag) -> dict[str, str]:
    return {str(k): str(v) for k, v in tag.attrs.items()}


def _flag(tag: Tag, name: str) -> bool:
    return str(tag.get(name, "")).strip().lower() in _TRUE_VALUES


def parse_link(tag: Tag) -> Link:
    return Link(
        rel=str(tag.get("rel", "")),
        href=str(tag.get("href", "")),
        title=str(tag.get("title", "")),
        item_type=str(tag["type"]) if tag.has_attr("type") else None,
    )


def parse_query(tag: Tag) -> Query:
    params = tuple(
        QueryParam(
            name=str(p.get("name", "")),
            title=str(p.get("title", "")),
            required=_flag(p, "required"),
        )
        for p in tag.select(":scope > param")
    )
    return Query(
        rel=str(tag.get("rel", "")),
        href=str(tag.get("href", "")),
        title=str(tag.get("title", "")),
        method=str(tag.get("method", "GET")).upper(),
        params=params,
    )


def _parse_field(tag: Tag) -> TemplateField:
    options = tuple(
        str(o["value"]) if o.has_attr("value") else o.get_text(strip=True)
        for o in tag.select(":scope > option")
    )
    return TemplateField(
        name=str(tag.get("name", "")),
        type=str(tag.get("type", "string")),
        required=_flag(tag, "required"),
        options=options,
        value=str(tag["value"]) if tag.has_attr("value") else None,
    )


def parse_template(tag: Tag) -> Template:
    return Template(
        rel=str(tag.get("rel", "")),
        href=str(tag.get("href", "")),
        title=str(tag.get("title", "")),
        method=str(tag.get("method", "POST")).upper(),
        fields=tuple(_parse_field(f) for f in tag.select(":scope > field")),
    )


_AFFORDANCE_PARSERS = {"link": parse_link, "query": parse_query, "template": parse_template}
_AFFORDANCE_SELECTOR = ", ".join(f":scope > hypermedia > {name}" for name in _AFFORDANCE_PARSERS)


def parse_hypermedia(parent: Tag) -> tuple[Affordance, ...]:
    """Affordances of the ``hypermedia`` containers directly under ``parent``, in order."""
    found: list[Affordance] = []
    for element in parent.select(_AFFORDANCE_SELECTOR):
        found.append(_AFFORDANCE_PARSERS[element.name](element))
    return tuple(found)


def parse_item(tag: Tag, index: int) -> Item:
    properties = tuple(
        Property(name=str(p.get("name", "")), value=p.get_text(), attributes=_attrs(p))
        for p in tag.select(":scope > property")
    )
    return Item(
        index=index,
        type=str(tag.get("type", "")),
        attributes=_attrs(tag),
        properties=properties,
        affordances=parse_hypermedia(tag),
    )


def parse_response(body: str | bytes, status: ResponseStatus | None = None) -> ResponseView:
    """Parse a response body into a view over the top-level ``item`` elements.

    An empty body gives an empty view. Anything else must have a ``bpi`` root.
    """
    if not body.strip():
        return ResponseView(status=status)

    # Bytes go in undecoded so the XML declaration picks the charset.
    soup = BeautifulSoup(body, "lxml-xml")
    if isinstance(body, bytes):
        text = body.decode(soup.original_encoding or "utf-8", errors="replace")
    else:
        text = body
    root = soup.find("bpi", recursive=False)
    if not isinstance(root, Tag):
        msg = f"Response is not a BPI document: {text[:64]!r}"
        raise MalformedResponse(msg)

    items = tuple(parse_item(tag, i) for i, tag in enumerate(root.select(":scope > item")))
    hypermedia = parse_hypermedia(root)
    logger.debug("Parsed {} items, {} response-level affordances", len(items), len(hypermedia))
    return ResponseView(items=items, hypermedia=hypermedia, status=status, body=text)
