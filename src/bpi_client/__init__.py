"""Client for the BPI hypermedia XML REST API."""

from bpi_client.authorization import Authorization
from bpi_client.core.facets import Facets, FacetTerm, build_facets
from bpi_client.core.view import ResponseView
from bpi_client.document import Document, RequestRecord
from bpi_client.http import HttpResponse, RequestsHttpClient
from bpi_client.models.hypermedia import Link, Query, QueryParam, Template, TemplateField
from bpi_client.models.item import Item, Property
from bpi_client.protocols import HttpClientProtocol, HttpResponseProtocol
from bpi_client.status import ResponseStatus

__all__ = [
    "Authorization",
    "Document",
    "FacetTerm",
    "Facets",
    "HttpClientProtocol",
    "HttpResponse",
    "HttpResponseProtocol",
    "Item",
    "Link",
    "Property",
    "Query",
    "QueryParam",
    "RequestRecord",
    "RequestsHttpClient",
    "ResponseStatus",
    "ResponseView",
    "Template",
    "TemplateField",
    "build_facets",
]
