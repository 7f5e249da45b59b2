"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from bpi_client.authorization import Authorization
from bpi_client.document import Document
from tests.unit.fakes import FakeHttpClient


@pytest.fixture
def authorization() -> Authorization:
    return Authorization("999999", "public-key", "secret-key")


@pytest.fixture
def http_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def make_document(
    http_client: FakeHttpClient, authorization: Authorization
) -> Callable[[str], Document]:
    """Return a factory that loads the given body into a fresh Document."""

    def _make(body: str) -> Document:
        http_client.add_response(body)
        doc = Document(http_client, authorization)
        doc.request("GET", "http://example.com")
        return doc

    return _make
