"""Tests for Authorization and ResponseStatus."""

import hashlib

import pytest

from bpi_client.authorization import Authorization
from bpi_client.status import ResponseStatus


def test_header_value_format() -> None:
    auth = Authorization("999999", "pub", "secret")
    token = hashlib.sha256(b"999999pubsecret").hexdigest()

    assert auth.to_header_value() == f'BPI agency="999999", token="{token}"'


def test_header_value_is_stable() -> None:
    auth = Authorization("999999", "pub", "secret")

    assert auth.to_header_value() == auth.to_header_value()
    assert auth.token == auth.token


def test_token_depends_on_every_credential() -> None:
    base = Authorization("a", "b", "c").token

    assert Authorization("x", "b", "c").token != base
    assert Authorization("a", "x", "c").token != base
    assert Authorization("a", "b", "x").token != base


@pytest.mark.parametrize("args", [("", "b", "c"), ("a", "", "c"), ("a", "b", "")])
def test_missing_credential_raises(args: tuple[str, str, str]) -> None:
    with pytest.raises(ValueError, match="Missing BPI credentials"):
        Authorization(*args)


def test_repr_hides_secrets() -> None:
    auth = Authorization("999999", "pub", "secret")

    assert "secret" not in repr(auth)
    assert auth.token not in repr(auth)


def test_from_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BPI_AGENCY_ID", "123456")
    monkeypatch.setenv("BPI_PUBLIC_KEY", "pub")
    monkeypatch.setenv("BPI_SECRET_KEY", "secret")

    auth = Authorization.from_config()

    assert auth.agency_id == "123456"


@pytest.mark.parametrize("code", [200, 204, 301, 399])
def test_non_error_codes(code: int) -> None:
    status = ResponseStatus(code)

    assert not status.is_error()
    assert not status.is_client_error()
    assert not status.is_server_error()


@pytest.mark.parametrize("code", [400, 404, 499])
def test_client_error_codes(code: int) -> None:
    status = ResponseStatus(code)

    assert status.is_error()
    assert status.is_client_error()
    assert not status.is_server_error()


@pytest.mark.parametrize("code", [500, 502, 599])
def test_server_error_codes(code: int) -> None:
    status = ResponseStatus(code)

    assert status.is_error()
    assert status.is_server_error()
    assert not status.is_client_error()


def test_status_accessors() -> None:
    assert ResponseStatus(201).get_code() == 201
    assert ResponseStatus(201).is_success()
    assert not ResponseStatus(302).is_success()
    assert ResponseStatus(600).is_error()
