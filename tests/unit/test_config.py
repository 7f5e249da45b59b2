"""Tests for credential loading and logging setup."""

import json
from pathlib import Path

import pytest
from loguru import logger

from bpi_client.config import CREDENTIAL_ENV_VARS, load_credentials
from bpi_client.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _no_env_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_environment_wins_over_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    creds = tmp_path / "credentials.json"
    creds.write_text(json.dumps({"agency_id": "f", "public_key": "f", "secret_key": "f"}))
    monkeypatch.setattr("bpi_client.config.CREDENTIAL_FILES", [creds])
    for name, value in zip(CREDENTIAL_ENV_VARS, ["1", "2", "3"], strict=True):
        monkeypatch.setenv(name, value)

    assert load_credentials() == ("1", "2", "3")


def test_partial_environment_falls_back_to_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    creds = tmp_path / "credentials.json"
    creds.write_text(json.dumps({"agency_id": "a", "public_key": "p", "secret_key": "s"}))
    monkeypatch.setattr(
        "bpi_client.config.CREDENTIAL_FILES", [tmp_path / "missing.json", creds]
    )
    monkeypatch.setenv("BPI_AGENCY_ID", "only-this")

    assert load_credentials() == ("a", "p", "s")


def test_incomplete_credential_file_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    creds = tmp_path / "credentials.json"
    creds.write_text(json.dumps({"agency_id": "a"}))
    monkeypatch.setattr("bpi_client.config.CREDENTIAL_FILES", [creds])

    with pytest.raises(RuntimeError, match="missing key 'public_key'"):
        load_credentials()


def test_no_credentials_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("bpi_client.config.CREDENTIAL_FILES", [tmp_path / "a.json"])

    with pytest.raises(RuntimeError, match="Cannot find BPI credentials"):
        load_credentials()


def test_configure_logging_filters_debug_unless_verbose() -> None:
    messages: list[str] = []

    handler_id = configure_logging(sink=messages.append)
    logger.debug("hidden")
    logger.info("shown")
    logger.remove(handler_id)

    handler_id = configure_logging(verbose=True, sink=messages.append)
    logger.debug("now visible")
    logger.remove(handler_id)

    assert len(messages) == 2
    assert "shown" in messages[0]
    assert "now visible" in messages[1]
