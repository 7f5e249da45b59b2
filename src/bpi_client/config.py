"""Configuration constants for the BPI client."""

import json
import os
from pathlib import Path

# Media type sent with every request.
CONTENT_TYPE: str = "application/vnd.bpi.api+xml"

# Header carrying the rendered Authorization value.
AUTH_HEADER: str = "Auth"

# Seconds, passed straight to requests.
DEFAULT_TIMEOUT: float = 30.0

# Environment variables for credentials. Used only when all three are set.
CREDENTIAL_ENV_VARS: tuple[str, str, str] = ("BPI_AGENCY_ID", "BPI_PUBLIC_KEY", "BPI_SECRET_KEY")

# Credential files (JSON with agency_id, public_key, secret_key). First file found is used.
CREDENTIAL_FILES: list[Path] = [
    Path("~/.config/bpi-client/credentials.json").expanduser(),
    Path("~/.config/secret/bpi-credentials.json").expanduser(),
]


def load_credentials() -> tuple[str, str, str]:
    """Return (agency_id, public_key, secret_key) from the environment or a credential file."""
    from_env = [os.environ.get(name, "") for name in CREDENTIAL_ENV_VARS]
    if all(from_env):
        return from_env[0], from_env[1], from_env[2]

    for path in CREDENTIAL_FILES:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            continue
        try:
            return data["agency_id"], data["public_key"], data["secret_key"]
        except KeyError as e:
            msg = f"Credential file {str(path)!r} is missing key {e.args[0]!r}"
            raise RuntimeError(msg) from e

    msg = (
        f"Cannot find BPI credentials, was looking at environment {CREDENTIAL_ENV_VARS!r} "
        f"and files {CREDENTIAL_FILES!r}"
    )
    raise RuntimeError(msg)
