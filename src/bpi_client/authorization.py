"""Credentials for authorizing requests against the BPI service."""

import hashlib

from bpi_client.config import load_credentials


class Authorization:
    """Agency credentials and the token derived from them.

    The token is derived once, at construction, and never changes for the
    lifetime of the instance.
    """

    def __init__(self, agency_id: str, public_key: str, secret_key: str) -> None:
        missing = [
            name
            for name, value in (
                ("agency_id", agency_id),
                ("public_key", public_key),
                ("secret_key", secret_key),
            )
            if not value
        ]
        if missing:
            msg = f"Missing BPI credentials: {', '.join(missing)}"
            raise ValueError(msg)

        self.agency_id = agency_id
        self._public_key = public_key
        self._secret_key = secret_key
        self._token = self._generate_token()

    @classmethod
    def from_config(cls) -> "Authorization":
        """Build from the environment or the first credential file found."""
        return cls(*load_credentials())

    def _generate_token(self) -> str:
        raw = f"{self.agency_id}{self._public_key}{self._secret_key}"
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    @property
    def token(self) -> str:
        return self._token

    def to_header_value(self) -> str:
        """Render the value part of the ``Auth`` header."""
        return f'BPI agency="{self.agency_id}", token="{self._token}"'

    def __repr__(self) -> str:
        return f"Authorization(agency_id={self.agency_id!r})"
