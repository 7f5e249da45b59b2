"""HTTP status classification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResponseStatus:
    """Status code of a BPI response."""

    code: int

    def get_code(self) -> int:
        return self.code

    def is_success(self) -> bool:
        return 200 <= self.code < 300

    def is_error(self) -> bool:
        return self.code >= 400

    def is_client_error(self) -> bool:
        return 400 <= self.code < 500

    def is_server_error(self) -> bool:
        return 500 <= self.code < 600
