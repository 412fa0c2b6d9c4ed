"""Error kinds raised while building coded events."""

from __future__ import annotations


class CodingError(ValueError):
    """Base class for problems found in coded observation data."""

    kind = "coding_error"


class InvalidCode(CodingError):
    """Raised when a code token is not part of the fixed vocabulary.

    Parameters
    ----------
    token:
        Offending token after whitespace stripping.
    """

    kind = "invalid_code"

    def __init__(self, token: str) -> None:
        super().__init__(f"Code not valid: {token!r}")
        self.token = token


class MalformedTime(CodingError):
    """Raised when a time field cannot be read as a time of day."""

    kind = "malformed_time"

    def __init__(self, value: object, reason: str = "not a HH:MM:SS time") -> None:
        super().__init__(f"Malformed time {value!r}: {reason}")
        self.value = value
        self.reason = reason
