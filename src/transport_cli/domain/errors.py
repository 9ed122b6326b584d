"""Exceptions raised while querying and decoding connections."""


class TransportCliError(Exception):
    """Base class for failures that end a run with a non-zero exit code."""

    exit_code = 1


class UsageError(TransportCliError):
    """Raised when the command line arguments are unusable."""

    exit_code = 2


class TransportError(TransportCliError):
    """Raised when the API cannot be reached or answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(TransportCliError):
    """Raised when the API response body is not valid connection JSON."""


__all__ = [
    "DecodeError",
    "TransportCliError",
    "TransportError",
    "UsageError",
]
