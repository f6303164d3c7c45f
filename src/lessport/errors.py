"""Error hierarchy for lessport."""
from __future__ import annotations


class LessPortError(Exception):
    """Base error for all lessport errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ResolutionError(LessPortError):
    """A Bootstrap version could not be resolved to tag data."""


class MissingInputError(LessPortError):
    """An expected input file does not exist yet."""

    def __init__(
        self, message: str, *, path: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class FileAccessError(LessPortError):
    """Reading or writing a file failed."""

    def __init__(
        self, message: str, *, path: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.path = path


class TransportError(LessPortError):
    """The server answered with something other than success or a redirect."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str = "",
        headers: dict[str, str] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}


class NetworkError(TransportError):
    """The request failed below HTTP (connection, timeout or protocol error)."""


def prefix_message(prefix: str, exc: BaseException) -> str:
    """Return *exc*'s message with a contextual *prefix* line in front."""
    return f"{prefix}:\n{exc}"
