"""
Exception hierarchy raised by the EMT client.

    EmtError
     ├── RequestError        the remote call did not yield usable JSON
     │    ├── TransportError network failure, timeout or non-2xx status
     │    └── DecodeError    the body is not valid JSON
     └── UsageError          the caller asked for something this client
                             cannot build (unknown category, endpoint id, ...)
"""

from __future__ import annotations


class EmtError(Exception):
    """Base class of every error raised by emtmad."""


class RequestError(EmtError):
    """A dispatched request failed. The original exception is in `__cause__`."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(RequestError):
    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class DecodeError(RequestError):
    _PREVIEW = 200

    def __init__(self, message: str, *, url: str | None = None, body: str = "") -> None:
        super().__init__(message, url=url)
        self.body = body[: self._PREVIEW]


class UsageError(EmtError):
    pass


__all__ = [
    "EmtError",
    "RequestError",
    "TransportError",
    "DecodeError",
    "UsageError",
]
