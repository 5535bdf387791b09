"""Error types for stream pipelines and Optional values."""

from __future__ import annotations


class StreamError(Exception):
    """Base class for errors raised by streamkit."""


class NoSuchElementError(StreamError, LookupError):
    """Error raised when a value is requested from an empty Optional."""

    def __init__(self, message: str = "No value present") -> None:
        super().__init__(message)


class StreamConsumedError(StreamError, RuntimeError):
    """Error raised when a Stream is operated upon a second time.

    A Stream wraps a single-pass cursor, so once a stage has been linked to it
    or a terminal operation has drained it, the instance cannot be reused.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"stream '{name}' has already been operated upon or consumed")

    def __repr__(self) -> str:
        return f"StreamConsumedError(name={self.name!r})"
