"""Errors raised by the application store and the wire codec."""

from __future__ import annotations


class ApplicationConflictError(ValueError):
    """An application with the same title is already stored."""

    def __init__(self, title: str):
        super().__init__(f"Application with title {title!r} already exists")
        self.title = title


class ApplicationDecodeError(ValueError):
    """A request payload could not be decoded into an application record."""
