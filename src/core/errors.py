"""Application errors.

Exceptions are for exceptional cases; expected absence is `None`. Errors
carry a `details` dict so callers can render or log them without parsing
the message.
"""

from __future__ import annotations

from typing import Any


class HelloError(Exception):
    """Base error for hello-d2."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def __str__(self) -> str:
        return self.message


class InvalidNameError(HelloError):
    """The name to greet cannot be used."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid name {name!r}: {reason}", {"name": name, "reason": reason})
        self.name = name
        self.reason = reason
