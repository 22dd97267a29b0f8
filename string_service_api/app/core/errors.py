"""
Error types shared by the dispatcher and the services.

There are two tiers.  A :class:`DecodeError` means the request body
could not be turned into the operation's request model; the
dispatcher aborts with HTTP 400.  A :class:`DomainError` is a
business-rule failure; the dispatcher reports it in the ``err``
field of an otherwise normal response.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Domain error variants.  The value is the message clients see."""

    EMPTY_INPUT = "empty string"
    UPSTREAM_UNAVAILABLE = "nonprofit search unavailable"


class DomainError(Exception):
    """Business-rule failure raised by a service function."""

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        super().__init__(kind.value)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        return self.kind.value


class DecodeError(Exception):
    """The request body is not valid JSON or does not fit the request model."""
