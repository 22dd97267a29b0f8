"""
Service layer for string operations.

Pure functions on a single string.  ``uppercase`` and ``concat``
refuse the empty string; ``count`` accepts anything.
"""

from string_service_api.app.core.errors import DomainError, ErrorKind


class StringService:
    """Operations on strings."""

    @classmethod
    def uppercase(cls, s: str) -> str:
        """Return ``s`` in upper case.

        Raises ``DomainError(EMPTY_INPUT)`` when ``s`` is empty.
        """
        if s == "":
            raise DomainError(ErrorKind.EMPTY_INPUT)
        return s.upper()

    @classmethod
    def concat(cls, s: str) -> str:
        """Return ``s`` with every space removed.

        Only the space character is removed; tabs and newlines are
        kept.  Raises ``DomainError(EMPTY_INPUT)`` when ``s`` is empty.
        """
        if s == "":
            raise DomainError(ErrorKind.EMPTY_INPUT)
        return s.replace(" ", "")

    @classmethod
    def count(cls, s: str) -> int:
        return len(s)
