"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class MalformedRecordError(DomainException):
    """A persisted line could not be turned back into a Product."""

    def __init__(self, message: str, line: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line = line
        self.line_number = line_number
