"""
Exceptions raised by namefully.

A name handling failure is not meant to crash a program: each exception names
the offending input (`source`) and what went wrong (`message`) so the caller can
decide whether to rebuild the name or skip it. Nothing is retried or recovered
internally; every error reaches the caller.

- `InputError`: wrong input shape or arity (e.g., 6 tokens, missing "last" key)
- `ValidationError`: content that breaks a grammar rule
- `NotAllowedError`: an operation on a closed builder or on an absent part
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable


class NameExceptionType(Enum):
    INPUT = "input"
    VALIDATION = "validation"
    NOT_ALLOWED = "notAllowed"


class NameException(Exception):
    """Base class for all name-related exceptions."""

    type: NameExceptionType

    def __init__(self, source: Any = None, message: str = ""):
        self.source = source
        self.message = message
        super().__init__(str(self))

    @property
    def source_as_string(self) -> str:
        """The string value of the source input."""
        source = self.source
        if source is None:
            return "null"
        if isinstance(source, str):
            return source
        if isinstance(source, dict):
            return " ".join(str(v) for v in source.values())
        if isinstance(source, Iterable):
            return " ".join(str(s) for s in source)
        return str(source)

    def __str__(self) -> str:
        report = f"{type(self).__name__} ({self.source_as_string})"
        if self.message:
            report = f"{report}: {self.message}"
        return report


class InputError(NameException):
    """Raised when a name source input has the wrong shape or arity."""

    type = NameExceptionType.INPUT


class ValidationError(NameException):
    """Raised when a name part fails a validation rule."""

    type = NameExceptionType.VALIDATION

    def __init__(self, source: Any = None, name_type: str = "namon", message: str = ""):
        self.name_type = name_type
        super().__init__(source, message)

    def __str__(self) -> str:
        report = f"ValidationError ({self.name_type}='{self.source_as_string}')"
        if self.message:
            report = f"{report}: {self.message}"
        return report


class NotAllowedError(NameException):
    """Raised when an operation is not allowed in the current state."""

    type = NameExceptionType.NOT_ALLOWED

    def __init__(self, source: Any = None, operation: str = "", message: str = ""):
        self.operation = operation
        super().__init__(source, message)

    def __str__(self) -> str:
        report = f"NotAllowedError ({self.source_as_string})"
        if self.operation:
            report = f"{report} - {self.operation}"
        if self.message:
            report = f"{report}: {self.message}"
        return report
