"""Custom exceptions for the condition translator."""

from __future__ import annotations


class CondlogError(Exception):
    """Base exception for condition translation failures."""


class ClauseError(CondlogError):
    """Raised when a clause or term is malformed."""


class ConditionError(CondlogError):
    """Raised when a condition payload is invalid."""


class ValidationError(CondlogError):
    """Raised when a clause sequence references unbound variables."""


class DateParseError(CondlogError):
    """Raised when a date expression cannot be parsed."""
