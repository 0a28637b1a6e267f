"""ULN exception hierarchy."""

from __future__ import annotations


class ULNError(Exception):
    """Base exception for all ULN errors."""


class NullInputError(ULNError, TypeError):
    """None was supplied where a ULN value or object is required."""


class InvalidFormatError(ULNError, ValueError):
    """Candidate is not a string of exactly ten ASCII digits."""

    def __init__(self, value: object, message: str = "Invalid ULN format") -> None:
        self.value = value
        super().__init__(message)


class InvalidValueError(ULNError, ValueError):
    """Candidate is well formed but fails the ULN checksum."""

    def __init__(self, value: object, message: str = "Invalid ULN value") -> None:
        self.value = value
        super().__init__(message)
