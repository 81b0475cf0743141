from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NoClassSelectedError(ValidationError):
    """Raised when an operation needs a selected class and there is none."""


class DuplicateRollNumberError(ValidationError):
    """Raised when a roll number is already taken inside the class."""

    def __init__(self, roll_number: str, student):
        self.roll_number = roll_number
        self.student = student
        super().__init__(f'Roll number "{roll_number}" is already assigned to {student.name}.')


class CorruptPersistedStateError(DomainError):
    """Raised while decoding stored roster data that is missing or malformed."""


class ImportParseError(DomainError):
    """Raised when an uploaded roster file cannot be read."""
