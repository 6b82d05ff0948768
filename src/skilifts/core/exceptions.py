"""SkiLifts error kinds.

Every failure surfaced by the record service is a ``SkiLiftsError`` tagged
with an ``ErrorKind``; the kind alone decides the HTTP status and error code.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION_ERROR"
    STORAGE = "DYNAMODB_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.STORAGE: 500,
}


class SkiLiftsError(Exception):
    """Base exception for all SkiLifts errors."""

    kind: ErrorKind = ErrorKind.STORAGE

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def code(self) -> str:
        return self.kind.value


class NotFoundError(SkiLiftsError):
    """No item exists for the requested (Lift, Metadata) key."""

    kind = ErrorKind.NOT_FOUND


class StorageError(SkiLiftsError):
    """DynamoDB call failed, or a write had nothing to do."""

    kind = ErrorKind.STORAGE


class InvalidInputError(SkiLiftsError):
    """Request is well-formed but addresses the wrong record shape."""

    kind = ErrorKind.VALIDATION
