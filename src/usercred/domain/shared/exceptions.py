"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy for the whole package. All
errors raised by the access layer and the account service inherit from
DomainException so the presentation layer can render them uniformly.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers of the service layer."""

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not Found Errors
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CREDENTIAL_NOT_FOUND = "CREDENTIAL_NOT_FOUND"

    # Store Errors
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    CONNECTION_FAILED = "CONNECTION_FAILED"
    GENERATED_KEY_MISSING = "GENERATED_KEY_MISSING"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context such as the offending id or username
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails before touching the store."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """Raised when an update or delete targets a row that does not exist.

    A read that finds nothing is not an error; readers return ``None``.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConstraintViolationError(DomainException):
    """Raised when the store rejects a write because of a constraint.

    The store's own message is kept so it can be shown to the user
    (duplicate username, duplicate credential owner, missing owner).
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONSTRAINT_VIOLATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class StoreConnectionError(DomainException):
    """Raised when the database cannot be reached or rejects the login."""

    def __init__(
        self,
        message: str = "Could not connect to the database",
        code: ErrorCode = ErrorCode.CONNECTION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class PersistenceError(DomainException):
    """Raised when an insert succeeded but the store returned no generated key."""

    def __init__(
        self,
        message: str = "Insert failed, no generated key was returned",
        code: ErrorCode = ErrorCode.GENERATED_KEY_MISSING,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
