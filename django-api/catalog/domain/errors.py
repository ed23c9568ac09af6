"""Domain error codes for the catalog module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORAGE_QUERY_FAILED = "STORAGE_QUERY_FAILED"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    TAXONOMY_ENTRY_NOT_FOUND = "TAXONOMY_ENTRY_NOT_FOUND"
    INVALID_TAXONOMY_TYPE = "INVALID_TAXONOMY_TYPE"
    DUPLICATE_NAME = "DUPLICATE_NAME"
    REQUIRED_FIELD = "REQUIRED_FIELD"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class StorageQueryError(DomainError):
    """Raised when a query against the catalog storage fails."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_QUERY_FAILED,
            message="Storage query failed",
        )
        self.operation = operation


class SessionNotFoundError(DomainError):
    """Raised when a session is not found."""

    def __init__(self, session_id: str) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )
        self.session_id = session_id


class TaxonomyEntryNotFoundError(DomainError):
    """Raised when a topic or category is not found."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(
            code=ErrorCode.TAXONOMY_ENTRY_NOT_FOUND,
            message="Entry not found",
        )
        self.entry_id = entry_id


class InvalidTaxonomyTypeError(DomainError):
    """Raised when a topic or category type is outside the fixed set."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TAXONOMY_TYPE,
            message="Invalid taxonomy type",
        )
        self.value = value


class DuplicateNameError(DomainError):
    """Raised when a topic or category name is already taken."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_NAME,
            message="Name already exists",
        )
        self.name = name


class RequiredFieldError(DomainError):
    """Raised when a required input field is missing or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.REQUIRED_FIELD,
            message="Required field is missing",
        )
        self.field = field
