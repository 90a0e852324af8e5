"""Result value returned by every service operation."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

from src.utils.errors import (
    TaskTrackerError,
    ValidationError,
    NotFoundError,
    AuthorizationError,
    CreationError,
)


class ErrorKind(str, Enum):
    """Failure classification."""
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    AUTHORIZATION = "AUTHORIZATION"
    CREATION = "CREATION"
    INTERNAL = "INTERNAL"


_ERROR_KINDS: dict[type, ErrorKind] = {
    ValidationError: ErrorKind.VALIDATION,
    NotFoundError: ErrorKind.NOT_FOUND,
    AuthorizationError: ErrorKind.AUTHORIZATION,
    CreationError: ErrorKind.CREATION,
}

_ERROR_TYPES: dict[ErrorKind, type] = {kind: exc for exc, kind in _ERROR_KINDS.items()}


def classify_error(error: TaskTrackerError) -> ErrorKind:
    """Map a core exception to its ErrorKind."""
    for exc_type, kind in _ERROR_KINDS.items():
        if isinstance(error, exc_type):
            return kind
    return ErrorKind.INTERNAL


class Result(BaseModel):
    """Success carries a value; failure carries an error kind and message."""
    ok: bool = Field(..., description="True on success")
    value: Any = Field(None, description="Operation result on success")
    error: Optional[ErrorKind] = Field(None, description="Failure classification")
    message: Optional[str] = Field(None, description="Human-readable failure message")

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Result":
        return cls(ok=False, error=error, message=message)

    @classmethod
    def from_error(cls, error: TaskTrackerError) -> "Result":
        return cls.failure(classify_error(error), error.message)

    def unwrap(self) -> Any:
        """Return the value, or raise the exception matching the failure."""
        if self.ok:
            return self.value
        exc_type = _ERROR_TYPES.get(self.error, TaskTrackerError)
        raise exc_type(self.message or "")
