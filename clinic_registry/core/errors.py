from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class ErrorKind(str, Enum):
    EMPTY_FIELD = "empty_field"
    OUT_OF_RANGE = "out_of_range"
    INVALID_FORMAT = "invalid_format"
    MISSING_REFERENCE = "missing_reference"
    SCHEDULING_CONFLICT = "scheduling_conflict"
    DUPLICATE_ID = "duplicate_id"

@dataclass(frozen=True)
class ClinicError:
    """A failed validation or registry rule, carried as a value."""
    kind: ErrorKind
    message: str
    field: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "field": self.field,
            "message": self.message
        }

class ClinicException(Exception):
    """Raised by Result.unwrap() when the result holds an error."""

    def __init__(self, error: ClinicError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a constructor or registry operation.

    Exactly one of ``value`` and ``error`` is meaningful: when ``error`` is
    set the operation aborted and nothing was stored.
    """
    value: Optional[T] = None
    error: Optional[ClinicError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, field: Optional[str] = None) -> "Result[T]":
        return cls(error=ClinicError(kind=kind, message=message, field=field))

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise ClinicException with the error."""
        if self.error is not None:
            raise ClinicException(self.error)
        return self.value
