"""Result Types for Boundary Validation

Ok/Err values returned where outside data enters the engine: caller filters,
stored progress snapshots and the static lexicon's invariant checks. Callers
branch on them with structural pattern matching.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class ErrorCode(Enum):
    """Error codes grouped by range.

    E2xxx: rejected caller data
    E5xxx: broken invariants of the static tables
    """
    E2000_VALIDATION_GENERIC = 2000
    E5004_INVARIANT_VIOLATED = 5004

    @property
    def category(self) -> str:
        return "validation" if self.value < 5000 else "business"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""  # module or boundary that produced the error


@dataclass(frozen=True, slots=True)
class AppError:
    """A typed error with a message and structured metadata for logging."""
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable) -> Err[E]:
        return self

    def and_then(self, f: Callable) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]


def collect_results(results: list[Result[T, AppError]]) -> Result[list[T], list[AppError]]:
    """Ok with every value, or Err with every error when any check failed."""
    values: list[T] = []
    errors: list[AppError] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                errors.append(e)
    return Err(errors) if errors else Ok(values)


def ensure(condition: bool, error: Err[AppError]) -> Result[None, AppError]:
    return Ok(None) if condition else error
