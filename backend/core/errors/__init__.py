"""Result-based error handling for the engine's input boundaries.

Usage:
    from core.errors import Ok, Err

    match QuizFilters.parse(raw):
        case Ok(filters):
            session.filters = filters
        case Err(error):
            log.warning("filters_rejected", code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    collect_results,
    ensure,
)
from .builders import validation_error, invariant_violated

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "collect_results",
    "ensure",
    "validation_error",
    "invariant_violated",
]
