"""Error builders: one constructor per kind of boundary failure."""
from .types import AppError, ErrorCode, ErrorContext, Err


def validation_error(
    message: str,
    *,
    field: str | None = None,
    value: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Caller data that failed validation. None-valued metadata is dropped."""
    meta = {"field": field, "value": value, **metadata}
    return Err(AppError(
        code=ErrorCode.E2000_VALIDATION_GENERIC,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def invariant_violated(invariant: str, detail: str = "", origin: str = "", **metadata) -> Err[AppError]:
    """A static table broke one of its invariants (named by ``invariant``)."""
    msg = f"Invariant violated: {invariant}"
    if detail:
        msg += f" ({detail})"
    return Err(AppError(
        code=ErrorCode.E5004_INVARIANT_VIOLATED,
        message=msg,
        context=ErrorContext(origin=origin),
        metadata={"invariant": invariant, **metadata},
    ))
