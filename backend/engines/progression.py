"""Level Progression with Result Types

Caller-side bookkeeping for level batches: after a fixed number of answers
the batch accuracy is compared with the level's pass threshold. The engine
never mutates progress; every update returns a new value.
"""
from dataclasses import asdict, dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

from core.config import settings
from core.errors import AppError, Ok, Result, validation_error
from core.logging import progress_logger
from engines.difficulty import MAX_LEVEL, MIN_LEVEL, clamp_level

log = progress_logger()

PASS_THRESHOLDS: Mapping[int, float] = MappingProxyType({
    1: 0.60,
    2: 0.70,
    3: 0.80,
    4: 0.90,
    5: 0.95,
    6: 1.00,
})


class BatchOutcome(str, Enum):
    CONTINUE = "continue"
    LEVEL_UP = "level_up"
    LEVEL_FAILED = "level_failed"
    MAX_LEVEL = "max_level"


@dataclass(frozen=True, slots=True)
class LevelProgress:
    level: int = MIN_LEVEL
    answered: int = 0   # answers in the current batch
    correct: int = 0    # correct answers in the current batch
    streak: int = 0

    @property
    def batch_accuracy(self) -> float:
        return self.correct / self.answered if self.answered else 0.0

    def to_dict(self) -> dict:
        return asdict(self)


class _ProgressSnapshot(BaseModel):
    level: int = Field(default=MIN_LEVEL, ge=MIN_LEVEL, le=MAX_LEVEL)
    answered: int = Field(default=0, ge=0)
    correct: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)


def parse_progress(raw: dict | None) -> Result[LevelProgress, AppError]:
    """Validate a stored progress snapshot."""
    try:
        snap = _ProgressSnapshot.model_validate(raw or {})
    except ValidationError as e:
        first = e.errors()[0]
        return validation_error(
            f"Invalid progress snapshot: {first['msg']}",
            field=".".join(str(p) for p in first["loc"]),
            origin="progression",
        )
    if snap.correct > snap.answered:
        return validation_error(
            "Invalid progress snapshot: more correct answers than answered",
            field="correct",
            value=str(snap.correct),
            origin="progression",
        )
    return Ok(LevelProgress(**snap.model_dump()))


def record_answer(
    progress: LevelProgress,
    correct: bool,
    batch_size: int | None = None,
) -> tuple[LevelProgress, BatchOutcome]:
    """Count one answer and settle the batch once it is full."""
    batch_size = batch_size or settings.QUESTIONS_PER_LEVEL
    updated = replace(
        progress,
        answered=progress.answered + 1,
        correct=progress.correct + (1 if correct else 0),
        streak=progress.streak + 1 if correct else 0,
    )
    if updated.answered < batch_size:
        return updated, BatchOutcome.CONTINUE

    score = updated.batch_accuracy
    threshold = PASS_THRESHOLDS.get(updated.level, 1.0)
    if score < threshold:
        outcome = BatchOutcome.LEVEL_FAILED
        level = updated.level
    elif updated.level < MAX_LEVEL:
        outcome = BatchOutcome.LEVEL_UP
        level = updated.level + 1
    else:
        outcome = BatchOutcome.MAX_LEVEL
        level = updated.level

    log.info(
        "level_batch_settled",
        outcome=outcome.value,
        level=updated.level,
        new_level=level,
        score=round(score, 2),
        threshold=threshold,
    )
    return replace(updated, level=level, answered=0, correct=0), outcome


def set_level(progress: LevelProgress, level: int) -> LevelProgress:
    """Jump to a level manually; the current batch starts over."""
    return replace(progress, level=clamp_level(level), answered=0, correct=0)
