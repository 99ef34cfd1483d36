"""Tests for engines/progression.py."""
from core.errors import ErrorCode
from engines.progression import (
    PASS_THRESHOLDS,
    BatchOutcome,
    LevelProgress,
    parse_progress,
    record_answer,
    set_level,
)


def _run(progress, answers, batch_size=10):
    outcome = BatchOutcome.CONTINUE
    for correct in answers:
        progress, outcome = record_answer(progress, correct, batch_size=batch_size)
    return progress, outcome


def test_thresholds_rise_with_level():
    values = [PASS_THRESHOLDS[level] for level in sorted(PASS_THRESHOLDS)]
    assert values == sorted(values)
    assert PASS_THRESHOLDS[6] == 1.0


def test_batch_in_progress_continues():
    progress, outcome = _run(LevelProgress(), [True, False, True])
    assert outcome is BatchOutcome.CONTINUE
    assert (progress.answered, progress.correct, progress.streak) == (3, 2, 1)


def test_passing_batch_levels_up():
    """6 of 10 meets the level-1 threshold of 60%."""
    progress, outcome = _run(LevelProgress(), [True] * 6 + [False] * 4)
    assert outcome is BatchOutcome.LEVEL_UP
    assert progress.level == 2
    assert (progress.answered, progress.correct) == (0, 0)


def test_failing_batch_stays_and_resets():
    progress, outcome = _run(LevelProgress(level=3), [True] * 7 + [False] * 3)
    assert outcome is BatchOutcome.LEVEL_FAILED
    assert progress.level == 3
    assert progress.answered == 0


def test_top_level_requires_perfect_batch():
    _, outcome = _run(LevelProgress(level=6), [True] * 9 + [False])
    assert outcome is BatchOutcome.LEVEL_FAILED
    progress, outcome = _run(LevelProgress(level=6), [True] * 10)
    assert outcome is BatchOutcome.MAX_LEVEL
    assert progress.level == 6


def test_streak_survives_batch_reset():
    progress, _ = _run(LevelProgress(), [True] * 12)
    assert progress.streak == 12
    assert progress.answered == 2


def test_record_answer_does_not_mutate():
    start = LevelProgress()
    record_answer(start, True, batch_size=5)
    assert start == LevelProgress()


def test_batch_accuracy():
    assert LevelProgress().batch_accuracy == 0.0
    assert LevelProgress(answered=4, correct=3).batch_accuracy == 0.75


def test_set_level_clamps_and_resets_batch():
    progress = set_level(LevelProgress(answered=5, correct=4, streak=4), 9)
    assert progress == LevelProgress(level=6, answered=0, correct=0, streak=4)
    assert set_level(progress, 0).level == 1


def test_parse_progress_round_trip():
    progress = LevelProgress(level=4, answered=7, correct=5, streak=2)
    assert parse_progress(progress.to_dict()).unwrap() == progress


def test_parse_progress_defaults():
    assert parse_progress(None).unwrap() == LevelProgress()


def test_parse_progress_rejects_out_of_range_level():
    result = parse_progress({"level": 9})
    assert result.is_err()
    error = result.unwrap_err()
    assert error.code is ErrorCode.E2000_VALIDATION_GENERIC
    assert error.metadata["field"] == "level"


def test_parse_progress_rejects_impossible_counts():
    result = parse_progress({"answered": 2, "correct": 3})
    assert result.is_err()
    assert result.unwrap_err().metadata["field"] == "correct"
