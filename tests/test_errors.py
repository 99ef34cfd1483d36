"""Tests for the Result types and error builders."""
import pytest

from core.errors import (
    Err,
    ErrorCode,
    Ok,
    collect_results,
    ensure,
    invariant_violated,
    validation_error,
)


def test_ok_chain():
    result = Ok(2).map(lambda v: v * 3).and_then(lambda v: Ok(v + 1))
    assert result.unwrap() == 7


def test_err_short_circuits():
    error = validation_error("bad", field="level")
    assert error.map(lambda v: v * 3) is error
    assert error.unwrap_or(0) == 0
    with pytest.raises(ValueError):
        error.unwrap()


def test_pattern_matching():
    match validation_error("bad", field="nom", origin="quiz_filters"):
        case Err(e):
            assert e.metadata == {"field": "nom"}
            assert e.context.origin == "quiz_filters"
        case Ok(_):
            pytest.fail("expected Err")


def test_invariant_violated():
    error = invariant_violated("universal adjective pool", detail="no adjective tagged 'all'").unwrap_err()
    assert error.code is ErrorCode.E5004_INVARIANT_VIOLATED
    assert error.code.category == "business"
    assert error.metadata["invariant"] == "universal adjective pool"
    assert "no adjective tagged 'all'" in error.message


def test_collect_results_gathers_all_errors():
    checks = [
        ensure(True, invariant_violated("a")),
        ensure(False, invariant_violated("b")),
        ensure(False, invariant_violated("c")),
    ]
    result = collect_results(checks)
    assert result.is_err()
    assert [e.metadata["invariant"] for e in result.unwrap_err()] == ["b", "c"]
    assert collect_results([Ok(1), Ok(2)]).unwrap() == [1, 2]


def test_error_dict():
    data = validation_error("bad", field="mode").unwrap_err().to_dict()["error"]
    assert data["code"] == "E2000_VALIDATION_GENERIC"
    assert data["category"] == "validation"
    assert data["metadata"] == {"field": "mode"}


def test_error_codes_by_range():
    assert ErrorCode.E2000_VALIDATION_GENERIC.category == "validation"
    assert ErrorCode.E5004_INVARIANT_VIOLATED.category == "business"
    assert str(invariant_violated("x").unwrap_err()) == "[E5004_INVARIANT_VIOLATED] Invariant violated: x"
