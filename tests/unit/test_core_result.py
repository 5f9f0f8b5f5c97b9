"""Tests for Success/Failure result types."""

import dataclasses

import pytest

from packpin.core.result import Failure, Success
from packpin.domain.errors import TransportError


def describe(result) -> str:
    match result:
        case Success(value=None):
            return "empty"
        case Success(value=value):
            return f"ok:{value}"
        case Failure(error=error):
            return f"err:{error.code.value}"
    return "unknown"


class TestResult:
    def test_success_holds_value(self):
        assert Success(value={"id": 1}).value == {"id": 1}

    def test_failure_holds_error(self):
        error = TransportError(message="refused")
        assert Failure(error=error).error is error

    def test_results_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Success(value=1).value = 2  # type: ignore[misc]

    def test_results_require_keywords(self):
        with pytest.raises(TypeError):
            Success(1)  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (Success(value=None), "empty"),
            (Success(value="x"), "ok:x"),
            (Failure(error=TransportError(message="t")), "err:603"),
        ],
    )
    def test_pattern_matching(self, result, expected):
        assert describe(result) == expected
