"""
Tests for the Result monad.

Tests cover:
  - Success/Failure creation and introspection
  - map, map_failure, flat_map transformations
  - Side effects (peek)
  - from_computation
  - Pattern matching, equality and repr
"""

from __future__ import annotations

import pytest

from railway import ErrorCode, Failure, FailureDescription, Result, Success

# ═══════════════════════════════════════════════════════════════
# 1. Creation & Introspection
# ═══════════════════════════════════════════════════════════════


class TestSuccessCreation:
    def test_success_wraps_value(self):
        result = Result.success(("CERT-001",))
        assert result.is_success()
        assert not result.is_failure()
        assert result.value() == ("CERT-001",)

    def test_success_rejects_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            Success(None)

    def test_success_is_truthy(self):
        assert Result.success(0)


class TestFailureCreation:
    def test_failure_with_code_and_message(self):
        result = Result.failure(ErrorCode.VALIDATION_ERROR, "Certificate ID is required")
        assert result.is_failure()
        assert result.error().code == ErrorCode.VALIDATION_ERROR
        assert result.error().message == "Certificate ID is required"

    def test_failure_keeps_exception(self):
        ex = ConnectionError("refused")
        result = Result.failure(ErrorCode.EXTERNAL_SERVICE_ERROR, "Download failed", ex)
        assert result.error().exception is ex


    def test_failure_rejects_none(self):
        with pytest.raises(TypeError, match="must not be None"):
            Failure(None)

    def test_failure_is_falsy(self):
        assert not Result.failure(ErrorCode.NOT_FOUND, "missing")


class TestValueExtraction:
    def test_value_on_failure_raises(self):
        with pytest.raises(ValueError, match="Cannot get value from a Failure"):
            Result.failure(ErrorCode.NOT_FOUND, "missing").value()

    def test_error_on_success_raises(self):
        with pytest.raises(ValueError, match="Cannot get error from a Success"):
            Result.success(42).error()


# ═══════════════════════════════════════════════════════════════
# 2. Transformations
# ═══════════════════════════════════════════════════════════════


class TestMap:
    def test_map_transforms_success_value(self):
        assert Result.success(" cert-001 ").map(str.strip).value() == "cert-001"

    def test_map_short_circuits_on_failure(self):
        result = Result.failure(ErrorCode.VALIDATION_ERROR, "bad").map(lambda x: x * 2)
        assert result.error().code == ErrorCode.VALIDATION_ERROR


class TestMapFailure:
    def test_map_failure_replaces_description(self):
        result = Result.failure(ErrorCode.VALIDATION_ERROR, "column missing").map_failure(
            lambda e: FailureDescription(ErrorCode.EXTERNAL_SERVICE_ERROR, "Try later", e.exception)
        )
        assert result.error().code == ErrorCode.EXTERNAL_SERVICE_ERROR
        assert result.error().message == "Try later"

    def test_map_failure_passes_through_success(self):
        result = Result.success(42).map_failure(
            lambda e: FailureDescription(e.code, "should not run")
        )
        assert result.value() == 42


class TestFlatMap:
    def test_flat_map_chains_success(self):
        def require_positive(x: int) -> Result[int]:
            if x > 0:
                return Result.success(x)
            return Result.failure(ErrorCode.VALIDATION_ERROR, "Must be positive")

        assert Result.success(5).flat_map(require_positive).value() == 5
        assert Result.success(-1).flat_map(require_positive).is_failure()

    def test_flat_map_short_circuits_on_first_failure(self):
        calls: list[str] = []

        def step_a(x: int) -> Result[int]:
            calls.append("a")
            return Result.failure(ErrorCode.VALIDATION_ERROR, "fail at a")

        def step_b(x: int) -> Result[int]:
            calls.append("b")
            return Result.success(x + 1)

        result = Result.success(1).flat_map(step_a).flat_map(step_b)
        assert result.is_failure()
        assert calls == ["a"]


class TestEither:
    def test_either_on_success(self):
        msg = Result.success("Jane").either(
            on_success=lambda name: f"Verified {name}",
            on_failure=lambda err: f"Error: {err.message}",
        )
        assert msg == "Verified Jane"

    def test_either_on_failure(self):
        msg = Result.failure(ErrorCode.NOT_FOUND, "not found").either(
            on_success=lambda v: f"Got: {v}",
            on_failure=lambda err: f"Error: {err.message}",
        )
        assert msg == "Error: not found"


class TestPatternMatching:
    def test_match_success(self):
        match Result.success(42):
            case Success(v):
                assert v == 42
            case Failure(_):
                pytest.fail("Should be Success")

    def test_match_failure(self):
        match Result.failure(ErrorCode.VALIDATION_ERROR, "bad"):
            case Success(_):
                pytest.fail("Should be Failure")
            case Failure(err):
                assert err.code == ErrorCode.VALIDATION_ERROR


# ═══════════════════════════════════════════════════════════════
# 3. Side Effects
# ═══════════════════════════════════════════════════════════════


class TestPeek:
    def test_peek_executes_on_success(self):
        captured: list[int] = []
        result = Result.success(42).peek(captured.append)
        assert captured == [42]
        assert result.value() == 42

    def test_peek_skips_on_failure(self):
        captured: list[int] = []
        Result.failure(ErrorCode.NOT_FOUND, "nope").peek(captured.append)
        assert captured == []


# ═══════════════════════════════════════════════════════════════
# 4. from_computation
# ═══════════════════════════════════════════════════════════════


class TestFromComputation:
    def test_wraps_return_value(self):
        result = Result.from_computation(lambda: "text", ErrorCode.TECHNICAL_ERROR, "boom")
        assert result.value() == "text"

    def test_captures_exception(self):
        def explode() -> str:
            raise ValueError("broken row")

        result = Result.from_computation(explode, ErrorCode.VALIDATION_ERROR, "Parse failed")
        assert result.error().code == ErrorCode.VALIDATION_ERROR
        assert result.error().message == "Parse failed"
        assert isinstance(result.error().exception, ValueError)


# ═══════════════════════════════════════════════════════════════
# 5. Equality & repr
# ═══════════════════════════════════════════════════════════════


class TestEqualityAndRepr:
    def test_successes_with_equal_values_are_equal(self):
        assert Result.success(1) == Result.success(1)
        assert Result.success(1) != Result.success(2)

    def test_failures_compare_code_and_message(self):
        a = Result.failure(ErrorCode.NOT_FOUND, "missing")
        b = Result.failure(ErrorCode.NOT_FOUND, "missing", KeyError("x"))
        assert a == b
        assert a != Result.failure(ErrorCode.VALIDATION_ERROR, "missing")

    def test_success_never_equals_failure(self):
        assert Result.success("x") != Result.failure(ErrorCode.NOT_FOUND, "x")

    def test_repr(self):
        assert repr(Result.success(3)) == "Success(3)"
        assert repr(Result.failure(ErrorCode.NOT_FOUND, "gone")) == "Failure(NOT_FOUND: 'gone')"
