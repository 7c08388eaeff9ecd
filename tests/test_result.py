from __future__ import annotations

import pytest

from filepath import Failure, Result, ResultUnwrapError, Success


def test_success_exposes_value_only() -> None:
    result = Success(42)

    assert result.is_success
    assert not result.is_failure
    assert result.value == 42
    assert result.error is None


def test_failure_exposes_error_only() -> None:
    result = Failure("boom")

    assert result.is_failure
    assert not result.is_success
    assert result.error == "boom"
    assert result.value is None


def test_success_of_none_is_still_success() -> None:
    result = Success(None)

    assert result.is_success
    assert result.value is None
    assert result.error is None


def test_handlers_run_only_for_matching_variant() -> None:
    seen: list[tuple[str, object]] = []

    Success(1).on_failure(lambda e: seen.append(("failure", e))).on_success(
        lambda v: seen.append(("success", v))
    )
    Failure(2).on_success(lambda v: seen.append(("success", v))).on_failure(
        lambda e: seen.append(("failure", e))
    )

    assert seen == [("success", 1), ("failure", 2)]


def test_handlers_return_the_same_result() -> None:
    success = Success("ok")
    failure = Failure("bad")

    assert success.on_success(lambda _: None) is success
    assert success.on_failure(lambda _: None) is success
    assert failure.on_success(lambda _: None) is failure
    assert failure.on_failure(lambda _: None) is failure


def test_unwrap() -> None:
    assert Success("ok").unwrap() == "ok"
    with pytest.raises(ResultUnwrapError):
        Failure("bad").unwrap()


def test_unwrap_failure_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        Failure("bad").unwrap()


def test_variants_share_the_result_base() -> None:
    assert isinstance(Success(1), Result)
    assert isinstance(Failure(1), Result)


def test_result_base_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Result()


def test_result_is_closed_to_new_variants() -> None:
    with pytest.raises(TypeError):

        class Maybe(Result):  # noqa: F841
            pass


def test_results_are_values() -> None:
    assert Success(1) == Success(1)
    assert Failure(1) == Failure(1)
    assert Success(1) != Failure(1)
    assert repr(Success(1)) == "Success(1)"
    assert repr(Failure("x")) == "Failure('x')"


def test_isinstance_dispatch_on_variants() -> None:
    def describe(result: Result[int, str]) -> str:
        if isinstance(result, Success):
            return f"value {result.value}"
        return f"error {result.error}"

    assert describe(Success(3)) == "value 3"
    assert describe(Failure("x")) == "error x"
