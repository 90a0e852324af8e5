"""Tests for Result model and error classification."""

import pytest
from src.models.result import Result, ErrorKind, classify_error
from src.utils.errors import (
    AuthorizationError,
    CreationError,
    NotFoundError,
    TaskTrackerError,
    ValidationError,
)


@pytest.mark.unit
def test_success_result():
    result = Result.success([1, 2])

    assert result.ok
    assert result.value == [1, 2]
    assert result.error is None
    assert result.message is None
    assert result.unwrap() == [1, 2]


@pytest.mark.unit
def test_failure_result():
    result = Result.failure(ErrorKind.NOT_FOUND, "Task id:abc not found")

    assert not result.ok
    assert result.value is None
    assert result.error == ErrorKind.NOT_FOUND
    assert result.message == "Task id:abc not found"


@pytest.mark.unit
@pytest.mark.parametrize("error, kind", [
    (ValidationError("bad"), ErrorKind.VALIDATION),
    (NotFoundError("missing"), ErrorKind.NOT_FOUND),
    (AuthorizationError("nope"), ErrorKind.AUTHORIZATION),
    (CreationError("broken"), ErrorKind.CREATION),
    (TaskTrackerError("other"), ErrorKind.INTERNAL),
])
def test_classify_error(error, kind):
    assert classify_error(error) == kind
    assert Result.from_error(error).message == error.message


@pytest.mark.unit
def test_unwrap_raises_matching_exception():
    result = Result.failure(ErrorKind.AUTHORIZATION, "Only authorized user can access Task")

    with pytest.raises(AuthorizationError, match="Only authorized user"):
        result.unwrap()


@pytest.mark.unit
def test_unwrap_internal_raises_base_error():
    with pytest.raises(TaskTrackerError):
        Result.failure(ErrorKind.INTERNAL, "boom").unwrap()


@pytest.mark.unit
def test_failure_serializes_kind_as_string():
    data = Result.failure(ErrorKind.VALIDATION, "Missing or invalid input data").model_dump(mode="json")

    assert data == {
        "ok": False,
        "value": None,
        "error": "VALIDATION",
        "message": "Missing or invalid input data",
    }
