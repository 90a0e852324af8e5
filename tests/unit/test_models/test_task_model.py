"""Tests for Task model."""

import pytest
from pydantic import ValidationError
from src.models.task import Task, TaskPayload, STATUS_CREATED
from tests.utils.helpers import ALICE, T0, MINUTE_NS


def _task(**overrides) -> Task:
    fields = dict(
        task_id="01ARZ3NDEKTSV4RRFFQ69G5FAV",
        title="Follow up with client",
        description="Call about the viewing",
        creator=ALICE,
        due_at=T0 + 60 * MINUTE_NS,
        created_at=T0,
    )
    fields.update(overrides)
    return Task(**fields)


@pytest.mark.unit
def test_task_defaults():
    """Test optional fields start absent and status starts as Created."""
    task = _task()

    assert task.status == STATUS_CREATED
    assert task.category == ""
    assert task.assignee_id is None
    assert task.updated_at is None


@pytest.mark.unit
def test_task_title_required():
    """Test that an empty title is rejected."""
    with pytest.raises(ValidationError):
        _task(title="")


@pytest.mark.unit
def test_task_creator_required():
    """Test that creator is required."""
    with pytest.raises(ValidationError):
        Task(
            task_id="01ARZ3NDEKTSV4RRFFQ69G5FAV",
            title="Test",
            description="Test",
            due_at=T0,
            created_at=T0,
        )


@pytest.mark.unit
@pytest.mark.parametrize("status", ["Completed", "completed", "COMPLETED"])
def test_task_is_completed_ignores_case(status):
    assert _task(status=status).is_completed()


@pytest.mark.unit
def test_task_is_past_due():
    """Test due time must be strictly before now."""
    task = _task(due_at=T0)

    assert not task.is_past_due(T0)
    assert task.is_past_due(T0 + 1)


@pytest.mark.unit
def test_completed_task_is_never_past_due():
    task = _task(due_at=T0, status="Completed")

    assert not task.is_past_due(T0 + 10 * MINUTE_NS)


@pytest.mark.unit
def test_task_payload_defaults_to_empty_values():
    payload = TaskPayload()

    assert payload.title == ""
    assert payload.description == ""
    assert payload.due_in_minutes == 0
