"""Shared pytest fixtures and configuration."""

import os
import itertools
import pytest
from freezegun import freeze_time

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from src.models.call_context import CallContext
from src.services.task_service import TaskService
from tests.utils.helpers import ALICE, BOB, T0


@pytest.fixture
def id_factory():
    """Deterministic, unique record ids."""
    counter = itertools.count(1)
    return lambda: f"rec-{next(counter):04d}"


@pytest.fixture
def service(id_factory):
    """TaskService reporting empty views as NotFound failures."""
    return TaskService(id_factory=id_factory, empty_results_as_errors=True)


@pytest.fixture
def lenient_service(id_factory):
    """TaskService returning empty lists for empty views."""
    return TaskService(id_factory=id_factory, empty_results_as_errors=False)


@pytest.fixture
def make_ctx():
    """Build a CallContext; time defaults to T0."""
    def _make(caller: str = ALICE, now: int = T0) -> CallContext:
        return CallContext(caller=caller, now=now)
    return _make


@pytest.fixture
def alice(make_ctx):
    return make_ctx(ALICE)


@pytest.fixture
def bob(make_ctx):
    return make_ctx(BOB)


@pytest.fixture
def sample_task(service, alice):
    """A task created by alice, due an hour after T0."""
    return service.create_task(
        alice,
        "Write quarterly report",
        "Collect numbers from finance and draft the summary",
        "reporting",
        60,
    ).unwrap()


@pytest.fixture
def sample_employee(service, alice):
    return service.create_employee(alice, "Ada Lovelace", "ada@example.com").unwrap()


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time
