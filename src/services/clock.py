"""System clock and identifier helpers used by the transport layer."""

import time
from ulid import ULID

from src.models.call_context import CallContext


def generate_record_id() -> str:
    """Generate a text-based record ID (ULID format)."""
    return str(ULID())


def system_time_ns() -> int:
    """Current wall-clock time in nanoseconds."""
    return time.time_ns()


def system_context(caller: str) -> CallContext:
    """Build a CallContext for ``caller`` stamped with the system clock."""
    return CallContext(caller=caller, now=system_time_ns())
