"""Task store configuration read from environment variables."""

import os


# Nanoseconds in one minute; durations are supplied in minutes.
NANOS_PER_MINUTE = 60_000_000_000


class TaskStoreConfig:
    """Core behaviour switches."""

    # When true, an empty query result is reported as NotFoundError
    # instead of an empty list.
    EMPTY_RESULTS_AS_ERRORS = os.environ.get("TASKS_EMPTY_RESULTS_AS_ERRORS", "true").lower() == "true"
    DUE_UNIT_NANOS = int(os.environ.get("TASKS_DUE_UNIT_NANOS", str(NANOS_PER_MINUTE)))
    SERVICE_NAME = os.environ.get("SERVICE_NAME", "tasktrack-backend")
