"""Task operations endpoint for Vercel.

POST a JSON body ``{"operation": "<name>", "payload": {...}}`` with the
caller identity in the ``X-Caller-Id`` header. The response body is the
serialized Result of the operation.
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError as PayloadValidationError

from src.models.call_context import CallContext
from src.models.employee import EmployeePayload, EmployeeRefPayload
from src.models.result import Result, ErrorKind
from src.models.task import (
    AssignmentPayload,
    CategoryFilterPayload,
    SearchPayload,
    StatusFilterPayload,
    TaskPayload,
    TaskRefPayload,
    TaskStatusPayload,
)
from src.services.clock import system_context
from src.services.task_service import TaskService
from src.utils.logging import correlation_context
from src.utils.logging_config import LoggingConfig

LoggingConfig.setup_logging()
_logger = logging.getLogger(__name__)

CALLER_HEADER = "X-Caller-Id"

STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CREATION: 500,
    ErrorKind.INTERNAL: 500,
}

# One service per process; the platform serializes requests.
_service: Optional[TaskService] = None


def get_task_service() -> TaskService:
    """Get or create the process-wide TaskService."""
    global _service
    if _service is None:
        _service = TaskService()
    return _service


def _task_fields(payload: dict) -> tuple:
    task = TaskPayload(**payload)
    return task.title, task.description, task.category, task.due_in_minutes


def _status_fields(payload: dict) -> tuple:
    change = TaskStatusPayload(**payload)
    return change.task_id, change.status


def _employee_fields(payload: dict) -> tuple:
    employee = EmployeePayload(**payload)
    return employee.name, employee.email


def _assignment_fields(payload: dict) -> tuple:
    assignment = AssignmentPayload(**payload)
    return assignment.task_id, assignment.employee_id


def _task_id(payload: dict) -> str:
    return TaskRefPayload(**payload).task_id


def _employee_id(payload: dict) -> str:
    return EmployeeRefPayload(**payload).employee_id


OPERATIONS: dict[str, Callable[[TaskService, CallContext, dict], Result]] = {
    "createTask": lambda s, ctx, p: s.create_task(ctx, *_task_fields(p)),
    "createEmployee": lambda s, ctx, p: s.create_employee(ctx, *_employee_fields(p)),
    "assignEmployee": lambda s, ctx, p: s.assign_employee(ctx, *_assignment_fields(p)),
    "updateTask": lambda s, ctx, p: s.update_task(ctx, _task_id(p), *_task_fields(p)),
    "deleteTask": lambda s, ctx, p: s.delete_task(ctx, _task_id(p)),
    "completeTask": lambda s, ctx, p: s.complete_task(ctx, _task_id(p)),
    "setTaskStatus": lambda s, ctx, p: s.set_task_status(ctx, *_status_fields(p)),
    "getTask": lambda s, ctx, p: s.get_task(ctx, _task_id(p)),
    "getTasks": lambda s, ctx, p: s.get_tasks(),
    "getTasksByStatus": lambda s, ctx, p: s.get_tasks_by_status(StatusFilterPayload(**p).status),
    "getTasksByCategory": lambda s, ctx, p: s.get_tasks_by_category(CategoryFilterPayload(**p).category),
    "getTasksByAssignee": lambda s, ctx, p: s.get_tasks_by_assignee(_employee_id(p)),
    "searchTasks": lambda s, ctx, p: s.search_tasks(SearchPayload(**p).query),
    "getTasksPastDue": lambda s, ctx, p: s.get_tasks_past_due(ctx),
    "getAnalysis": lambda s, ctx, p: s.get_analysis(ctx),
    "getAnalysisForAssignee": lambda s, ctx, p: s.get_analysis_for_assignee(ctx, _employee_id(p)),
    "getEmployee": lambda s, ctx, p: s.get_employee(_employee_id(p)),
    "getEmployees": lambda s, ctx, p: s.get_employees(),
}


def dispatch(service: TaskService, ctx: CallContext, operation: str, payload: Any) -> tuple[int, dict]:
    """
    Run one named operation.

    Returns (HTTP status code, JSON-ready body).
    """
    op = OPERATIONS.get(operation)
    if op is None:
        result = Result.failure(ErrorKind.VALIDATION, f"Unknown operation: {operation}")
        return 400, result.model_dump(mode="json")

    if not isinstance(payload, dict):
        payload = {}

    try:
        result = op(service, ctx, payload)
    except PayloadValidationError as e:
        missing = [err["loc"][0] for err in e.errors() if err["type"] == "missing"]
        message = f"Missing field: {missing[0]}" if missing else "Missing or invalid input data"
        result = Result.failure(ErrorKind.VALIDATION, message)

    status = 200 if result.ok else STATUS_CODES.get(result.error, 500)
    return status, result.model_dump(mode="json")


class handler(BaseHTTPRequestHandler):
    """Vercel serverless function handler for task operations."""

    def _send_json(self, status: int, body: dict) -> None:
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.end_headers()
        self.wfile.write(json.dumps(body).encode('utf-8'))

    def do_POST(self):
        """Handle POST request."""
        with correlation_context() as correlation_id:
            try:
                content_length = int(self.headers.get('Content-Length', 0))
                raw_body = self.rfile.read(content_length).decode('utf-8') if content_length > 0 else ""

                try:
                    body = json.loads(raw_body) if raw_body else {}
                except json.JSONDecodeError:
                    self._send_json(400, {"error": "invalid JSON body"})
                    return

                caller = self.headers.get(CALLER_HEADER, "").strip()
                if not caller:
                    self._send_json(401, {"error": "missing caller identity"})
                    return

                if not isinstance(body, dict):
                    body = {}
                operation = str(body.get("operation", ""))
                status, response = dispatch(
                    get_task_service(),
                    system_context(caller),
                    operation,
                    body.get("payload"),
                )
                _logger.info(
                    "Task operation handled",
                    extra={"operation": operation, "status_code": status, "correlation_id": correlation_id}
                )
                self._send_json(status, response)

            except Exception as e:
                _logger.error(f"Error handling task operation: {e}", exc_info=True)
                self._send_json(500, {"error": "internal server error"})

    def do_GET(self):
        """Handle GET request (health check)."""
        self._send_json(200, {"status": "ok", "endpoint": "tasks"})
