"""Task mutation engine - validated create/update/delete with ownership checks."""

from typing import Callable, Optional

from pydantic import ValidationError as PayloadValidationError

from src.models.call_context import CallContext
from src.models.employee import Employee
from src.models.task import Task, STATUS_CREATED, STATUS_COMPLETED
from src.services.clock import generate_record_id
from src.services.record_store import RecordStore
from src.utils.config import TaskStoreConfig
from src.utils.errors import (
    AuthorizationError,
    CreationError,
    NotFoundError,
    ValidationError,
)
from src.utils.logging import get_structured_logger, mask_caller_id, mask_sensitive_data

logger = get_structured_logger(__name__)

INVALID_INPUT_MESSAGE = "Missing or invalid input data"
UNAUTHORIZED_MESSAGE = "Only authorized user can access Task"


def task_not_found(task_id: str) -> NotFoundError:
    return NotFoundError(f"Task id:{task_id} not found")


def employee_not_found(employee_id: str) -> NotFoundError:
    return NotFoundError(f"Employee id:{employee_id} not found")


def require_task(tasks: RecordStore[Task], task_id: str) -> Task:
    """Look up a task or raise NotFoundError."""
    task = tasks.get(task_id)
    if task is None:
        raise task_not_found(task_id)
    return task


def require_owner(task: Task, ctx: CallContext) -> None:
    """Only the creator may read or change a task by id."""
    if task.creator != ctx.caller:
        logger.warning(
            "Rejected access to task by non-creator",
            task_id=task.task_id,
            caller=mask_caller_id(ctx.caller),
        )
        raise AuthorizationError(UNAUTHORIZED_MESSAGE)


class TaskMutationEngine:
    """All writes to the task and employee stores go through this engine."""

    def __init__(
        self,
        tasks: RecordStore[Task],
        employees: RecordStore[Employee],
        id_factory: Callable[[], str] = generate_record_id,
        due_unit_nanos: int = TaskStoreConfig.DUE_UNIT_NANOS,
    ):
        self.tasks = tasks
        self.employees = employees
        self.id_factory = id_factory
        self.due_unit_nanos = due_unit_nanos

    def due_at(self, ctx: CallContext, due_in_minutes: int) -> int:
        """Absolute due time: now plus the duration in store time units."""
        return ctx.now + due_in_minutes * self.due_unit_nanos

    @staticmethod
    def _validate_task_input(title: Optional[str], description: Optional[str], due_in_minutes: Optional[int]) -> None:
        if not title or not description or not due_in_minutes:
            raise ValidationError(INVALID_INPUT_MESSAGE)
        if isinstance(due_in_minutes, bool) or not isinstance(due_in_minutes, int):
            raise ValidationError(INVALID_INPUT_MESSAGE)

    @staticmethod
    def _build_task(**fields) -> Task:
        try:
            return Task(**fields)
        except PayloadValidationError as e:
            raise ValidationError(INVALID_INPUT_MESSAGE) from e

    def _owned_task(self, ctx: CallContext, task_id: str) -> Task:
        task = require_task(self.tasks, task_id)
        require_owner(task, ctx)
        return task

    def create_task(
        self,
        ctx: CallContext,
        title: Optional[str],
        description: Optional[str],
        category: Optional[str],
        due_in_minutes: Optional[int],
    ) -> Task:
        """Create a task owned by the caller, due ``due_in_minutes`` from now."""
        self._validate_task_input(title, description, due_in_minutes)

        task = self._build_task(
            task_id=self.id_factory(),
            title=title,
            description=description,
            category=category or "",
            status=STATUS_CREATED,
            creator=ctx.caller,
            due_at=self.due_at(ctx, due_in_minutes),
            created_at=ctx.now,
        )

        try:
            self.tasks.insert_new(task.task_id, task)
        except Exception as e:
            logger.error(
                "Task creation failed",
                caller=mask_caller_id(ctx.caller),
                error=str(e),
            )
            raise CreationError(f"could not create Task:{title}") from e

        logger.info(
            "Task created",
            task_id=task.task_id,
            caller=mask_caller_id(ctx.caller),
            due_at=task.due_at,
        )
        return task

    def create_employee(self, ctx: CallContext, name: Optional[str], email: Optional[str]) -> Employee:
        if not name or not email:
            raise ValidationError(INVALID_INPUT_MESSAGE)

        try:
            employee = Employee(employee_id=self.id_factory(), name=name, email=email)
        except PayloadValidationError as e:
            raise ValidationError(INVALID_INPUT_MESSAGE) from e

        try:
            self.employees.insert_new(employee.employee_id, employee)
        except Exception as e:
            logger.error(
                "Employee creation failed",
                email=mask_sensitive_data(email),
                error=str(e),
            )
            raise CreationError(f"could not create Employee:{name}") from e

        logger.info(
            "Employee created",
            employee_id=employee.employee_id,
            email=mask_sensitive_data(email),
            caller=mask_caller_id(ctx.caller),
        )
        return employee

    def assign_employee(self, ctx: CallContext, task_id: str, employee_id: str) -> Task:
        """Set (or replace) the task's assignee.

        The last-updated marker is left untouched by assignment.
        """
        task = self._owned_task(ctx, task_id)
        if self.employees.get(employee_id) is None:
            raise employee_not_found(employee_id)

        task = task.model_copy(update={"assignee_id": employee_id})
        self.tasks.insert(task.task_id, task)
        logger.info("Employee assigned to task", task_id=task_id, employee_id=employee_id)
        return task

    def update_task(
        self,
        ctx: CallContext,
        task_id: str,
        title: Optional[str],
        description: Optional[str],
        category: Optional[str],
        due_in_minutes: Optional[int],
    ) -> Task:
        """Overwrite the editable fields and restart the due clock from now."""
        task = self._owned_task(ctx, task_id)
        self._validate_task_input(title, description, due_in_minutes)

        task = self._build_task(**{
            **task.model_dump(),
            "title": title,
            "description": description,
            "category": category or "",
            "due_at": self.due_at(ctx, due_in_minutes),
            "updated_at": ctx.now,
        })
        self.tasks.insert(task.task_id, task)
        logger.info("Task updated", task_id=task_id, due_at=task.due_at)
        return task

    def delete_task(self, ctx: CallContext, task_id: str) -> Task:
        task = self._owned_task(ctx, task_id)
        self.tasks.remove(task_id)
        logger.info("Task deleted", task_id=task_id)
        return task

    def set_task_status(self, ctx: CallContext, task_id: str, status: Optional[str]) -> Task:
        task = self._owned_task(ctx, task_id)
        if not status:
            raise ValidationError(INVALID_INPUT_MESSAGE)

        task = self._build_task(**{**task.model_dump(), "status": status, "updated_at": ctx.now})
        self.tasks.insert(task.task_id, task)
        logger.info("Task status changed", task_id=task_id, status=status)
        return task

    def complete_task(self, ctx: CallContext, task_id: str) -> Task:
        return self.set_task_status(ctx, task_id, STATUS_COMPLETED)
