"""Task query engine - read-only derived views over the record stores.

Every view is a full scan of the store with a linear predicate. By default
an empty view is reported as NotFoundError carrying a message, so callers
see "nothing here" as a failure; pass ``empty_results_as_errors=False`` to
get an empty list instead.
"""

from typing import Callable, Optional

from pydantic import BaseModel, Field

from src.models.call_context import CallContext
from src.models.employee import Employee
from src.models.task import Task
from src.services.record_store import RecordStore
from src.services.task_mutations import employee_not_found, require_owner, require_task
from src.utils.config import TaskStoreConfig
from src.utils.errors import NotFoundError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

NO_TASKS_MESSAGE = "No tasks found, please add one"


class TaskAnalysis(BaseModel):
    """Completion and lateness ratios over a set of tasks."""
    total: int = Field(..., gt=0)
    completed_percent: float
    past_due_percent: float

    @classmethod
    def from_tasks(cls, tasks: list[Task], now: int) -> "TaskAnalysis":
        total = len(tasks)
        completed = sum(1 for task in tasks if task.is_completed())
        past_due = sum(1 for task in tasks if task.is_past_due(now))
        return cls(
            total=total,
            completed_percent=round(completed * 100 / total, 2),
            past_due_percent=round(past_due * 100 / total, 2),
        )

    def summary(self) -> str:
        return (
            f"{self.total} tasks analysed: "
            f"{self.completed_percent:.2f}% completed, "
            f"{self.past_due_percent:.2f}% past due"
        )


class TaskQueryEngine:
    """Read-only views; never writes to either store."""

    def __init__(
        self,
        tasks: RecordStore[Task],
        employees: RecordStore[Employee],
        empty_results_as_errors: bool = TaskStoreConfig.EMPTY_RESULTS_AS_ERRORS,
    ):
        self.tasks = tasks
        self.employees = employees
        self.empty_results_as_errors = empty_results_as_errors

    def _select(self, predicate: Callable[[Task], bool], empty_message: str) -> list[Task]:
        matches = [task for task in self.tasks.values() if predicate(task)]
        if not matches and self.empty_results_as_errors:
            raise NotFoundError(empty_message)
        return matches

    def get_by_id(self, ctx: CallContext, task_id: str) -> Task:
        task = require_task(self.tasks, task_id)
        require_owner(task, ctx)
        return task

    def get_all(self) -> list[Task]:
        """Every task, regardless of who created it."""
        return self._select(lambda task: True, NO_TASKS_MESSAGE)

    def get_by_status(self, status: str) -> list[Task]:
        wanted = status.lower()
        return self._select(lambda task: task.status.lower() == wanted, "No tasks with this status")

    def get_by_category(self, category: str) -> list[Task]:
        return self._select(lambda task: task.category == category, "No tasks in this category")

    def get_by_assignee(self, employee_id: str) -> list[Task]:
        return self._select(
            lambda task: task.assignee_id is not None and task.assignee_id == employee_id,
            "No tasks assigned to this employee",
        )

    def search(self, text: str) -> list[Task]:
        """Case-insensitive substring match on title or description."""
        needle = text.lower()
        return self._select(
            lambda task: needle in task.title.lower() or needle in task.description.lower(),
            "No tasks found by this search query",
        )

    def get_past_due(self, ctx: CallContext) -> list[Task]:
        return self._select(lambda task: task.is_past_due(ctx.now), "No tasks past due date")

    def _analyse(self, tasks: list[Task], ctx: CallContext, empty_message: str) -> str:
        # Guard against dividing by zero whatever the empty-result mode.
        if not tasks:
            raise NotFoundError(empty_message)
        analysis = TaskAnalysis.from_tasks(tasks, ctx.now)
        logger.debug(
            "Computed task analysis",
            total=analysis.total,
            completed_percent=analysis.completed_percent,
            past_due_percent=analysis.past_due_percent,
        )
        return analysis.summary()

    def get_analysis(self, ctx: CallContext) -> str:
        return self._analyse(self.tasks.values(), ctx, NO_TASKS_MESSAGE)

    def get_analysis_for_assignee(self, ctx: CallContext, employee_id: str) -> str:
        tasks = [task for task in self.tasks.values() if task.assignee_id == employee_id]
        return self._analyse(tasks, ctx, "No tasks found for this employee")

    def get_employee(self, employee_id: str) -> Employee:
        employee: Optional[Employee] = self.employees.get(employee_id)
        if employee is None:
            raise employee_not_found(employee_id)
        return employee

    def get_employees(self) -> list[Employee]:
        employees = self.employees.values()
        if not employees and self.empty_results_as_errors:
            raise NotFoundError("No employees found, please add one")
        return employees
