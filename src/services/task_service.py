"""Task service - owns the record stores and exposes every operation as a Result.

The engines raise typed TaskTrackerError exceptions at the point of failure;
this facade is the boundary where they are classified into Result values.
Nothing raised inside an operation escapes it.
"""

from typing import Any, Callable, Optional

from src.models.call_context import CallContext
from src.models.employee import Employee
from src.models.result import Result, ErrorKind
from src.models.task import Task
from src.services.clock import generate_record_id
from src.services.record_store import RecordStore
from src.services.task_mutations import TaskMutationEngine
from src.services.task_queries import TaskQueryEngine
from src.utils.config import TaskStoreConfig
from src.utils.errors import TaskTrackerError
from src.utils.logging import (
    correlation_context,
    get_correlation_id,
    get_structured_logger,
    log_timing,
    mask_caller_id,
)

logger = get_structured_logger(__name__)


class TaskService:
    """Single owner of the task and employee stores."""

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_record_id,
        empty_results_as_errors: bool = TaskStoreConfig.EMPTY_RESULTS_AS_ERRORS,
        due_unit_nanos: int = TaskStoreConfig.DUE_UNIT_NANOS,
    ):
        self.tasks: RecordStore[Task] = RecordStore("tasks")
        self.employees: RecordStore[Employee] = RecordStore("employees")
        self.mutations = TaskMutationEngine(
            self.tasks,
            self.employees,
            id_factory=id_factory,
            due_unit_nanos=due_unit_nanos,
        )
        self.queries = TaskQueryEngine(
            self.tasks,
            self.employees,
            empty_results_as_errors=empty_results_as_errors,
        )
        logger.info(
            "TaskService initialized",
            empty_results_as_errors=empty_results_as_errors,
            due_unit_nanos=due_unit_nanos,
        )

    def _run(self, operation: str, call: Callable[[], Any], ctx: Optional[CallContext] = None) -> Result:
        caller = mask_caller_id(ctx.caller) if ctx else None
        with correlation_context(get_correlation_id()):
            try:
                with log_timing(operation, logger=logger, caller=caller):
                    value = call()
            except TaskTrackerError as e:
                result = Result.from_error(e)
                logger.warning(
                    f"{operation} failed",
                    operation=operation,
                    error_kind=result.error.value,
                    error=e.message,
                    caller=caller,
                )
                return result
            except Exception as e:
                logger.exception(
                    f"Unexpected error during {operation}",
                    operation=operation,
                    error=str(e),
                    caller=caller,
                )
                return Result.failure(ErrorKind.INTERNAL, f"Unexpected error during {operation}")
        return Result.success(value)

    # ---- mutations ----

    def create_task(
        self,
        ctx: CallContext,
        title: Optional[str],
        description: Optional[str],
        category: Optional[str],
        due_in_minutes: Optional[int],
    ) -> Result:
        return self._run(
            "create_task",
            lambda: self.mutations.create_task(ctx, title, description, category, due_in_minutes),
            ctx,
        )

    def create_employee(self, ctx: CallContext, name: Optional[str], email: Optional[str]) -> Result:
        return self._run("create_employee", lambda: self.mutations.create_employee(ctx, name, email), ctx)

    def assign_employee(self, ctx: CallContext, task_id: str, employee_id: str) -> Result:
        return self._run(
            "assign_employee",
            lambda: self.mutations.assign_employee(ctx, task_id, employee_id),
            ctx,
        )

    def update_task(
        self,
        ctx: CallContext,
        task_id: str,
        title: Optional[str],
        description: Optional[str],
        category: Optional[str],
        due_in_minutes: Optional[int],
    ) -> Result:
        return self._run(
            "update_task",
            lambda: self.mutations.update_task(ctx, task_id, title, description, category, due_in_minutes),
            ctx,
        )

    def delete_task(self, ctx: CallContext, task_id: str) -> Result:
        return self._run("delete_task", lambda: self.mutations.delete_task(ctx, task_id), ctx)

    def complete_task(self, ctx: CallContext, task_id: str) -> Result:
        return self._run("complete_task", lambda: self.mutations.complete_task(ctx, task_id), ctx)

    def set_task_status(self, ctx: CallContext, task_id: str, status: Optional[str]) -> Result:
        return self._run("set_task_status", lambda: self.mutations.set_task_status(ctx, task_id, status), ctx)

    # ---- queries ----

    def get_task(self, ctx: CallContext, task_id: str) -> Result:
        return self._run("get_task", lambda: self.queries.get_by_id(ctx, task_id), ctx)

    def get_tasks(self) -> Result:
        return self._run("get_tasks", self.queries.get_all)

    def get_tasks_by_status(self, status: str) -> Result:
        return self._run("get_tasks_by_status", lambda: self.queries.get_by_status(status))

    def get_tasks_by_category(self, category: str) -> Result:
        return self._run("get_tasks_by_category", lambda: self.queries.get_by_category(category))

    def get_tasks_by_assignee(self, employee_id: str) -> Result:
        return self._run("get_tasks_by_assignee", lambda: self.queries.get_by_assignee(employee_id))

    def search_tasks(self, text: str) -> Result:
        return self._run("search_tasks", lambda: self.queries.search(text))

    def get_tasks_past_due(self, ctx: CallContext) -> Result:
        return self._run("get_tasks_past_due", lambda: self.queries.get_past_due(ctx), ctx)

    def get_analysis(self, ctx: CallContext) -> Result:
        return self._run("get_analysis", lambda: self.queries.get_analysis(ctx), ctx)

    def get_analysis_for_assignee(self, ctx: CallContext, employee_id: str) -> Result:
        return self._run(
            "get_analysis_for_assignee",
            lambda: self.queries.get_analysis_for_assignee(ctx, employee_id),
            ctx,
        )

    def get_employee(self, employee_id: str) -> Result:
        return self._run("get_employee", lambda: self.queries.get_employee(employee_id))

    def get_employees(self) -> Result:
        return self._run("get_employees", self.queries.get_employees)
