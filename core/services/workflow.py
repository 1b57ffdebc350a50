# =============================================================================
# core/services/workflow.py - Workflow Boundary and Compensation
# =============================================================================
# Shared plumbing for the entity mutation workflows:
#
# - workflow_boundary: turns a service method that raises into one that
#   returns OperationResult{error, data}. Nothing propagates past it.
# - CompensationPlan: records, per phase, what must be undone if a later
#   phase fails. A row write and a storage write are two separate,
#   non-atomic steps; the plan makes the undo side explicit:
#
#   | Phase            | On later failure                       |
#   |------------------|----------------------------------------|
#   | uploading assets | delete the objects uploaded so far     |
#   | persisting row   | (nothing - the row write is the commit)|
#
#   After the row write succeeds the plan is committed and its undo
#   actions are discarded. Cleanup of objects the row no longer references
#   is scheduled separately with `after_commit` and always best effort.
# =============================================================================

import functools
import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from app.exceptions import CatalogException, FieldValidationError
from core.models.result import OperationResult

logger = logging.getLogger(__name__)


class WorkflowPhase(str, Enum):
    """States a mutation passes through."""
    VALIDATING = "validating"
    UPLOADING_ASSETS = "uploading_assets"
    PERSISTING = "persisting"
    COMPENSATING = "compensating"
    DONE = "done"


@dataclass
class CompensationStep:
    """An undo action registered by a completed phase."""
    phase: WorkflowPhase
    description: str
    action: Callable[[], object]


@dataclass
class CompensationPlan:
    """
    Ordered undo actions for one mutation.

    Example:
        plan = CompensationPlan("create medicine")
        urls = storage.upload_many(...)
        plan.on_failure(WorkflowPhase.UPLOADING_ASSETS, "delete uploads",
                        lambda: storage.delete_many(bucket, urls, prefix))
        with plan:
            repo.medicines.create(row)
    """

    operation: str
    phase: WorkflowPhase = WorkflowPhase.VALIDATING
    steps: list[CompensationStep] = field(default_factory=list)
    cleanups: list[CompensationStep] = field(default_factory=list)

    def enter(self, phase: WorkflowPhase) -> None:
        logger.debug(f"{self.operation}: {self.phase.value} -> {phase.value}")
        self.phase = phase

    def on_failure(self, phase: WorkflowPhase, description: str, action: Callable[[], object]) -> None:
        """Register an undo action to run if a later phase fails."""
        self.steps.append(CompensationStep(phase, description, action))

    def after_commit(self, description: str, action: Callable[[], object]) -> None:
        """Register a best-effort cleanup to run once the row write succeeded."""
        self.cleanups.append(CompensationStep(WorkflowPhase.DONE, description, action))

    def compensate(self) -> None:
        """Run registered undo actions, newest first. Failures are logged only."""
        self.enter(WorkflowPhase.COMPENSATING)
        for step in reversed(self.steps):
            try:
                step.action()
                logger.info(f"{self.operation}: compensated '{step.description}'")
            except Exception as e:
                logger.error(f"{self.operation}: compensation '{step.description}' failed: {e}")
        self.steps.clear()

    def commit(self) -> None:
        """Drop undo actions and run post-commit cleanups (best effort)."""
        self.steps.clear()
        for step in self.cleanups:
            try:
                step.action()
            except Exception as e:
                logger.error(f"{self.operation}: cleanup '{step.description}' failed: {e}")
        self.cleanups.clear()
        self.enter(WorkflowPhase.DONE)

    def __enter__(self) -> "CompensationPlan":
        self.enter(WorkflowPhase.PERSISTING)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.compensate()
        return False


def require_non_blank(value: str | None, field_name: str) -> str:
    """
    Return `value` stripped, or raise FieldValidationError when it is blank.

    Runs before any remote call.
    """
    if value is None or not value.strip():
        raise FieldValidationError(field_name)
    return value.strip()


def _failure_result(operation: str, error: Exception) -> OperationResult:
    if isinstance(error, CatalogException):
        logger.warning(f"{operation} failed: [{error.code}] {error.message}")
        return OperationResult.failure(
            message=error.message,
            code=error.code,
            status=error.status_code,
            details=error.details or None,
        )
    logger.exception(f"Unexpected error in {operation}: {error}")
    return OperationResult.failure(message="An unexpected error occurred")


def workflow_boundary(operation: str):
    """
    Decorator: run a service method and wrap the outcome in OperationResult.

    Works on plain and async methods. CatalogException subclasses keep their
    message, code and status; anything else is logged with its traceback
    and reported as a generic internal error.
    """

    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs) -> OperationResult:
                try:
                    return OperationResult.success(await func(*args, **kwargs))
                except Exception as e:
                    return _failure_result(operation, e)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> OperationResult:
            try:
                return OperationResult.success(func(*args, **kwargs))
            except Exception as e:
                return _failure_result(operation, e)

        return wrapper

    return decorator
