# SPDX-License-Identifier: MIT

from typing import Optional

from taskflow.model.entity_id import EntityId


class TaskFlowError(Exception):
    """Base class for every error raised by the task core."""


class ValidationError(TaskFlowError):
    """Input rejected before any store call."""


class StoreError(TaskFlowError):
    """A record store operation failed."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        self.operation = operation
        self.cause = cause
        message = f"store operation '{operation}' failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NotFoundError(TaskFlowError):
    def __init__(self, task_id: EntityId) -> None:
        self.task_id = task_id
        super().__init__(f"task '{task_id}' not found")


class NotAuthenticatedError(TaskFlowError):
    def __init__(self) -> None:
        super().__init__("sign in before working with tasks")
