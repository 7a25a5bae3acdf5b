# SPDX-License-Identifier: MIT

import logging
from enum import StrEnum
from typing import Any, Optional

from taskflow.errors import StoreError, TaskFlowError, ValidationError
from taskflow.model.entity_id import EntityId
from taskflow.model.task import EDITABLE_FIELDS, Task, TaskPatch
from taskflow.service.reconciler import TaskCollectionReconciler

logger = logging.getLogger(__name__)


class EditPhase(StrEnum):
    IDLE = "idle"
    EDITING = "editing"
    SAVING = "saving"


class EditSession:
    """
    Inline edit lifecycle for a single task.

    idle -> editing (start_edit), editing -> idle (cancel or successful
    save), editing -> saving -> editing when the store rejects the save.
    Starting a new edit discards whatever draft was open before.
    """

    def __init__(self) -> None:
        self.phase = EditPhase.IDLE
        self.task_id: Optional[EntityId] = None
        self.draft: Optional[TaskPatch] = None
        self.error: Optional[TaskFlowError] = None

    @property
    def is_active(self) -> bool:
        return self.phase != EditPhase.IDLE

    def is_editing(self, task_id: EntityId) -> bool:
        return self.is_active and self.task_id == task_id

    def start_edit(self, task: Task) -> None:
        if self.is_active:
            logger.debug("Discarding unsaved draft for task %s", self.task_id)
        self.phase = EditPhase.EDITING
        self.task_id = task["id"]
        self.draft = {
            "title": task["title"],
            "description": task["description"],
            "due_date": task["due_date"],
            "priority": task["priority"],
        }
        self.error = None

    def change(self, field: str, value: Any) -> None:
        if self.phase != EditPhase.EDITING or self.draft is None:
            raise ValidationError("No task is being edited")
        if field not in EDITABLE_FIELDS:
            raise ValidationError(f"Field cannot be edited: {field}")
        self.draft[field] = value  # type: ignore[literal-required]

    def cancel(self) -> None:
        if self.phase != EditPhase.EDITING:
            return
        self.__reset()

    async def save(self, reconciler: TaskCollectionReconciler) -> bool:
        if self.phase != EditPhase.EDITING or self.task_id is None or self.draft is None:
            return False

        title = self.draft.get("title") or ""
        if not title.strip():
            self.error = ValidationError("Task title cannot be empty!")
            raise self.error

        task_id = self.task_id
        self.phase = EditPhase.SAVING
        try:
            await reconciler.save_edit(task_id, self.draft)
        except (StoreError, ValidationError) as e:
            if self.__still_saving(task_id):
                self.phase = EditPhase.EDITING
                self.error = e
            raise
        except TaskFlowError:
            if self.__still_saving(task_id):
                self.__reset()
            raise

        if self.__still_saving(task_id):
            self.__reset()
        return True

    def __still_saving(self, task_id: EntityId) -> bool:
        # A newer start_edit replaces the session that issued the save
        return self.phase == EditPhase.SAVING and self.task_id == task_id

    def __reset(self) -> None:
        self.phase = EditPhase.IDLE
        self.task_id = None
        self.draft = None
        self.error = None
