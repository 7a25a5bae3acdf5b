# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Optional

from taskflow.errors import NotFoundError, StoreError, TaskFlowError, ValidationError
from taskflow.model.entity_id import EntityId, generate_provisional_id
from taskflow.model.stats import TaskStats
from taskflow.model.task import (
    ALL_FILTER,
    EDITABLE_FIELDS,
    StatusFilter,
    Task,
    TaskDraft,
    TaskPatch,
    TaskStatus,
)
from taskflow.service.auth import AuthSession
from taskflow.service.projector import matches_filter, project
from taskflow.store.task_store import TaskStoreClient
from taskflow.time import now_utc

logger = logging.getLogger(__name__)

type Subscriber = Callable[[list[Task], TaskStats], None]


class TaskCollectionReconciler:
    """
    Owns the local task collection for the active status filter.

    Status changes, edits and deletes only touch the collection once the
    store has confirmed them. A create shows up in `pending` under a
    provisional id until the store answers. Only the response to the most
    recently issued load is applied. Once detached, late responses and
    late failures are both dropped without touching any state.
    """

    def __init__(self, store: TaskStoreClient, auth: AuthSession) -> None:
        self.store = store
        self.auth = auth
        self.status_filter: StatusFilter = ALL_FILTER
        self.stats: TaskStats = project([])
        self.pending: dict[EntityId, Task] = {}
        self.last_error: Optional[TaskFlowError] = None
        self._tasks: list[Task] = []
        self._load_sequence = 0
        self._detached = False
        self._subscribers: list[Subscriber] = []

    @property
    def tasks(self) -> list[Task]:
        return deepcopy(self._tasks)

    @property
    def display_tasks(self) -> list[Task]:
        """Unconfirmed creates that match the filter, newest first, then `tasks`."""
        pending = [
            task
            for task in reversed(self.pending.values())
            if matches_filter(task, self.status_filter)
        ]
        return deepcopy(pending) + self.tasks

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    def detach(self) -> None:
        """Drop every response that arrives from now on."""
        self._detached = True
        self._subscribers.clear()

    def get_task(self, id: EntityId) -> Task:
        return deepcopy(self.__find(id))

    async def load(self, status_filter: StatusFilter = ALL_FILTER) -> list[Task]:
        self.auth.require_authenticated()

        self._load_sequence += 1
        sequence = self._load_sequence

        try:
            fetched = await self.store.list(status_filter)
        except StoreError as e:
            if self._detached:
                return self.tasks
            if self.__is_stale(sequence):
                logger.debug("Discarding failed load #%d (superseded)", sequence)
                return self.tasks
            self.__record_error(e)
            raise

        if self._detached:
            return fetched
        if self.__is_stale(sequence):
            logger.debug(
                "Discarding load #%d for '%s' (latest is #%d)",
                sequence,
                status_filter,
                self._load_sequence,
            )
            return self.tasks

        self.status_filter = status_filter
        self._tasks = fetched
        self.__publish()
        return self.tasks

    async def add(self, draft: TaskDraft) -> Task:
        """
        Create a task from draft and return the confirmed task.

        If the reconciler is detached before a failed create answers, the
        provisional task is returned instead of raising.
        """
        self.auth.require_authenticated()
        if not draft["title"] or not draft["title"].strip():
            raise ValidationError("Task title cannot be empty!")

        provisional = self.__provisional_task(draft)
        self.pending[provisional["id"]] = provisional
        self.__publish()
        try:
            created = await self.store.create(draft)
        except StoreError as e:
            self.pending.pop(provisional["id"], None)
            if self._detached:
                return provisional
            self.__record_error(e)
            self.__publish()
            raise
        self.pending.pop(provisional["id"], None)

        if self._detached:
            return created

        if matches_filter(created, self.status_filter):
            self._tasks.insert(0, created)
        self.__publish()
        return deepcopy(created)

    async def set_status(self, id: EntityId, status: TaskStatus) -> Task:
        self.auth.require_authenticated()
        task = self.__find(id)

        patch: TaskPatch = {
            "status": status,
            "completed": now_utc() if status == TaskStatus.COMPLETED else None,
        }
        try:
            updated = await self.store.update(id, patch)
        except StoreError as e:
            if self._detached:
                return deepcopy(task)
            self.__record_error(e)
            raise

        if self._detached:
            return updated
        return self.__apply_patch(id, patch, updated)

    async def save_edit(self, id: EntityId, patch: TaskPatch) -> Task:
        self.auth.require_authenticated()
        task = self.__find(id)

        not_editable = [key for key in patch if key not in EDITABLE_FIELDS]
        if not_editable:
            raise ValidationError(f"Fields cannot be edited: {', '.join(not_editable)}")

        fields: TaskPatch = {
            "title": patch.get("title", task["title"]),
            "description": patch.get("description", task["description"]),
            "due_date": patch.get("due_date", task["due_date"]),
            "priority": patch.get("priority", task["priority"]),
        }
        if not fields["title"] or not fields["title"].strip():
            raise ValidationError("Task title cannot be empty!")

        try:
            updated = await self.store.update(id, fields)
        except StoreError as e:
            if self._detached:
                return deepcopy(task)
            self.__record_error(e)
            raise

        if self._detached:
            return updated
        return self.__apply_patch(id, fields, updated)

    async def remove(self, id: EntityId) -> None:
        self.auth.require_authenticated()
        self.__find(id)

        try:
            deleted = await self.store.soft_delete(id)
            if not deleted:
                raise StoreError("delete", RuntimeError("Failed to delete task"))
        except StoreError as e:
            if self._detached:
                return
            self.__record_error(e)
            raise

        if self._detached:
            return
        self._tasks = [task for task in self._tasks if task["id"] != id]
        self.__publish()

    def __find(self, id: EntityId) -> Task:
        for task in self._tasks:
            if task["id"] == id:
                return task
        raise NotFoundError(id)

    def __is_stale(self, sequence: int) -> bool:
        return sequence != self._load_sequence

    def __apply_patch(
        self, id: EntityId, patch: TaskPatch, updated: Task
    ) -> Task:
        for index, task in enumerate(self._tasks):
            if task["id"] != id:
                continue
            patched: Task = {**task, **patch, "modified": updated["modified"]}  # type: ignore[typeddict-item]
            if matches_filter(patched, self.status_filter):
                self._tasks[index] = patched
            else:
                del self._tasks[index]
            self.__publish()
            return deepcopy(patched)
        logger.debug("Task %s left the collection before its update landed", id)
        return updated

    def __provisional_task(self, draft: TaskDraft) -> Task:
        now = now_utc()
        return {
            "id": generate_provisional_id(),
            "title": draft["title"],
            "description": draft["description"],
            "due_date": draft["due_date"],
            "priority": draft["priority"],
            "status": draft["status"],
            "created": now,
            "modified": now,
            "completed": now if draft["status"] == TaskStatus.COMPLETED else None,
            "deleted": False,
            "owner": None,
        }

    def __record_error(self, error: TaskFlowError) -> None:
        self.last_error = error
        logger.warning("%s", error)

    def __publish(self) -> None:
        # Stats count confirmed tasks only
        self.stats = project(self._tasks)
        for subscriber in list(self._subscribers):
            subscriber(self.display_tasks, deepcopy(self.stats))
