# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from taskflow import time
from taskflow.errors import StoreError, ValidationError
from taskflow.model.entity_id import EntityId
from taskflow.model.task import ALL_FILTER, StatusFilter, Task, TaskDraft, TaskPatch
from taskflow.query.filter import WhereCondition
from taskflow.query.filter_type import Operator
from taskflow.store.record import (
    PATCH_FIELD_NAMES,
    TABLE_NAME,
    draft_to_record,
    get_field_projection,
    patch_to_record,
    record_to_task,
)
from taskflow.store.record_client import (
    FetchParams,
    RecordClient,
    RecordClientError,
    WriteResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_LIMIT = 100


class TaskStoreClient:
    """
    Task operations against a record store.

    Holds no state of its own. Each call is issued exactly once; a failure
    surfaces as a StoreError and is never retried here.
    """

    def __init__(
        self, record_client: RecordClient, page_limit: int = DEFAULT_PAGE_LIMIT
    ) -> None:
        self.record_client = record_client
        self.page_limit = page_limit

    async def list(self, status_filter: StatusFilter = ALL_FILTER) -> list[Task]:
        where: list[WhereCondition] = [
            {
                "fieldName": "IsDeleted",
                "operator": Operator.EXACT_MATCH,
                "values": [False],
            }
        ]
        if status_filter != ALL_FILTER:
            where.append(
                {
                    "fieldName": "status",
                    "operator": Operator.EXACT_MATCH,
                    "values": [str(status_filter)],
                }
            )

        params: FetchParams = {
            "Fields": get_field_projection(),
            "where": where,
            "orderBy": [{"field": "CreatedOn", "direction": "DESC"}],
            "pagingInfo": {"limit": self.page_limit, "offset": 0},
        }

        try:
            response = await self.record_client.fetch_records(TABLE_NAME, params)
        except RecordClientError as e:
            logger.error("Error fetching tasks: %s", e)
            raise StoreError("list", e) from e

        if response and response.get("success") is False:
            raise StoreError(
                "list", RuntimeError(response.get("message") or "Failed to list tasks")
            )
        if not response or not response.get("data"):
            return []
        return [self.__to_task("list", record) for record in response["data"]]

    async def create(self, draft: TaskDraft) -> Task:
        if not draft["title"] or not draft["title"].strip():
            raise ValidationError("Task title cannot be empty!")

        try:
            response = await self.record_client.create_record(
                TABLE_NAME, {"records": [draft_to_record(draft)]}
            )
        except RecordClientError as e:
            logger.error("Error creating task: %s", e)
            raise StoreError("create", e) from e

        return self.__to_task("create", self.__first_result("create", response))

    async def update(self, id: EntityId, patch: TaskPatch) -> Task:
        unknown = [key for key in patch if key not in PATCH_FIELD_NAMES]
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(unknown)}")
        if "title" in patch and not patch["title"].strip():
            raise ValidationError("Task title cannot be empty!")

        record = patch_to_record(id, patch)
        record["ModifiedOn"] = time.datetime_to_iso_str(time.now_utc())

        try:
            response = await self.record_client.update_record(
                TABLE_NAME, {"records": [record]}
            )
        except RecordClientError as e:
            logger.error("Error updating task with ID %s: %s", id, e)
            raise StoreError("update", e) from e

        data = self.__first_result("update", response)
        # The store may answer with only the written fields
        return self.__to_task("update", {**record, **data})

    async def soft_delete(self, id: EntityId) -> bool:
        record = {
            "Id": id,
            "IsDeleted": True,
            "DeletedOn": time.datetime_to_iso_str(time.now_utc()),
        }
        try:
            response = await self.record_client.update_record(
                TABLE_NAME, {"records": [record]}
            )
        except RecordClientError as e:
            logger.error("Error deleting task with ID %s: %s", id, e)
            raise StoreError("delete", e) from e

        return bool(response and response.get("success"))

    def __to_task(self, operation: str, record: dict[str, Any]) -> Task:
        try:
            return record_to_task(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Unreadable task record from store: %r", record)
            raise StoreError(operation, e) from e

    def __first_result(
        self, operation: str, response: Optional[WriteResponse]
    ) -> dict[str, Any]:
        if not response or not response.get("success"):
            message = response.get("message") if response else None
            raise StoreError(operation, RuntimeError(message or f"Failed to {operation} task"))

        results = response.get("results") or []
        if not results or not results[0].get("success") or not results[0].get("data"):
            message = results[0].get("message") if results else None
            raise StoreError(operation, RuntimeError(message or f"Failed to {operation} task"))

        return dict(results[0]["data"] or {})
