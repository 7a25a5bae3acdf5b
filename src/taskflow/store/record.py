# SPDX-License-Identifier: MIT

from typing import Any, cast

from taskflow import time
from taskflow.model.entity_id import EntityId
from taskflow.model.task import Priority, Task, TaskDraft, TaskPatch, TaskStatus

TABLE_NAME = "task"

TASK_FIELDS: tuple[str, ...] = (
    "Id",
    "title",
    "description",
    "dueDate",
    "priority",
    "status",
    "completedOn",
    "CreatedOn",
    "ModifiedOn",
    "Owner",
)

# Domain key -> store record field
PATCH_FIELD_NAMES: dict[str, str] = {
    "title": "title",
    "description": "description",
    "due_date": "dueDate",
    "priority": "priority",
    "status": "status",
    "completed": "completedOn",
}


def get_field_projection() -> list[dict[str, Any]]:
    return [{"Field": {"Name": name}} for name in TASK_FIELDS]


def draft_to_record(draft: TaskDraft) -> dict[str, Any]:
    status = TaskStatus(draft["status"] or TaskStatus.NOT_STARTED)
    completed_on = None
    if status == TaskStatus.COMPLETED:
        completed_on = time.datetime_to_iso_str(time.now_utc())
    return {
        "title": draft["title"],
        "description": draft["description"] or "",
        "dueDate": time.date_to_str_optional(draft["due_date"]),
        "priority": str(draft["priority"] or Priority.MEDIUM),
        "status": str(status),
        "completedOn": completed_on,
        "IsDeleted": False,
    }


def patch_to_record(task_id: EntityId, patch: TaskPatch) -> dict[str, Any]:
    record: dict[str, Any] = {"Id": task_id}
    for key, value in patch.items():
        field_name = PATCH_FIELD_NAMES[key]
        if key == "due_date":
            record[field_name] = time.date_to_str_optional(cast(Any, value))
        elif key == "completed":
            record[field_name] = time.datetime_to_iso_str_optional(cast(Any, value))
        elif key in ("priority", "status"):
            record[field_name] = str(value)
        else:
            record[field_name] = value
    return record


def record_to_task(record: dict[str, Any]) -> Task:
    created = time.datetime_from_str_optional(record.get("CreatedOn"))
    if created is None:
        created = time.now_utc()
    modified = time.datetime_from_str_optional(record.get("ModifiedOn")) or created

    owner = record.get("Owner")
    if isinstance(owner, dict):
        owner = owner.get("Name")

    return {
        "id": str(record["Id"]),
        "title": record.get("title") or "",
        "description": record.get("description") or "",
        "due_date": time.date_from_str_optional(record.get("dueDate")),
        "priority": Priority(record.get("priority") or Priority.MEDIUM),
        "status": TaskStatus(record.get("status") or TaskStatus.NOT_STARTED),
        "created": created,
        "modified": modified,
        "completed": time.datetime_from_str_optional(record.get("completedOn")),
        "deleted": bool(record.get("IsDeleted", False)),
        "owner": owner,
    }
