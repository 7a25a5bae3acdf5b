# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Literal, Optional, TypedDict

import pendulum

from taskflow.model.entity_id import EntityId


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(StrEnum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


ALL_FILTER = "all"

type StatusFilter = Literal["all"] | TaskStatus


class Task(TypedDict):
    id: EntityId
    title: str
    description: str
    due_date: Optional[pendulum.Date]
    priority: Priority
    status: TaskStatus
    created: pendulum.DateTime
    modified: pendulum.DateTime
    completed: Optional[pendulum.DateTime]
    deleted: bool
    owner: Optional[str]


class TaskDraft(TypedDict):
    title: str
    description: str
    due_date: Optional[pendulum.Date]
    priority: Priority
    status: TaskStatus


class TaskPatch(TypedDict, total=False):
    title: str
    description: str
    due_date: Optional[pendulum.Date]
    priority: Priority
    status: TaskStatus
    completed: Optional[pendulum.DateTime]


EDITABLE_FIELDS: tuple[str, ...] = ("title", "description", "due_date", "priority")
