# SPDX-License-Identifier: MIT

from taskflow.model.task import ALL_FILTER, Priority, StatusFilter, Task, TaskStatus
from taskflow.view.icon import get_icon

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Done",
}


def task_state(task: Task) -> str:
    """
    Get the state symbol for a task.

    Returns:
        "X" if completed, "~" if in progress, " " if not started
    """
    if task["status"] == TaskStatus.COMPLETED:
        return "X"
    elif task["status"] == TaskStatus.IN_PROGRESS:
        return "~"
    return " "


def format_priority(priority: Priority) -> str:
    return f"{get_icon('Flag')} {str(priority).capitalize()}"


def format_status(status: TaskStatus) -> str:
    return STATUS_LABELS[status]


def empty_message(status_filter: StatusFilter) -> str:
    if status_filter == ALL_FILTER:
        return "You don't have any tasks yet. Create your first task to get started!"
    return f"You don't have any {str(status_filter).replace('-', ' ')} tasks."
