# SPDX-License-Identifier: MIT

from taskflow.model.stats import TaskStats
from taskflow.model.task import ALL_FILTER, StatusFilter, Task, TaskStatus


def matches_filter(task: Task, status_filter: StatusFilter) -> bool:
    if task["deleted"]:
        return False
    return status_filter == ALL_FILTER or task["status"] == status_filter


def filter_tasks(tasks: list[Task], status_filter: StatusFilter) -> list[Task]:
    return [task for task in tasks if matches_filter(task, status_filter)]


def project(tasks: list[Task]) -> TaskStats:
    """Aggregate counts for a task collection."""
    return {
        "total": len(tasks),
        "completed": sum(1 for task in tasks if task["status"] == TaskStatus.COMPLETED),
        "in_progress": sum(
            1 for task in tasks if task["status"] == TaskStatus.IN_PROGRESS
        ),
    }
