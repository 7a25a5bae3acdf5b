# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from taskflow.model.task import ALL_FILTER, Priority, TaskStatus


def validate_priority(priority: Optional[str]) -> Optional[str]:
    if priority is None:
        return None
    if priority not in [p.value for p in Priority]:
        raise typer.BadParameter("Priority must be one of: low, medium, high")
    return priority


def validate_status(status: Optional[str]) -> Optional[str]:
    if status is None:
        return None
    if status not in [s.value for s in TaskStatus]:
        raise typer.BadParameter(
            "Status must be one of: not-started, in-progress, completed"
        )
    return status


def validate_status_filter(status_filter: Optional[str]) -> Optional[str]:
    if status_filter is None or status_filter == ALL_FILTER:
        return status_filter
    return validate_status(status_filter)
