# SPDX-License-Identifier: MIT

from taskflow.model.task import Priority, TaskDraft, TaskStatus


def get_task_draft_template() -> TaskDraft:
    return {
        "title": "",
        "description": "",
        "due_date": None,
        "priority": Priority.MEDIUM,
        "status": TaskStatus.NOT_STARTED,
    }
