# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from taskflow.errors import TaskFlowError
from taskflow.model.task import (
    ALL_FILTER,
    Priority,
    StatusFilter,
    Task,
    TaskPatch,
    TaskStatus,
)
from taskflow.repository.configuration import CONFIGURATION_REPO
from taskflow.repository.id_map import ID_MAP_REPO
from taskflow.repository.preferences import PREFERENCES_REPO
from taskflow.service.app_context import build_reconciler
from taskflow.service.edit_session import EditSession
from taskflow.service.reconciler import TaskCollectionReconciler
from taskflow.template.task import get_task_draft_template
from taskflow.terminal.custom_typer import AliasedTyperGroup
from taskflow.terminal.intent import dispatch
from taskflow.terminal.parse import parse_date, resolve_task_id
from taskflow.terminal.validate import (
    validate_priority,
    validate_status,
    validate_status_filter,
)
from taskflow.view import task as task_report
from taskflow.view.header import header
from taskflow.view.notification import (
    notify_error,
    notify_info,
    notify_status_change,
    notify_success,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


def _reconciler() -> TaskCollectionReconciler:
    try:
        return build_reconciler(CONFIGURATION_REPO.get_config(), PREFERENCES_REPO)
    except TaskFlowError as e:
        notify_error(str(e))
        raise typer.Exit(1)


def _as_filter(status_filter: str) -> StatusFilter:
    if status_filter == ALL_FILTER:
        return ALL_FILTER
    return TaskStatus(status_filter)


def _show_header(reconciler: TaskCollectionReconciler, sub_header: str) -> None:
    preferences = PREFERENCES_REPO.get_preferences()
    header(reconciler.auth.current_user, preferences["theme"], sub_header)
    if not preferences["has_visited"]:
        notify_info("Welcome to TaskFlow! Create your first task to get started. 👋")
        PREFERENCES_REPO.update_preferences(has_visited=True)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option("--due", "-u", parser=parse_date, help=DATE_HELP),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="valid input: low, medium, high",
        ),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-s",
            callback=validate_status,
            help="valid input: not-started, in-progress, completed",
        ),
    ] = None,
) -> None:
    reconciler = _reconciler()
    theme = PREFERENCES_REPO.get_preferences()["theme"]

    draft = get_task_draft_template()
    draft["title"] = title
    draft["description"] = description or ""
    draft["due_date"] = due
    if priority is not None:
        draft["priority"] = Priority(priority)
    if status is not None:
        draft["status"] = TaskStatus(status)

    new_task = dispatch(reconciler.add(draft), "Failed to create task. Please try again.")

    _show_header(reconciler, "task")
    task_report.single_task_view(new_task, ID_MAP_REPO, theme)
    notify_success("Task added successfully!")


@app.command("list, ls")
def list_tasks(
    status_filter: Annotated[
        str,
        typer.Option(
            "--filter",
            "-f",
            callback=validate_status_filter,
            help="valid input: all, not-started, in-progress, completed",
        ),
    ] = ALL_FILTER,
) -> None:
    reconciler = _reconciler()
    theme = PREFERENCES_REPO.get_preferences()["theme"]

    tasks = dispatch(
        reconciler.load(_as_filter(status_filter)),
        "Failed to load tasks. Please try again.",
    )

    ID_MAP_REPO.clear_ids()
    _show_header(reconciler, f"tasks ({len(tasks)})")
    task_report.tasks_view(
        reconciler.display_tasks, reconciler.status_filter, ID_MAP_REPO, theme
    )
    task_report.stats_view(reconciler.stats, theme)


@app.command("status, st", no_args_is_help=True)
def status(
    id: str,
    new_status: Annotated[
        str,
        typer.Argument(
            callback=validate_status,
            help="valid input: not-started, in-progress, completed",
        ),
    ],
) -> None:
    reconciler = _reconciler()
    task_id = resolve_task_id(id, ID_MAP_REPO)

    async def change_status() -> Task:
        await reconciler.load(ALL_FILTER)
        return await reconciler.set_status(task_id, TaskStatus(new_status))

    updated = dispatch(change_status(), "Failed to update task status. Please try again.")
    notify_status_change(updated["status"])


@app.command("edit, e", no_args_is_help=True)
def edit(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option("--due", "-u", parser=parse_date, help=DATE_HELP),
    ] = None,
    remove_due: Annotated[bool, typer.Option("--remove-due", "-ru")] = False,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="valid input: low, medium, high",
        ),
    ] = None,
) -> None:
    reconciler = _reconciler()
    theme = PREFERENCES_REPO.get_preferences()["theme"]
    task_id = resolve_task_id(id, ID_MAP_REPO)

    changes: TaskPatch = {}
    if title is not None:
        changes["title"] = title
    if description is not None:
        changes["description"] = description
    if due is not None:
        changes["due_date"] = due
    if remove_due:
        changes["due_date"] = None
    if priority is not None:
        changes["priority"] = Priority(priority)

    session = EditSession()

    async def save_changes() -> Task:
        await reconciler.load(ALL_FILTER)
        session.start_edit(reconciler.get_task(task_id))
        for field, value in changes.items():
            session.change(field, value)
        await session.save(reconciler)
        return reconciler.get_task(task_id)

    updated = dispatch(save_changes(), "Failed to update task. Please try again.")

    _show_header(reconciler, "task")
    task_report.single_task_view(updated, ID_MAP_REPO, theme)
    notify_success("Task updated successfully!")


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    reconciler = _reconciler()
    task_id = resolve_task_id(id, ID_MAP_REPO)

    async def remove() -> None:
        await reconciler.load(ALL_FILTER)
        await reconciler.remove(task_id)

    dispatch(remove(), "Failed to delete task. Please try again.")
    notify_success("Task deleted successfully!")


def stats(
    status_filter: Annotated[
        str,
        typer.Option(
            "--filter",
            "-f",
            callback=validate_status_filter,
            help="valid input: all, not-started, in-progress, completed",
        ),
    ] = ALL_FILTER,
) -> None:
    """Show task counts for the filtered collection."""
    reconciler = _reconciler()
    theme = PREFERENCES_REPO.get_preferences()["theme"]

    dispatch(
        reconciler.load(_as_filter(status_filter)),
        "Failed to load tasks. Please try again.",
    )

    _show_header(reconciler, "stats")
    task_report.stats_view(reconciler.stats, theme)
