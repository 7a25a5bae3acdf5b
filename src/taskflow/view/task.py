# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from taskflow.model.entity_id import is_provisional_id
from taskflow.model.preferences import Theme
from taskflow.model.stats import TaskStats
from taskflow.model.task import StatusFilter, Task, TaskStatus
from taskflow.repository.id_map import IdMapRepository
from taskflow.time import (
    date_to_display_str_optional,
    datetime_to_display_local_datetime_str,
)
from taskflow.view.icon import get_icon
from taskflow.view.theme import get_palette
from taskflow.view.util import (
    empty_message,
    format_priority,
    format_status,
    task_state,
)


def tasks_view(
    tasks: list[Task],
    status_filter: StatusFilter,
    id_map: IdMapRepository,
    theme: Theme = "light",
    columns: list[str] = [
        "id",
        "state",
        "priority",
        "due",
        "status",
        "title",
    ],
) -> None:
    console = Console()
    palette = get_palette(theme)

    if len(tasks) == 0:
        console.print(
            Padding(f"{get_icon('Inbox')} {empty_message(status_filter)}", (1, 1))
        )
        return

    tasks_table = Table(box=box.SIMPLE)
    for column in columns:
        tasks_table.add_column(column)

    for task in tasks:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                if is_provisional_id(task["id"]):
                    column_value = "…"
                else:
                    column_value = str(id_map.associate_id(task["id"]))
            elif column == "state":
                column_value = task_state(task)
            elif column == "priority":
                color = palette["priority"][task["priority"]]
                column_value = f"[{color}]{format_priority(task['priority'])}[/{color}]"
            elif column == "due":
                column_value = date_to_display_str_optional(task["due_date"]) or ""
            elif column == "status":
                color = palette["status"][task["status"]]
                column_value = f"[{color}]{format_status(task['status'])}[/{color}]"
            elif column == "title":
                column_value = task["title"]
                if task["description"]:
                    column_value += f"\n[{palette['muted']}]{task['description']}[/{palette['muted']}]"
                if task["status"] == TaskStatus.COMPLETED:
                    column_value = f"[strike]{column_value}[/strike]"

            row.append(column_value)
        tasks_table.add_row(*row)

    console.print(tasks_table)


def stats_view(stats: TaskStats, theme: Theme = "light") -> None:
    palette = get_palette(theme)

    stats_table = Table(box=box.SIMPLE, show_header=False)
    stats_table.add_column("metric")
    stats_table.add_column("value", justify="right")
    stats_table.add_row(f"{get_icon('Layers')} Total Tasks", str(stats["total"]))
    stats_table.add_row(
        f"{get_icon('CheckCheck')} Completed",
        f"[{palette['status'][TaskStatus.COMPLETED]}]{stats['completed']}[/]",
    )
    stats_table.add_row(
        f"{get_icon('ListChecks')} In Progress",
        f"[{palette['status'][TaskStatus.IN_PROGRESS]}]{stats['in_progress']}[/]",
    )

    console = Console()
    console.print(stats_table)


def single_task_view(task: Task, id_map: IdMapRepository, theme: Theme = "light") -> None:
    palette = get_palette(theme)

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", str(id_map.associate_id(task["id"])))
    task_table.add_row("title", task["title"])
    task_table.add_row("description", task["description"])
    task_table.add_row("due", date_to_display_str_optional(task["due_date"]) or "")
    priority_color = palette["priority"][task["priority"]]
    task_table.add_row(
        "priority",
        f"[{priority_color}]{format_priority(task['priority'])}[/{priority_color}]",
    )
    task_table.add_row("status", format_status(task["status"]))
    task_table.add_row("created", datetime_to_display_local_datetime_str(task["created"]))
    task_table.add_row("modified", datetime_to_display_local_datetime_str(task["modified"]))
    if task["completed"] is not None:
        task_table.add_row(
            "completed", datetime_to_display_local_datetime_str(task["completed"])
        )

    console = Console()
    console.print(task_table)
