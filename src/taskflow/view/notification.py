# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.padding import Padding

from taskflow.model.task import TaskStatus
from taskflow.view.icon import get_icon

console = Console()

STATUS_MESSAGES: dict[TaskStatus, str] = {
    TaskStatus.NOT_STARTED: "Task marked as not started",
    TaskStatus.IN_PROGRESS: "Task moved to in progress",
    TaskStatus.COMPLETED: "Task completed! 🎉",
}


def notify_success(message: str) -> None:
    console.print(Padding(f"[green]{get_icon('CheckCircle')} {message}[/green]", (0, 1)))


def notify_info(message: str) -> None:
    console.print(Padding(f"[cyan]{message}[/cyan]", (0, 1)))


def notify_error(message: str) -> None:
    console.print(Padding(f"[red]{get_icon('AlertTriangle')} {message}[/red]", (0, 1)))


def notify_status_change(status: TaskStatus) -> None:
    notify_info(STATUS_MESSAGES[status])
