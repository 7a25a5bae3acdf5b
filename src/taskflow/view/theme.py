# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskflow.model.preferences import Theme
from taskflow.model.task import Priority, TaskStatus


class Palette(TypedDict):
    brand: str
    sub_header: str
    user: str
    muted: str
    priority: dict[Priority, str]
    status: dict[TaskStatus, str]


PALETTES: dict[Theme, Palette] = {
    "light": {
        "brand": "dark_orange",
        "sub_header": "sandy_brown",
        "user": "plum4",
        "muted": "grey50",
        "priority": {
            Priority.HIGH: "red",
            Priority.MEDIUM: "dark_goldenrod",
            Priority.LOW: "green",
        },
        "status": {
            TaskStatus.NOT_STARTED: "dark_goldenrod",
            TaskStatus.IN_PROGRESS: "blue",
            TaskStatus.COMPLETED: "green",
        },
    },
    "dark": {
        "brand": "orange1",
        "sub_header": "sandy_brown",
        "user": "plum1",
        "muted": "bright_black",
        "priority": {
            Priority.HIGH: "bright_red",
            Priority.MEDIUM: "gold1",
            Priority.LOW: "spring_green2",
        },
        "status": {
            TaskStatus.NOT_STARTED: "gold1",
            TaskStatus.IN_PROGRESS: "deep_sky_blue1",
            TaskStatus.COMPLETED: "spring_green2",
        },
    },
}


def get_palette(theme: Theme) -> Palette:
    return PALETTES.get(theme, PALETTES["light"])
