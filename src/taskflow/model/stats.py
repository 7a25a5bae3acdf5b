# SPDX-License-Identifier: MIT

from typing import TypedDict


class TaskStats(TypedDict):
    total: int
    completed: int
    in_progress: int
