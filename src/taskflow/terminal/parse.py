# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from taskflow.model.entity_id import EntityId
from taskflow.repository.id_map import IdMapRepository
from taskflow.time import date_from_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Relative days, e.g. "1", "-1", "7"
    if re.match(r"^-?\d+$", date):
        return pendulum.today().add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today().date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow().date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday().date()
    raise typer.BadParameter("Incorrect date format")


def resolve_task_id(id_param: str, id_map: IdMapRepository) -> EntityId:
    """
    Resolve a display number from the last listing to the stored task id.

    Numbers not in the last listing, and anything else, are taken as store
    ids as is.
    """
    if re.match(r"^\d+$", id_param):
        real_id = id_map.get_real_id(int(id_param))
        if real_id is not None:
            return real_id
    return id_param
