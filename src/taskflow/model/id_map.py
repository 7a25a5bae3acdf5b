# SPDX-License-Identifier: MIT

from typing import TypedDict

from taskflow.model.entity_id import EntityId


class IdMap(TypedDict):
    """
    Short display numbers for store ids.

    Example:

    Task with an id of "5f0c...".
    Synthetic id for that task is 7.

    real_task_id = id_map["synthetic_to_real"][7] # returns "5f0c..."
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
