# SPDX-License-Identifier: MIT

import uuid

type EntityId = str

PROVISIONAL_ID_PREFIX = "pending-"


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def generate_provisional_id() -> EntityId:
    return f"{PROVISIONAL_ID_PREFIX}{uuid.uuid4()}"


def is_provisional_id(entity_id: EntityId) -> bool:
    return entity_id.startswith(PROVISIONAL_ID_PREFIX)
