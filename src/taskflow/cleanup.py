# SPDX-License-Identifier: MIT

import atexit

from taskflow.repository.configuration import CONFIGURATION_REPO
from taskflow.repository.id_map import ID_MAP_REPO
from taskflow.repository.preferences import PREFERENCES_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()
    PREFERENCES_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
