# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "taskflow"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_PREFERENCES_PATH: Path = DATA_PATH / "preferences.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_LOG_PATH: Path = DATA_PATH / "taskflow.log"

StoreBackend = Literal["local", "remote"]


class Configuration(TypedDict):
    store_backend: StoreBackend
    remote_url: Optional[str]
    project_id: Optional[str]
    public_key: Optional[str]
    request_timeout: float
    page_limit: int
    data_path: Optional[str]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "store_backend": "local",
        "remote_url": None,
        "project_id": None,
        "public_key": None,
        "request_timeout": 10.0,
        "page_limit": 100,
        "data_path": None,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH, DATA_PREFERENCES_PATH, DATA_ID_MAP_PATH, DATA_LOG_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_PREFERENCES_PATH = DATA_PATH / "preferences.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_LOG_PATH = DATA_PATH / "taskflow.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
