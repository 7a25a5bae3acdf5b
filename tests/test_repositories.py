# tests/test_repositories.py

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from taskflow import configuration
from taskflow.repository.configuration import ConfigurationRepository
from taskflow.repository.id_map import IdMapRepository
from taskflow.repository.preferences import PreferencesRepository


def test_preferences_default_when_file_missing(tmp_path: Path) -> None:
    repo = PreferencesRepository(tmp_path / "preferences.yaml")

    prefs = repo.get_preferences()

    assert prefs == {"theme": "light", "has_visited": False, "session_user": None}
    assert repo.flush() is False


def test_preferences_persist_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "preferences.yaml"
    repo = PreferencesRepository(path)
    repo.update_preferences(
        theme="dark",
        has_visited=True,
        session_user={"first_name": "Ada", "email": None},
    )
    assert repo.flush() is True

    reloaded = PreferencesRepository(path).get_preferences()

    assert reloaded["theme"] == "dark"
    assert reloaded["has_visited"] is True
    assert reloaded["session_user"] == {"first_name": "Ada", "email": None}


def test_preferences_fill_keys_missing_from_older_file(tmp_path: Path) -> None:
    path = tmp_path / "preferences.yaml"
    path.write_text(yaml.safe_dump({"theme": "dark"}))

    prefs = PreferencesRepository(path).get_preferences()

    assert prefs["theme"] == "dark"
    assert prefs["has_visited"] is False
    assert prefs["session_user"] is None


def test_remove_session_user(tmp_path: Path) -> None:
    repo = PreferencesRepository(tmp_path / "preferences.yaml")
    repo.update_preferences(session_user={"first_name": "Ada", "email": None})

    repo.update_preferences(remove_session_user=True)

    assert repo.get_preferences()["session_user"] is None


def test_id_map_assigns_stable_numbers(tmp_path: Path) -> None:
    repo = IdMapRepository(tmp_path / "id_map.yaml")

    assert repo.associate_id("abc") == 1
    assert repo.associate_id("def") == 2
    assert repo.associate_id("abc") == 1
    assert repo.get_real_id(2) == "def"
    assert repo.get_real_id(3) is None


def test_id_map_clear_and_persist(tmp_path: Path) -> None:
    path = tmp_path / "id_map.yaml"
    repo = IdMapRepository(path)
    repo.associate_id("abc")
    repo.flush()

    assert IdMapRepository(path).get_real_id(1) == "abc"

    repo.clear_ids()
    assert repo.get_real_id(1) is None
    assert repo.associate_id("xyz") == 1


@pytest.fixture()
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    return path


def test_configuration_adds_settings_missing_from_file(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump({"store_backend": "remote", "remote_url": "https://x"}))

    config = ConfigurationRepository().get_config()

    assert config["store_backend"] == "remote"
    assert config["remote_url"] == "https://x"
    assert config["page_limit"] == 100
    assert config["request_timeout"] == 10.0
    assert config["log_level"] == "WARNING"


def test_configuration_update_and_flush(config_path: Path) -> None:
    config_path.write_text(yaml.safe_dump(dict(configuration.get_default_configuration())))
    repo = ConfigurationRepository()

    repo.update_config(page_limit=25, log_level="debug", remote_url="https://x")
    repo.update_config(remove_remote_url=True)
    repo.flush()

    stored = yaml.safe_load(config_path.read_text())
    assert stored["page_limit"] == 25
    assert stored["log_level"] == "DEBUG"
    assert stored["remote_url"] is None


def test_data_path_setting_moves_data_files(
    config_path: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    for name in (
        "DATA_PATH",
        "DATA_TASKS_PATH",
        "DATA_PREFERENCES_PATH",
        "DATA_ID_MAP_PATH",
        "DATA_LOG_PATH",
    ):
        monkeypatch.setattr(configuration, name, getattr(configuration, name))
    custom = tmp_path / "elsewhere"
    config_path.write_text(yaml.safe_dump({"data_path": str(custom)}))

    configuration.load_data_path_configuration()

    assert configuration.DATA_TASKS_PATH == custom / "tasks.yaml"
    assert configuration.DATA_PREFERENCES_PATH == custom / "preferences.yaml"
