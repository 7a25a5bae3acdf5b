# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskflow import configuration
from taskflow.model.preferences import Preferences, Theme
from taskflow.model.user import User
from taskflow.template.preferences import get_preferences_template


class PreferencesRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._preferences: Optional[Preferences] = None
        self.is_dirty = False

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_PREFERENCES_PATH

    @property
    def preferences(self) -> Preferences:
        if self._preferences is None:
            self.__load_data()
        if self._preferences is None:
            raise ValueError()
        return self._preferences

    def __load_data(self) -> None:
        self._preferences = get_preferences_template()
        if not self.path.is_file():
            return
        stored = load(self.path.read_text(), Loader=Loader)
        if stored is not None:
            # Missing keys keep their template defaults
            self._preferences.update(stored)

    def __save_data(self, preferences: Preferences) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump(dict(preferences), Dumper=Dumper))

    def flush(self) -> bool:
        if self._preferences is not None and self.is_dirty:
            self.__save_data(self._preferences)
            self.is_dirty = False
            return True
        return False

    def get_preferences(self) -> Preferences:
        return deepcopy(self.preferences)

    def update_preferences(
        self,
        theme: Optional[Theme] = None,
        has_visited: Optional[bool] = None,
        session_user: Optional[User] = None,
        remove_session_user: bool = False,
    ) -> None:
        self.is_dirty = True

        if theme is not None:
            self.preferences["theme"] = theme
        if has_visited is not None:
            self.preferences["has_visited"] = has_visited
        if session_user is not None:
            self.preferences["session_user"] = deepcopy(session_user)
        if remove_session_user:
            self.preferences["session_user"] = None


PREFERENCES_REPO = PreferencesRepository()
