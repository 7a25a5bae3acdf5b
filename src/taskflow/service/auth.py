# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from taskflow.errors import NotAuthenticatedError
from taskflow.model.user import User
from taskflow.repository.preferences import PreferencesRepository

logger = logging.getLogger(__name__)


class AuthSession:
    """
    Session state handed over by the sign-in provider.

    The provider reports through login() and fail(); task operations only
    consult is_authenticated.
    """

    def __init__(self, preferences: Optional[PreferencesRepository] = None) -> None:
        self._preferences = preferences
        self._user: Optional[User] = None
        self.last_error: Optional[str] = None
        if preferences is not None:
            self._user = preferences.get_preferences()["session_user"]

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def current_user(self) -> str:
        if self._user is None or not self._user["first_name"]:
            return "User"
        return self._user["first_name"]

    def login(self, user: User) -> None:
        self._user = user
        self.last_error = None
        self.__persist()
        logger.info("Signed in as %s", user["first_name"])

    def fail(self, error: str) -> None:
        self._user = None
        self.last_error = error
        self.__persist()
        logger.warning("Authentication failed: %s", error)

    def logout(self) -> None:
        self._user = None
        self.__persist()

    def require_authenticated(self) -> None:
        if not self.is_authenticated:
            raise NotAuthenticatedError()

    def __persist(self) -> None:
        if self._preferences is not None:
            self._preferences.update_preferences(
                session_user=self._user, remove_session_user=self._user is None
            )
