# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from taskflow.model.user import User

Theme = Literal["light", "dark"]


class Preferences(TypedDict):
    theme: Theme
    has_visited: bool
    session_user: Optional[User]
