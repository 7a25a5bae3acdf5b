# SPDX-License-Identifier: MIT

from taskflow.model.preferences import Preferences


def get_preferences_template() -> Preferences:
    return {
        "theme": "light",
        "has_visited": False,
        "session_user": None,
    }
