# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from taskflow.model.preferences import Theme
from taskflow.view.icon import get_icon
from taskflow.view.theme import get_palette


def header(current_user: str, theme: Theme, sub_header: Optional[str] = None) -> None:
    """Print the application header with the signed-in user.

    Args:
        current_user: Display name of the signed-in user
        theme: Active colour theme
        sub_header: Optional sub-header text to display
    """
    palette = get_palette(theme)

    additional = ""
    if sub_header is not None:
        additional = f"[{palette['sub_header']}]{sub_header}[/{palette['sub_header']}]"
    user = f"[{palette['user']}]{get_icon('User')} {current_user}[/{palette['user']}]"

    print(Padding(f"[{palette['brand']}]TaskFlow[/{palette['brand']}]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(user, (0, 1)))
