# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from taskflow.model.preferences import Theme
from taskflow.repository.preferences import PREFERENCES_REPO
from taskflow.service.auth import AuthSession
from taskflow.view.icon import get_icon
from taskflow.view.notification import notify_error, notify_info, notify_success


def login(
    first_name: str,
    email: Annotated[Optional[str], typer.Option("--email", "-e")] = None,
) -> None:
    """Start a session for the given user."""
    auth = AuthSession(PREFERENCES_REPO)
    if not first_name.strip():
        auth.fail("A name is required to sign in")
        notify_error("A name is required to sign in")
        raise typer.Exit(1)

    auth.login({"first_name": first_name.strip(), "email": email})
    notify_success(f"Signed in as {auth.current_user}")


def logout() -> None:
    """End the current session."""
    auth = AuthSession(PREFERENCES_REPO)
    auth.logout()
    notify_info(f"{get_icon('LogOut')} Signed out")


def whoami() -> None:
    """Show the signed-in user."""
    auth = AuthSession(PREFERENCES_REPO)
    console = Console()
    if not auth.is_authenticated:
        console.print("Not signed in")
        raise typer.Exit(1)
    user = auth.user
    email = f" <{user['email']}>" if user is not None and user["email"] else ""
    console.print(f"{get_icon('User')} {auth.current_user}{email}")


def theme(
    value: Annotated[
        Optional[str], typer.Argument(help="valid input: light, dark")
    ] = None,
) -> None:
    """Show the colour theme, or switch it to light or dark."""
    preferences = PREFERENCES_REPO.get_preferences()
    if value is None:
        icon = get_icon("Moon") if preferences["theme"] == "dark" else get_icon("Sun")
        Console().print(f"{icon} {preferences['theme']}")
        return
    if value not in ("light", "dark"):
        raise typer.BadParameter("Theme must be one of: light, dark")
    new_theme: Theme = "dark" if value == "dark" else "light"
    PREFERENCES_REPO.update_preferences(theme=new_theme)
    notify_success(f"Theme set to {new_theme}")
