# SPDX-License-Identifier: MIT

import typer

from taskflow.terminal import configuration, session, task
from taskflow.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="TaskFlow - task management in the CLI",
    no_args_is_help=True,
)
app.add_typer(task.app, name="task, t")
app.add_typer(configuration.app, name="config, c")
app.command(name="stats, s")(task.stats)
app.command(name="login")(session.login)
app.command(name="logout")(session.logout)
app.command(name="whoami")(session.whoami)
app.command(name="theme")(session.theme)


def run() -> None:
    app()
