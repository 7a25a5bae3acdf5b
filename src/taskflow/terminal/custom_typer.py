# SPDX-License-Identifier: MIT

from typing import Optional

import click
import typer.core

COMMAND_ORDER = (
    "task",
    "stats",
    "login",
    "logout",
    "whoami",
    "theme",
    "config",
)


def split_aliases(registered_name: str) -> list[str]:
    """Split "task, t" into ["task", "t"]."""
    return [alias.strip() for alias in registered_name.split(",") if alias.strip()]


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as "name, alias, ..." """

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        for registered_name in self.commands:
            if cmd_name in split_aliases(registered_name):
                return self.commands[registered_name]
        return super().get_command(ctx, cmd_name)

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Top level commands in COMMAND_ORDER, subcommands as registered"""

        def position(registered_name: str) -> int:
            primary = split_aliases(registered_name)[0]
            if primary in COMMAND_ORDER:
                return COMMAND_ORDER.index(primary)
            return len(COMMAND_ORDER)

        return sorted(self.commands, key=position)
