# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskflow import configuration
from taskflow.repository.configuration import CONFIGURATION_REPO
from taskflow.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("store_backend", config["store_backend"])
    table.add_row("remote_url", config["remote_url"] or "None")
    table.add_row("project_id", config["project_id"] or "None")
    table.add_row("public_key", "********" if config["public_key"] else "None")
    table.add_row("request_timeout", str(config["request_timeout"]))
    table.add_row("page_limit", str(config["page_limit"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("log_level", config["log_level"])

    console.print(table)


@app.command("set, s")
def set(
    store_backend: Annotated[
        Optional[str],
        typer.Option("--store-backend", help="valid input: local, remote"),
    ] = None,
    remote_url: Annotated[
        Optional[str],
        typer.Option("--remote-url", help="Base URL of the hosted record API"),
    ] = None,
    remove_remote_url: Annotated[
        bool, typer.Option("--remove-remote-url", help="Clear the remote URL")
    ] = False,
    project_id: Annotated[Optional[str], typer.Option("--project-id")] = None,
    public_key: Annotated[Optional[str], typer.Option("--public-key")] = None,
    request_timeout: Annotated[
        Optional[float],
        typer.Option("--request-timeout", min=0.1, help="Seconds per store request"),
    ] = None,
    page_limit: Annotated[
        Optional[int],
        typer.Option("--page-limit", min=1, help="Tasks fetched per listing"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory for local data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", help="Console log level")
    ] = None,
) -> None:
    """Update configuration settings."""
    if store_backend is not None and store_backend not in ("local", "remote"):
        raise typer.BadParameter("store_backend must be one of: local, remote")
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"log_level must be one of: {', '.join(LOG_LEVELS)}")

    backend: Optional[configuration.StoreBackend] = None
    if store_backend == "remote":
        backend = "remote"
    elif store_backend == "local":
        backend = "local"

    CONFIGURATION_REPO.update_config(
        store_backend=backend,
        remote_url=remote_url,
        remove_remote_url=remove_remote_url,
        project_id=project_id,
        public_key=public_key,
        request_timeout=request_timeout,
        page_limit=page_limit,
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_level=log_level,
    )
    view()
