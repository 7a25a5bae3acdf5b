# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Any, Coroutine, TypeVar

import typer

from taskflow.errors import StoreError, TaskFlowError
from taskflow.view.notification import notify_error

logger = logging.getLogger(__name__)

T = TypeVar("T")


def dispatch(intent: Coroutine[Any, Any, T], failure_message: str) -> T:
    """
    Run one user intent to completion.

    Store failures are reported with failure_message, other task errors with
    their own message; both end the command with exit status 1.
    """
    try:
        return asyncio.run(intent)
    except StoreError as e:
        logger.error("%s", e)
        notify_error(failure_message)
        raise typer.Exit(1)
    except TaskFlowError as e:
        logger.info("%s", e)
        notify_error(str(e))
        raise typer.Exit(1)
