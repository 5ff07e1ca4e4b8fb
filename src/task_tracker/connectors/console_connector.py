# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import Ask, Emit
from ..core.state import AppState

logger = logging.getLogger(__name__)

GOODBYE_MESSAGE = "Goodbye!"
INTERNAL_ERROR_MESSAGE = "Internal error while handling a command."


def run_console_loop(
    state: AppState,
    ask: Ask = input,
    emit: Emit = print,
    *,
    registry: CommandRegistry = command_registry,
) -> None:
    """
    Menu loop: show the menu, read a choice, dispatch it, print the reply.

    Ends on the exit choice, on EOF and on Ctrl+C.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())
    menu = registry.build_menu()

    while True:
        emit(menu)
        try:
            line = ask("")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if registry.is_exit(line):
            logger.info("Console exit command received.")
            emit(GOODBYE_MESSAGE)
            break

        try:
            response = registry.handle(state, line, ask, emit)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed inside a command, exiting.")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = INTERNAL_ERROR_MESSAGE

        if response is not None:
            emit(response)

        # blank line between rounds
        emit("")

    logger.info("Console connector finished.")
