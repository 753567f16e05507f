# src/taskshelf/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import MenuRegistry
from ..cli.prompts import InputCollector
from ..core.state import AppState
from ..storage.errors import StoreCorruptedError, StoreError, StoreWriteError

logger = logging.getLogger(__name__)


def _friendly_store_error(e: StoreError) -> str:
    if isinstance(e, StoreCorruptedError):
        return (
            f"[STORE] Data file {e.path} is unreadable: {e.message}. "
            "Nothing was changed; fix or move the file and try again."
        )
    if isinstance(e, StoreWriteError):
        return f"[STORE] Could not save to {e.path}: {e.message}. Previous data is intact."
    return f"[STORE] Could not access {e.path}: {e.message}."


async def run_console_loop(state: AppState, menu: MenuRegistry, io: InputCollector | None = None) -> None:
    """Show `menu` until the user exits. Storage failures are reported, never fatal."""
    io = io or InputCollector()
    logger.info("Console connector started (menu=%s).", menu.title)

    while True:
        io.say("\n" + menu.render() + "\n")
        try:
            line = io.prompt("Choose an option: ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            io.say("")
            break

        if menu.is_exit(line):
            logger.info("Console exit command received.")
            break

        try:
            reply = await menu.handle(state, io, line)
        except StoreError as e:
            logger.warning("Store operation failed: %s", e)
            reply = _friendly_store_error(e)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed during an operation, exiting.")
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling the request."

        if reply is not None:
            io.say(reply)

    logger.info("Console connector finished.")
