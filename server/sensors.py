"""Background GNSS reading loop."""

import asyncio
import logging

from nmeastream import GNSSReader
from server.broadcaster import broadcast_message
from server.formatters import format_gnss_message

__all__ = ["run_gnss_loop"]

logger = logging.getLogger(__name__)


def run_gnss_loop(loop: asyncio.AbstractEventLoop, gnss: GNSSReader) -> None:
    """Read GNSS snapshots continuously and broadcast them to the event loop.

    The caller owns *gnss* and must use it as an open context manager. The
    loop exits when ``gnss.cancel()`` is called, which causes the underlying
    ``GNSSReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        gnss: An open ``GNSSReader`` instance managed by the caller.
    """
    try:
        for data in gnss:
            broadcast_message(format_gnss_message(data), loop)
    except EOFError:
        logger.info("GNSS loop stopped")
        return
