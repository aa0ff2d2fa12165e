"""FastAPI server streaming parsed GNSS data over WebSocket.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one
``type="gnss"`` JSON message per validated RMC or GGA sentence. ``GET
/stats`` returns the parser's running counters. Settings are read from
``NMEASTREAM_*`` environment variables (see ``server.config``).
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect

from nmeastream import GNSSReader, NMEAParser
from server.broadcaster import add_subscriber, remove_subscriber
from server.config import Settings
from server.formatters import format_stats
from server.sensors import run_gnss_loop

logger = logging.getLogger(__name__)


def _run_gnss_thread(loop: asyncio.AbstractEventLoop, gnss: GNSSReader) -> None:
    try:
        with gnss:
            run_gnss_loop(loop, gnss)
    except OSError as exc:
        logger.error("Cannot read from gpsd: %s", exc)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
    timeout: float,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=timeout)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )

    parser = NMEAParser()
    gnss = GNSSReader(host=settings.gpsd_host, port=settings.gpsd_port, parser=parser)
    application.state.settings = settings
    application.state.parser = parser

    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    loop.run_in_executor(executor, _run_gnss_thread, loop, gnss)
    logger.info("Streaming NMEA from gpsd at %s:%d", settings.gpsd_host, settings.gpsd_port)
    yield
    gnss.cancel()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.get("/stats")
async def stats(request: Request) -> dict[str, int]:
    """Return the parser's character and checksum counters."""
    return format_stats(request.app.state.parser)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream GNSS JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue. The oldest message is dropped
    when the queue is full so slow clients do not stall the reader thread.
    The connection closes with code 1001 if no message arrives within
    ``timeout_seconds``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    settings: Settings = websocket.app.state.settings
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=settings.queue_max_size)
    add_subscriber(queue)
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket, settings.timeout_seconds)
    finally:
        remove_subscriber(queue)
