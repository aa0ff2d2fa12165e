"""Subscriber queues for GNSS messages and thread-safe broadcasting.

The gpsd reader runs on a worker thread and never touches a queue itself:
``broadcast_message`` schedules every put on the event loop. Each queue is
bounded and drops its oldest message when full.
"""

import asyncio
import logging

__all__ = [
    "add_subscriber",
    "broadcast_message",
    "remove_subscriber",
    "subscriber_count",
]

logger = logging.getLogger(__name__)

_subscriber_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Start delivering broadcast messages to ``queue``."""
    _subscriber_queues.append(queue)
    logger.info("Subscriber added (%d active)", len(_subscriber_queues))


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    """Stop delivering broadcast messages to ``queue``."""
    _subscriber_queues.remove(queue)
    logger.info("Subscriber removed (%d active)", len(_subscriber_queues))


def subscriber_count() -> int:
    return len(_subscriber_queues)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
        logger.debug("Subscriber queue full; dropped the oldest message")
    queue.put_nowait(message)


def broadcast_message(message: str, loop: asyncio.AbstractEventLoop) -> None:
    """Schedule ``message`` for every subscriber on ``loop``.

    Safe to call from any thread.
    """
    for queue in list(_subscriber_queues):
        loop.call_soon_threadsafe(_enqueue_message, queue, message)
