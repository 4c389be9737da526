"""Manages active WebSocket subscriber queues and message broadcasting.

All functions run on the event loop thread; queues are never touched from
other threads.
"""

import asyncio
import logging

__all__ = ["add_subscriber", "broadcast_message", "remove_subscriber", "subscriber_count"]

logger = logging.getLogger(__name__)

_subscriber_queues: list[asyncio.Queue[str]] = []


def add_subscriber(queue: asyncio.Queue[str]) -> None:
    """Register a subscriber queue for future broadcasts."""
    _subscriber_queues.append(queue)
    logger.debug("Subscriber added, %d active", len(_subscriber_queues))


def remove_subscriber(queue: asyncio.Queue[str]) -> None:
    """Unregister a subscriber queue."""
    _subscriber_queues.remove(queue)
    logger.debug("Subscriber removed, %d active", len(_subscriber_queues))


def subscriber_count() -> int:
    """Return the number of registered subscriber queues."""
    return len(_subscriber_queues)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    # Drop the oldest message so a slow client never blocks the producer
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def broadcast_message(message: str) -> None:
    """Deliver a message to every registered subscriber queue."""
    for queue in list(_subscriber_queues):
        _enqueue_message(queue, message)
