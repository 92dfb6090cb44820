"""
In-memory, push-style update source.

A transport (webhook endpoint, polling task, test) pushes updates in; the
dispatch loop pulls them out in the same order.
"""

import asyncio
import logging
from typing import Optional

from ...core.domain.updates import Update
from ...core.exceptions import UpdateSourceClosed
from ...core.interfaces.dispatching import IUpdateSource

logger = logging.getLogger(__name__)


class QueueUpdateSource(IUpdateSource):
    """
    Update source backed by an ``asyncio.Queue``.

    Closing the source ends the stream once the updates already queued
    have been consumed.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: asyncio.Queue[Optional[Update]] = asyncio.Queue(maxsize=maxsize)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def qsize(self) -> int:
        """Number of updates waiting to be consumed."""
        return self._queue.qsize()

    async def put(self, update: Update) -> None:
        """
        Queue an update, waiting for room if the queue is bounded.

        Raises:
            UpdateSourceClosed: If the source has been closed
        """
        if self._closed:
            raise UpdateSourceClosed("Cannot put update into a closed source")
        await self._queue.put(update)

    def put_nowait(self, update: Update) -> None:
        """
        Queue an update without waiting.

        Raises:
            UpdateSourceClosed: If the source has been closed
            asyncio.QueueFull: If the queue is bounded and full
        """
        if self._closed:
            raise UpdateSourceClosed("Cannot put update into a closed source")
        self._queue.put_nowait(update)

    async def get_update(self) -> Optional[Update]:
        if self._closed and self._queue.empty():
            return None

        update = await self._queue.get()
        if update is None:
            # Leave the end marker for later readers
            self._queue.put_nowait(None)
        return update

    async def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        try:
            self._queue.put_nowait(None)
        except asyncio.QueueFull:
            pass

        logger.debug(f"Queue update source closed with {self._queue.qsize()} entries pending")
