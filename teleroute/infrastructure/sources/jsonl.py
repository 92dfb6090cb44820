"""
Update source replaying a JSON-lines file.

Each non-blank line holds one Bot API shaped update object. Lines that do
not decode to an update are logged and skipped.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import aiofiles

from ...core.domain.updates import Update
from ...core.interfaces.dispatching import IUpdateSource

logger = logging.getLogger(__name__)


class JsonLinesUpdateSource(IUpdateSource):
    """Reads updates lazily from a JSON-lines file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._file: Any = None
        self._pending: Optional[asyncio.Future[bytes]] = None
        self._line_number = 0
        self._skipped = 0
        self._closed = False

    @property
    def skipped(self) -> int:
        """Number of malformed lines skipped so far."""
        return self._skipped

    async def get_update(self) -> Optional[Update]:
        if self._closed:
            return None

        if self._file is None:
            self._file = await aiofiles.open(self._path, 'rb')

        while True:
            line = await self._read_line()
            if not line:
                return None

            self._line_number += 1
            line = line.strip()
            if not line:
                continue

            update = self._decode(line)
            if update is not None:
                return update

    async def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        if self._pending is not None:
            await asyncio.gather(self._pending, return_exceptions=True)
            self._pending = None
        if self._file is not None:
            await self._file.close()
            self._file = None

    async def _read_line(self) -> bytes:
        # A read cancelled by the dispatch loop is resumed by the next call
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._file.readline())
        try:
            line: bytes = await asyncio.shield(self._pending)
        except Exception:
            self._pending = None
            raise
        self._pending = None
        return line

    def _decode(self, line: bytes) -> Optional[Update]:
        try:
            data = json.loads(line.decode('utf-8'))
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            return Update.from_dict(data)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            self._skipped += 1
            logger.warning(f"Skipping malformed update on line {self._line_number} of {self._path}: {e}")
            return None
