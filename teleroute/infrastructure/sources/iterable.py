"""
Update source adapting a synchronous or asynchronous iterable.
"""

from typing import Any, AsyncIterable, Iterable, Optional, Union

from ...core.domain.updates import Update
from ...core.interfaces.dispatching import IUpdateSource


class IterableUpdateSource(IUpdateSource):
    """Yields the updates of an iterable, then ends the stream."""

    def __init__(self, updates: Union[Iterable[Update], AsyncIterable[Update]]) -> None:
        self._is_async = hasattr(updates, '__aiter__')
        self._iterator: Any = updates.__aiter__() if self._is_async else iter(updates)  # type: ignore[union-attr, arg-type]
        self._closed = False

    async def get_update(self) -> Optional[Update]:
        if self._closed:
            return None

        if self._is_async:
            try:
                return await self._iterator.__anext__()  # type: ignore[no-any-return]
            except StopAsyncIteration:
                return None

        try:
            return next(self._iterator)  # type: ignore[no-any-return]
        except StopIteration:
            return None

    async def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        aclose = getattr(self._iterator, 'aclose', None)
        if aclose is not None:
            await aclose()
