"""
Dispatching interfaces.

These define the contract between the dispatch engine and the component
that produces updates, and the registration surface the engine exposes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..domain.updates import Update


Handler = Callable[[Any, Update], Any]
"""Handler callback receiving ``(bot, update)``; may be a coroutine function."""


class IUpdateSource(ABC):
    """Interface for producers of updates."""

    @abstractmethod
    async def get_update(self) -> Optional[Update]:
        """
        Wait for the next update.

        Returns:
            The next update, or None once the stream has ended

        The dispatch loop may cancel this coroutine when it is stopped;
        implementations must leave no update half-consumed on cancellation.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Release the source.

        After closing, ``get_update`` returns None once buffered updates
        are drained. Closing twice is a no-op.
        """
        pass


class IBotHandler(ABC):
    """Interface for the registration surface of a dispatch engine."""

    @abstractmethod
    def handle(self, handler: Handler, *predicates: Any) -> Any:
        """
        Register a handler guarded by the conjunction of ``predicates``.

        Args:
            handler: Callback invoked with ``(bot, update)``
            *predicates: Predicates that must all hold for the update

        Returns:
            The registered entry

        Raises:
            TypeError: If the handler or a predicate is not callable
        """
        pass

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether the dispatch loop is currently consuming updates."""
        pass
