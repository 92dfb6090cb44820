"""
Component interface for long-running parts of a bot.

An embedding application drives the dispatch engine through this surface:
it awaits ``start()`` as the main task, calls ``stop()`` from a signal
handler or another task, and polls ``check_health()``/``get_metrics()``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IComponent(ABC):
    """A named component with a start/stop lifecycle and health reporting."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def version(self) -> str:
        pass

    @abstractmethod
    async def start(self) -> None:
        """
        Run the component.

        The coroutine returns only after the component has stopped, either
        because ``stop()`` was called or because its input ran out.

        Raises:
            HandlerStateError: If the component was already started
        """
        pass

    @abstractmethod
    async def stop(self) -> None:
        """Stop the component; calling it again is a no-op."""
        pass

    @abstractmethod
    async def configure(self, config: Dict[str, Any]) -> None:
        """
        Apply settings from a mapping, ignoring keys the component does
        not know.

        Raises:
            ValueError: If a recognized setting has an invalid value
        """
        pass

    @abstractmethod
    async def check_health(self) -> Dict[str, Any]:
        """
        Report health as ``{'healthy': bool, 'status': str, 'details': dict}``.
        """
        pass

    @abstractmethod
    async def get_metrics(self) -> Dict[str, Any]:
        """Return a snapshot of the component's counters."""
        pass
