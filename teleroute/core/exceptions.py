"""
Exceptions raised by the dispatch engine and its collaborators.

Predicates never raise: absent data is a non-match. These exceptions cover
misuse of the engine's lifecycle and of the update sources.
"""


class TelerouteError(Exception):
    """Base exception for all library errors."""
    pass


class HandlerStateError(TelerouteError):
    """Raised when a lifecycle transition is not allowed from the current state."""

    def __init__(self, current: str, attempted: str) -> None:
        self.current = current
        self.attempted = attempted
        super().__init__(f"Cannot {attempted} bot handler in state {current}")


class UpdateSourceClosed(TelerouteError):
    """Raised when pushing an update into a source that has been closed."""
    pass
