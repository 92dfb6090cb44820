"""
Predicate algebra.

A predicate is a pure boolean test over an update. Leaf matchers and the
combinators below share the ``Predicate`` base class, so any of them can be
nested inside the others and combined with ``|``, ``&`` and ``~``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple

from ..domain.updates import Update


PredicateLike = Any
"""A ``Predicate`` instance or a plain ``Callable[[Update], bool]``."""


class Predicate(ABC):
    """Base class for boolean tests over an update."""

    @abstractmethod
    def __call__(self, update: Update) -> bool:
        """
        Evaluate the predicate.

        Implementations must not mutate the update and must return False,
        not raise, when the data they inspect is absent.
        """
        pass

    def __or__(self, other: PredicateLike) -> 'Union':
        return Union(self, other)

    def __ror__(self, other: PredicateLike) -> 'Union':
        return Union(other, self)

    def __and__(self, other: PredicateLike) -> 'All':
        return All(self, other)

    def __rand__(self, other: PredicateLike) -> 'All':
        return All(other, self)

    def __invert__(self) -> 'Not':
        return Not(self)


class FunctionPredicate(Predicate):
    """Adapts a plain callable to the ``Predicate`` interface."""

    def __init__(self, func: Callable[[Update], Any]) -> None:
        self._func = func

    def __call__(self, update: Update) -> bool:
        return bool(self._func(update))

    def __repr__(self) -> str:
        return f"FunctionPredicate({getattr(self._func, '__qualname__', repr(self._func))})"


def as_predicate(predicate: PredicateLike) -> Predicate:
    """
    Coerce a predicate-like value into a ``Predicate``.

    Raises:
        TypeError: If the value is not callable
    """
    if isinstance(predicate, Predicate):
        return predicate
    if not callable(predicate):
        raise TypeError(f"Predicate must be callable, got {type(predicate).__name__}")
    return FunctionPredicate(predicate)


class Union(Predicate):
    """
    True if at least one of the predicates is true.

    Evaluates left to right and stops at the first true predicate. An empty
    union is always false.
    """

    def __init__(self, *predicates: PredicateLike) -> None:
        self.predicates: Tuple[Predicate, ...] = tuple(as_predicate(p) for p in predicates)

    def __call__(self, update: Update) -> bool:
        for predicate in self.predicates:
            if predicate(update):
                return True
        return False

    def __repr__(self) -> str:
        return f"Union({', '.join(map(repr, self.predicates))})"


class All(Predicate):
    """
    True if every predicate is true.

    This is the guard built from the predicates of a single registration.
    Evaluates left to right and stops at the first false predicate. An
    empty conjunction is always true.
    """

    def __init__(self, *predicates: PredicateLike) -> None:
        self.predicates: Tuple[Predicate, ...] = tuple(as_predicate(p) for p in predicates)

    def __call__(self, update: Update) -> bool:
        for predicate in self.predicates:
            if not predicate(update):
                return False
        return True

    def __repr__(self) -> str:
        return f"All({', '.join(map(repr, self.predicates))})"


class Not(Predicate):
    """True if the wrapped predicate is false."""

    def __init__(self, predicate: PredicateLike) -> None:
        self.predicate = as_predicate(predicate)

    def __call__(self, update: Update) -> bool:
        return not self.predicate(update)

    def __repr__(self) -> str:
        return f"Not({self.predicate!r})"
