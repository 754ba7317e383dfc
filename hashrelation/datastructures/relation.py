from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .sorted_set import SortedSet

X = TypeVar("X")
Y = TypeVar("Y")


class Relation(ABC, Generic[X, Y]):
    """Abstract Relation: a collection of binary pairs (x, y).

    The pair is the uniqueness key. The same x may be paired with many y
    values and vice versa, but a given (x, y) is stored at most once.

    Both component types must be hashable and support ``==``; they must also
    be totally ordered, since the projection queries return a
    :class:`SortedSet`.

    Not-found is never an error: lookups return False or an empty set and
    removals of absent pairs are silent no-ops.
    """

    __slots__ = ()

    @abstractmethod
    def contains_pair(self, x: X, y: Y) -> bool:
        """Return True if the relation holds (x, y)."""

    @abstractmethod
    def y_values_given_x(self, x: X) -> SortedSet[Y]:
        """All y such that (x, y) is in the relation."""

    @abstractmethod
    def x_values_given_y(self, y: Y) -> SortedSet[X]:
        """All x such that (x, y) is in the relation."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every pair."""

    @abstractmethod
    def add_pair(self, x: X, y: Y) -> bool:
        """Add (x, y) if absent. Returns True if the pair was new."""

    @abstractmethod
    def remove_pair(self, x: X, y: Y) -> bool:
        """Remove (x, y) if present. Returns True if a pair was removed."""

    @abstractmethod
    def remove_all_pairs_given_x(self, x: X) -> int:
        """Remove every pair whose first component is x; return the count."""

    @abstractmethod
    def remove_all_pairs_given_y(self, y: Y) -> int:
        """Remove every pair whose second component is y; return the count."""

    @abstractmethod
    def render(self) -> str:
        """Diagnostic text dump of the relation's contents."""

    def __contains__(self, pair: object) -> bool:
        """Support ``(x, y) in relation``."""
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return self.contains_pair(pair[0], pair[1])

    def __str__(self) -> str:
        return self.render()
