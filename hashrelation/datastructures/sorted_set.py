from __future__ import annotations
from bisect import bisect_left
from collections.abc import Set
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class SortedSet(Set, Generic[T]):
    """A deduplicated collection kept in ascending order.

    Implementation notes
    --------------------
    • Storage is a plain Python list kept sorted; positions come from `bisect`.
    • Membership is a binary search, O(log n). Insertion is O(n) because of
      the shift, which is fine for the short projection results it holds.
    • Being a `collections.abc.Set`, it compares equal to a built-in `set`
      or `frozenset` with the same members.
    • Elements must support a total order (`<`) as well as `==`.
    """

    __slots__ = ("_items",)

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = []
        if it is not None:
            for v in it:
                self.add(v)

    # ------------------------------- internals -------------------------------

    def _locate(self, value: T) -> int:
        """Return the insertion point for `value` (left of any equal item)."""
        return bisect_left(self._items, value)

    # --------------------------------- API -----------------------------------

    def add(self, value: T) -> bool:
        """Insert `value` in order unless already present.

        Returns True if it was inserted.
        """
        i = self._locate(value)
        if i < len(self._items) and self._items[i] == value:
            return False
        self._items.insert(i, value)
        return True

    def __contains__(self, value: object) -> bool:
        """Binary search for `value`."""
        try:
            i = self._locate(value)  # type: ignore[arg-type]
        except TypeError:
            # Intentional: a value of a different type (e.g. an int looked up in a
            # set of str) is simply not a member. This also masks a TypeError
            # raised from inside an element's own __lt__.
            return False
        return i < len(self._items) and self._items[i] == value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield items in ascending order."""
        return iter(self._items)

    def __getitem__(self, idx: int) -> T:
        """Return the `idx`-th smallest item (negative indices allowed)."""
        return self._items[idx]

    def first(self) -> Optional[T]:
        """Smallest item, or None when empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[T]:
        """Largest item, or None when empty."""
        return self._items[-1] if self._items else None

    def to_py(self) -> List[T]:
        """Convert to a plain Python `list` in ascending order."""
        return list(self._items)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SortedSet({self._items!r})"
