from __future__ import annotations
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

X = TypeVar("X")
Y = TypeVar("Y")


def _same(a: object, b: object) -> bool:
    """Identity-then-equality match, as built-in containers do (NaN matches itself)."""
    return a is b or a == b


class PairNode(Generic[X, Y]):
    """A lightweight node for a singly-linked chain of (x, y) pairs."""

    __slots__ = ("x", "y", "next")

    def __init__(self, x: X, y: Y, next: Optional["PairNode[X, Y]"] = None) -> None:
        self.x = x
        self.y = y
        self.next = next


class PairChain(Generic[X, Y]):
    """Singly-linked list holding the pairs of one hash bucket.

    A pair appears at most once per chain. New pairs are spliced in at the
    head, so chain order is most-recent-first.
    """

    __slots__ = ("head", "_size")

    def __init__(self) -> None:
        self.head: Optional[PairNode[X, Y]] = None
        self._size: int = 0

    def find(self, x: X, y: Y) -> bool:
        """Return True if (x, y) is in the chain."""
        n = self.head
        while n:
            if _same(n.x, x) and _same(n.y, y):
                return True
            n = n.next
        return False

    def insert_if_absent(self, x: X, y: Y) -> bool:
        """Insert (x, y) at head unless an equal pair is already present.

        The whole chain is scanned first since a duplicate may sit anywhere
        in it. Returns True if a new node was inserted.
        """
        if self.find(x, y):
            return False
        self.head = PairNode(x, y, self.head)
        self._size += 1
        return True

    def delete(self, x: X, y: Y) -> bool:
        """Delete the node holding (x, y) if present; return True if deleted."""
        prev: Optional[PairNode[X, Y]] = None
        cur = self.head
        while cur:
            if _same(cur.x, x) and _same(cur.y, y):
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                self._size -= 1
                return True
            prev, cur = cur, cur.next
        return False

    def delete_where(self, pred: Callable[[X, Y], bool]) -> int:
        """Excise every node whose pair satisfies *pred*; return how many.

        ``prev`` only advances past nodes that are kept.
        """
        removed = 0
        prev: Optional[PairNode[X, Y]] = None
        cur = self.head
        while cur:
            if pred(cur.x, cur.y):
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                removed += 1
            else:
                prev = cur
            cur = cur.next
        self._size -= removed
        return removed

    def ys_for(self, x: X) -> Iterator[Y]:
        n = self.head
        while n:
            if _same(n.x, x):
                yield n.y
            n = n.next

    def xs_for(self, y: Y) -> Iterator[X]:
        n = self.head
        while n:
            if _same(n.y, y):
                yield n.x
            n = n.next

    def items(self) -> Iterator[Tuple[X, Y]]:
        """Yield (x, y) pairs in chain order."""
        n = self.head
        while n:
            yield (n.x, n.y)
            n = n.next

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self.head is not None
