from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple, TypeVar

from .linked_list import PairChain, _same
from .relation import Relation
from .sorted_set import SortedSet

X = TypeVar("X")
Y = TypeVar("Y")

# Bucket count used when the caller does not pick one.
DEFAULT_BUCKETS = 16


def _require(value: object, name: str) -> None:
    """Reject a missing (None) component before any chain is touched."""
    if value is None:
        raise ValueError(f"{name} must not be None")


class HashRelation(Relation[X, Y]):
    """A closed-bucket hash table implementing :class:`Relation`.

    Layout:
    - A fixed list of ``m`` buckets, each a :class:`PairChain`.
    - A pair (x, y) lives in bucket ``abs(hash(x)) % m``; y never takes part
      in placement.

    Consequences:
    - Operations keyed by x touch a single chain: O(chain length).
    - Operations keyed by y must visit every bucket: O(m + n).
    - The table is never resized, so ``m`` should be chosen for the expected
      number of pairs; a high load factor degrades towards a linear scan.

    Not thread-safe. Callers sharing an instance across threads must
    serialize access themselves.
    """

    __slots__ = ("_m", "_buckets", "_size")

    def __init__(self, buckets: int = DEFAULT_BUCKETS) -> None:
        if isinstance(buckets, bool) or not isinstance(buckets, int) or buckets < 1:
            raise ValueError("buckets must be a positive integer")
        self._m: int = buckets
        self._buckets: List[PairChain[X, Y]] = [PairChain() for _ in range(self._m)]
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_index(self, x: X) -> int:
        """Compute the bucket index for x."""
        _require(x, "x")
        return abs(hash(x)) % self._m

    # -----------------------------
    # Queries
    # -----------------------------
    def contains_pair(self, x: X, y: Y) -> bool:
        idx = self._bucket_index(x)
        _require(y, "y")
        return self._buckets[idx].find(x, y)

    def y_values_given_x(self, x: X) -> SortedSet[Y]:
        idx = self._bucket_index(x)
        return SortedSet(self._buckets[idx].ys_for(x))

    def x_values_given_y(self, y: Y) -> SortedSet[X]:
        """Scan every bucket; y has no bucket of its own."""
        _require(y, "y")
        result: SortedSet[X] = SortedSet()
        for bucket in self._buckets:
            for x in bucket.xs_for(y):
                result.add(x)
        return result

    # -----------------------------
    # Mutations
    # -----------------------------
    def clear(self) -> None:
        """Drop every chain. O(m)."""
        for i in range(self._m):
            self._buckets[i] = PairChain()
        self._size = 0

    def add_pair(self, x: X, y: Y) -> bool:
        idx = self._bucket_index(x)
        _require(y, "y")
        inserted = self._buckets[idx].insert_if_absent(x, y)
        if inserted:
            self._size += 1
        return inserted

    def remove_pair(self, x: X, y: Y) -> bool:
        idx = self._bucket_index(x)
        _require(y, "y")
        if self._buckets[idx].delete(x, y):
            self._size -= 1
            return True
        return False

    def remove_all_pairs_given_x(self, x: X) -> int:
        idx = self._bucket_index(x)
        removed = self._buckets[idx].delete_where(lambda px, _py: _same(px, x))
        self._size -= removed
        return removed

    def remove_all_pairs_given_y(self, y: Y) -> int:
        _require(y, "y")
        removed = 0
        for bucket in self._buckets:
            removed += bucket.delete_where(lambda _px, py: _same(py, y))
        self._size -= removed
        return removed

    # -----------------------------
    # Bulk insertion
    # -----------------------------
    def bulk_add(self, pairs: Iterable[Tuple[X, Y]]) -> int:
        """Add many pairs; return how many were new.

        Every pair is validated (and x hashed) before the first insertion, so
        a bad pair leaves the relation untouched.
        """
        if not isinstance(pairs, (list, tuple)):
            pairs = list(pairs)
        placed = []
        for x, y in pairs:
            idx = self._bucket_index(x)
            _require(y, "y")
            placed.append((idx, x, y))

        added = 0
        for idx, x, y in placed:
            if self._buckets[idx].insert_if_absent(x, y):
                added += 1
        self._size += added
        return added

    # -----------------------------
    # Rendering & diagnostics
    # -----------------------------
    def render(self) -> str:
        """One line per bucket, in index order; pairs as ``(x,y)``.

        Empty buckets still produce a line break.
        """
        lines = []
        for bucket in self._buckets:
            lines.append(", ".join(f"({x},{y})" for x, y in bucket.items()))
            lines.append("\n")
        return "".join(lines)

    @property
    def bucket_count(self) -> int:
        return self._m

    def load_factor(self) -> float:
        """Stored pairs per bucket."""
        return self._size / self._m

    def chain_lengths(self) -> List[int]:
        return [len(bucket) for bucket in self._buckets]

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def pairs(self) -> Iterator[Tuple[X, Y]]:
        """Yield (x, y) bucket by bucket, in chain order."""
        for bucket in self._buckets:
            yield from bucket.items()

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Tuple[X, Y]]:
        return self.pairs()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"({x!r}, {y!r})" for x, y in self.pairs())
        return f"HashRelation(buckets={self._m}, pairs=[{pairs}])"
