"""
Load (x, y) pairs from CSV into a relation.

The expected file has two columns per row. A first non-blank row reading ``x,y``
is treated as a header and skipped; blank lines are ignored. Values are
kept as strings.
"""

from __future__ import annotations

import csv
import logging
from typing import List, Tuple

from .datastructures import DEFAULT_BUCKETS, HashRelation

logger = logging.getLogger(__name__)

HEADER = ["x", "y"]


def load_pairs(path: str) -> List[Tuple[str, str]]:
    """Read every pair from the CSV at `path`.

    Raises:
        FileNotFoundError: if `path` does not exist.
        ValueError: if a non-blank row does not have exactly two columns.
    """
    pairs: List[Tuple[str, str]] = []
    first_row = True
    # utf-8-sig drops the byte-order mark spreadsheet exports put at the front
    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        for row in reader:
            if not row or all(not c.strip() for c in row):
                continue
            is_header = first_row and [c.strip().lower() for c in row] == HEADER
            first_row = False
            if is_header:
                continue
            if len(row) != 2:
                raise ValueError(f"{path}:{reader.line_num}: expected 2 columns, got {len(row)}")
            pairs.append((row[0].strip(), row[1].strip()))
    return pairs


def load_relation(path: str, buckets: int = DEFAULT_BUCKETS) -> HashRelation[str, str]:
    """Build a HashRelation with `buckets` buckets from the pairs in `path`."""
    pairs = load_pairs(path)
    rel: HashRelation[str, str] = HashRelation(buckets)
    added = rel.bulk_add(pairs)
    logger.info("Loaded %d pairs from %s (%d new, %d duplicate)", len(pairs), path, added, len(pairs) - added)
    return rel
