from .sorted_set import SortedSet
from .linked_list import PairChain, PairNode
from .relation import Relation
from .hash_relation import DEFAULT_BUCKETS, HashRelation

__all__ = [
    "SortedSet",
    "PairChain",
    "PairNode",
    "Relation",
    "HashRelation",
    "DEFAULT_BUCKETS",
]
