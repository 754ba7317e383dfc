from .datastructures import HashRelation, Relation, SortedSet

__all__ = ["HashRelation", "Relation", "SortedSet"]
