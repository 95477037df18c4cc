"""Relationship queries between users, consumed by comment-privacy checks."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RelationshipQuery(Protocol):
    """Answers social-graph questions about two user ids."""

    def is_friend(self, a: int, b: int) -> bool: ...

    def is_friend_of_friend(self, a: int, b: int) -> bool: ...


class AdjacentIdRelationships:
    """Stand-in graph: friends differ by exactly 1, friends-of-friends by exactly 2.

    Replace with a real graph lookup by passing another RelationshipQuery to Core.
    """

    def is_friend(self, a: int, b: int) -> bool:
        return abs(a - b) == 1

    def is_friend_of_friend(self, a: int, b: int) -> bool:
        return abs(a - b) == 2
