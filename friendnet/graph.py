from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .errors import AlreadyFriends, CapacityExceeded, NotFriends, SelfFriend, UserNotFound

if TYPE_CHECKING:
    from .directory import UserDirectory
    from .models import User

logger = logging.getLogger(__name__)


class FriendSlots:
    """Fixed number of friend positions. Each slot holds a friend's name or None.

    New friends always land in the lowest empty slot, which is also the order
    friends are listed in.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("friend capacity must be at least 1")
        self._slots: List[Optional[str]] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def first_open(self) -> Optional[int]:
        for index, occupant in enumerate(self._slots):
            if occupant is None:
                return index
        return None

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def add(self, name: str) -> int:
        index = self.first_open()
        if index is None:
            raise CapacityExceeded()
        self._slots[index] = name
        self._count += 1
        return index

    def remove(self, name: str) -> bool:
        removed = False
        for index, occupant in enumerate(self._slots):
            if occupant == name:
                self._slots[index] = None
                self._count -= 1
                removed = True
        return removed

    def names(self) -> List[str]:
        return [name for name in self._slots if name is not None]

    def clear(self) -> None:
        self._slots = [None] * len(self._slots)
        self._count = 0

    def __contains__(self, name: object) -> bool:
        return name is not None and name in self._slots

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return self._count


class FriendshipGraph:
    """Symmetric friend relation over the users of a directory."""

    def __init__(self, directory: UserDirectory) -> None:
        self._directory = directory

    def _pair(self, name_a: str, name_b: str) -> Tuple[User, User]:
        user_a = self._directory.find_user(name_a)
        user_b = self._directory.find_user(name_b)
        if user_a is None or user_b is None:
            raise UserNotFound()
        if name_a == name_b:
            raise SelfFriend()
        return user_a, user_b

    def make_friends(self, name_a: str, name_b: str) -> None:
        user_a, user_b = self._pair(name_a, name_b)
        if user_a.friends.is_full() or user_b.friends.is_full():
            raise CapacityExceeded()
        if self.are_friends(name_a, name_b):
            raise AlreadyFriends()
        user_a.friends.add(name_b)
        user_b.friends.add(name_a)
        logger.info("%s and %s are now friends", name_a, name_b)

    def unfriend(self, name_a: str, name_b: str) -> None:
        user_a, user_b = self._pair(name_a, name_b)
        if not self.are_friends(name_a, name_b):
            raise NotFriends(f"{name_a} and {name_b} are not friends")
        user_a.friends.remove(name_b)
        user_b.friends.remove(name_a)
        logger.info("%s and %s are no longer friends", name_a, name_b)

    def are_friends(self, name_a: str, name_b: str) -> bool:
        user_a = self._directory.find_user(name_a)
        if user_a is None:
            return False
        return name_b in user_a.friends

    def friends_of(self, name: str) -> List[str]:
        user = self._directory.find_user(name)
        if user is None:
            raise UserNotFound()
        return user.friends.names()

    def purge_references(self, name: str) -> int:
        purged = 0
        for user in self._directory:
            if user.friends.remove(name):
                purged += 1
        if purged:
            logger.debug("Removed %s from %d friend lists", name, purged)
        return purged
