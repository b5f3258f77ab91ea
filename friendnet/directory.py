from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from .errors import DuplicateName, NameTooLong, NotFound
from .models import DEFAULT_MAX_FRIENDS, DEFAULT_MAX_NAME, User, encoded_length

logger = logging.getLogger(__name__)


class UserDirectory:
    """Insertion-ordered store of every user, keyed by name.

    The directory is the only owner of ``User`` objects. Removing a user here
    does not touch other users' friend lists; callers pair ``remove`` with
    ``FriendshipGraph.purge_references``.
    """

    def __init__(
        self,
        max_name: int = DEFAULT_MAX_NAME,
        max_friends: int = DEFAULT_MAX_FRIENDS,
    ) -> None:
        self.max_name = max_name
        self.max_friends = max_friends
        self._users: Dict[str, User] = {}

    def create_user(self, name: str) -> User:
        if name in self._users:
            raise DuplicateName(f"user {name} already exists")
        if encoded_length(name) > self.max_name - 1:
            raise NameTooLong(f"user name longer than {self.max_name - 1} bytes")
        user = User.create(name, max_friends=self.max_friends)
        self._users[name] = user
        logger.info("Created user %s (%d users)", name, len(self._users))
        return user

    def find_user(self, name: str) -> Optional[User]:
        return self._users.get(name)

    def list_users(self) -> List[str]:
        return list(self._users)

    def remove(self, name: str) -> User:
        user = self._users.pop(name, None)
        if user is None:
            raise NotFound(f"user {name} not found")
        user.posts.clear()
        user.friends.clear()
        return user

    def __contains__(self, name: object) -> bool:
        return name in self._users

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users.values()))

    def __len__(self) -> int:
        return len(self._users)
