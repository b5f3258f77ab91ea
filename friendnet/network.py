"""
Social network facade.

Coordinates the user directory, the friendship graph and the post ledgers.
Every mutation goes through this class and runs under one re-entrant lock, so
multi-step operations such as deleting a user (remove, drop posts, purge
friend slots) are never seen half-done.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .config import Settings, get_settings
from .directory import UserDirectory
from .errors import FileMissing, NameTooLong, NullUser
from .graph import FriendshipGraph
from .ledger import Clock, Post, publish, utcnow
from .models import User, encoded_length
from .render import ProfileView, render_profile
from .storage import FileStore, LocalFileStore

logger = logging.getLogger(__name__)


class SocialNetwork:
    def __init__(
        self,
        max_name: Optional[int] = None,
        max_friends: Optional[int] = None,
        clock: Clock = utcnow,
        file_store: Optional[FileStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.directory = UserDirectory(
            max_name=max_name if max_name is not None else self.settings.MAX_NAME,
            max_friends=max_friends if max_friends is not None else self.settings.MAX_FRIENDS,
        )
        self.graph = FriendshipGraph(self.directory)
        self.clock = clock
        self.file_store: FileStore = file_store or LocalFileStore()
        self._lock = threading.RLock()

    @property
    def max_name(self) -> int:
        return self.directory.max_name

    @property
    def max_friends(self) -> int:
        return self.directory.max_friends

    # Users

    def create_user(self, name: str) -> User:
        with self._lock:
            return self.directory.create_user(name)

    def find_user(self, name: str) -> Optional[User]:
        with self._lock:
            return self.directory.find_user(name)

    def list_users(self) -> List[str]:
        with self._lock:
            return self.directory.list_users()

    def delete_user(self, name: str) -> None:
        with self._lock:
            self.directory.remove(name)
            purged = self.graph.purge_references(name)
        logger.info("Deleted user %s (removed from %d friend lists)", name, purged)

    def _live(self, user: Optional[User]) -> Optional[User]:
        # Handles to deleted users resolve to None.
        if user is None or self.directory.find_user(user.name) is not user:
            return None
        return user

    def update_pic(self, user: Optional[User], filename: str) -> None:
        with self._lock:
            if self._live(user) is None:
                raise NullUser()
            if encoded_length(filename) > self.max_name - 1:
                raise NameTooLong(f"file name longer than {self.max_name - 1} bytes")
            if not self.file_store.exists(filename):
                raise FileMissing(f"{filename} does not exist")
            user.profile_pic = filename
        logger.info("Updated picture for %s to %s", user.name, filename)

    # Friendships

    def make_friends(self, name_a: str, name_b: str) -> None:
        with self._lock:
            self.graph.make_friends(name_a, name_b)

    def unfriend(self, name_a: str, name_b: str) -> None:
        with self._lock:
            self.graph.unfriend(name_a, name_b)

    def are_friends(self, name_a: str, name_b: str) -> bool:
        with self._lock:
            return self.graph.are_friends(name_a, name_b)

    def friends_of(self, name: str) -> List[str]:
        with self._lock:
            return self.graph.friends_of(name)

    # Posts

    def create_post(self, author: Optional[User], target: Optional[User], contents: str) -> Post:
        with self._lock:
            return publish(self._live(author), self._live(target), contents, clock=self.clock)

    def post(self, author_name: str, target_name: str, contents: str) -> Post:
        with self._lock:
            author = self.directory.find_user(author_name)
            target = self.directory.find_user(target_name)
            return self.create_post(author, target, contents)

    # Profiles

    def render_profile(self, user: Optional[User]) -> ProfileView:
        with self._lock:
            return render_profile(self._live(user), self.file_store, self.settings.DATE_FORMAT)

    def profile(self, name: str) -> ProfileView:
        with self._lock:
            return self.render_profile(self.directory.find_user(name))
