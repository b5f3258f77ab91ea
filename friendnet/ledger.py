from __future__ import annotations

import datetime as dt
import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Deque, Iterator, Optional

from .errors import NotFriends, NullUser

if TYPE_CHECKING:
    from .models import User

logger = logging.getLogger(__name__)

Clock = Callable[[], dt.datetime]


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@dataclass(frozen=True)
class Post:
    author: str
    contents: str
    date: dt.datetime


class PostLedger:
    """Posts received by one user, newest first."""

    def __init__(self) -> None:
        self._posts: Deque[Post] = deque()

    def prepend(self, post: Post) -> None:
        self._posts.appendleft(post)

    def clear(self) -> None:
        self._posts.clear()

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)


def publish(
    author: Optional["User"],
    target: Optional["User"],
    contents: str,
    clock: Clock = utcnow,
) -> Post:
    """Write ``contents`` from ``author`` onto ``target``'s ledger.

    The target must list the author as a friend. Nothing is kept from
    ``contents`` when the post is rejected.
    """
    if author is None or target is None:
        raise NullUser()
    if author.name not in target.friends:
        logger.debug("Rejected post from %s to %s: not friends", author.name, target.name)
        raise NotFriends(f"{author.name} and {target.name} are not friends")
    post = Post(author=author.name, contents=contents, date=clock())
    target.posts.prepend(post)
    logger.info("Post from %s added to %s (%d total)", author.name, target.name, len(target.posts))
    return post
