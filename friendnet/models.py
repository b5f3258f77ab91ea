from __future__ import annotations

from dataclasses import dataclass, field

from .graph import FriendSlots
from .ledger import Post, PostLedger

# Default limits; see config.Settings for overrides.
DEFAULT_MAX_NAME = 32
DEFAULT_MAX_FRIENDS = 10


def encoded_length(text: str) -> int:
    # Limits count UTF-8 bytes, not characters.
    return len(text.encode("utf-8"))


@dataclass
class User:
    name: str
    friends: FriendSlots
    profile_pic: str = ""
    posts: PostLedger = field(default_factory=PostLedger)

    @classmethod
    def create(cls, name: str, max_friends: int = DEFAULT_MAX_FRIENDS) -> "User":
        return cls(name=name, friends=FriendSlots(max_friends))

    @property
    def has_picture(self) -> bool:
        return self.profile_pic != ""


__all__ = ["DEFAULT_MAX_FRIENDS", "DEFAULT_MAX_NAME", "Post", "PostLedger", "User", "encoded_length"]
