"""In-memory social network directory: users, bounded friendships and posts."""

from .errors import (
    AlreadyFriends,
    CapacityExceeded,
    DuplicateName,
    FileMissing,
    FriendNetError,
    NameTooLong,
    NotFound,
    NotFriends,
    NullUser,
    SelfFriend,
    UserNotFound,
)
from .models import Post, User
from .network import SocialNetwork
from .render import ProfileView, PostView, format_profile, render_profile

__all__ = [
    "AlreadyFriends",
    "CapacityExceeded",
    "DuplicateName",
    "FileMissing",
    "FriendNetError",
    "NameTooLong",
    "NotFound",
    "NotFriends",
    "NullUser",
    "Post",
    "PostView",
    "ProfileView",
    "SelfFriend",
    "SocialNetwork",
    "User",
    "UserNotFound",
    "format_profile",
    "render_profile",
]
