from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import NullUser
from .models import User
from .storage import FileStore

DIVIDER = "-" * 42


@dataclass(frozen=True)
class PostView:
    author: str
    date: str
    contents: str


@dataclass(frozen=True)
class ProfileView:
    name: str
    picture: List[str] = field(default_factory=list)
    friends: List[str] = field(default_factory=list)
    posts: List[PostView] = field(default_factory=list)


def format_timestamp(value: dt.datetime, date_format: Optional[str] = None) -> str:
    # Shown in the viewer's local time.
    local = value.astimezone()
    if date_format is None:
        return local.ctime()
    return local.strftime(date_format)


def render_profile(
    user: Optional[User],
    file_store: FileStore,
    date_format: Optional[str] = None,
) -> ProfileView:
    """Project ``user`` into a read-only view. Nothing on the user is modified."""
    if user is None:
        raise NullUser()
    picture: List[str] = []
    if user.has_picture:
        picture = file_store.read_text_file(user.profile_pic) or []
    posts = [
        PostView(
            author=post.author,
            date=format_timestamp(post.date, date_format),
            contents=post.contents,
        )
        for post in user.posts
    ]
    return ProfileView(
        name=user.name,
        picture=picture,
        friends=user.friends.names(),
        posts=posts,
    )


def format_profile(view: ProfileView) -> str:
    lines: List[str] = []
    if view.picture:
        lines.extend(view.picture)
        lines.extend(["", ""])
    lines.append(f"Name: {view.name}")
    lines.append("")
    lines.append(DIVIDER)
    lines.append("Friends:")
    lines.extend(view.friends)
    lines.append(DIVIDER)
    lines.append("Posts:")
    for index, post in enumerate(view.posts):
        if index:
            lines.extend(["", "===", ""])
        lines.append(f"From: {post.author}")
        lines.append(f"Date: {post.date}")
        lines.append("")
        lines.append(post.contents)
    lines.append(DIVIDER)
    return "\n".join(lines) + "\n"
