"""
Line-oriented command interpreter for the friendnet shell.

Kept separate from the typer app so batch scripts and tests can drive it
directly with any rich ``Console``.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List

from rich.console import Console

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
from .network import SocialNetwork
from .render import format_profile

logger = logging.getLogger(__name__)

SYNTAX_ERROR = "Incorrect syntax"

# Messages the shell prints per command and failure.
ERROR_MESSAGES: Dict[str, Dict[type, str]] = {
    "add_user": {
        DuplicateName: "User by this name already exists",
        NameTooLong: "Username is too long",
    },
    "update_pic": {
        NullUser: "User not found",
        FileMissing: "File not found",
        NameTooLong: "Filename is too long",
    },
    "make_friends": {
        AlreadyFriends: "You are already friends",
        CapacityExceeded: "At least one of you entered has the max number of friends",
        SelfFriend: "You can't friend yourself",
        UserNotFound: "At least one of you entered does not exist",
    },
    "unfriend": {
        NotFriends: "You are not friends",
        SelfFriend: "You can't unfriend yourself",
        UserNotFound: "At least one of you entered does not exist",
    },
    "post": {
        NullUser: "User not found",
        NotFriends: "You can only post to your friends",
    },
    "profile": {
        NullUser: "User not found",
    },
    "delete_user": {
        NotFound: "User not found",
    },
}


def tokenize(line: str) -> List[str]:
    return line.split()


class CommandProcessor:
    def __init__(self, network: SocialNetwork, console: Console) -> None:
        self.network = network
        self.console = console
        self._handlers: Dict[str, Callable[[List[str]], None]] = {
            "add_user": self._add_user,
            "list_users": self._list_users,
            "update_pic": self._update_pic,
            "make_friends": self._make_friends,
            "unfriend": self._unfriend,
            "post": self._post,
            "profile": self._profile,
            "delete_user": self._delete_user,
        }

    def emit(self, text: str, end: str = "\n") -> None:
        self.console.print(text, end=end, markup=False, highlight=False, soft_wrap=True)

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False once the user asks to quit."""
        tokens = tokenize(line)
        if not tokens:
            return True
        command, args = tokens[0], tokens[1:]
        if command == "quit":
            return False
        handler = self._handlers.get(command)
        if handler is None:
            logger.debug("Unknown command %r", command)
            self.emit(SYNTAX_ERROR)
            return True
        try:
            handler(args)
        except FriendNetError as exc:
            message = ERROR_MESSAGES.get(command, {}).get(type(exc), str(exc))
            logger.debug("%s failed with %s (code %d)", command, type(exc).__name__, exc.code)
            self.emit(message)
        return True

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            if not self.execute(line):
                break

    def _require(self, args: List[str], count: int) -> bool:
        if len(args) != count:
            self.emit(SYNTAX_ERROR)
            return False
        return True

    def _add_user(self, args: List[str]) -> None:
        if self._require(args, 1):
            self.network.create_user(args[0])

    def _list_users(self, args: List[str]) -> None:
        if self._require(args, 0):
            self.emit("User List")
            for name in self.network.list_users():
                self.emit(f"    {name}")

    def _update_pic(self, args: List[str]) -> None:
        if self._require(args, 2):
            user = self.network.find_user(args[0])
            self.network.update_pic(user, args[1])

    def _make_friends(self, args: List[str]) -> None:
        if self._require(args, 2):
            self.network.make_friends(args[0], args[1])

    def _unfriend(self, args: List[str]) -> None:
        if self._require(args, 2):
            self.network.unfriend(args[0], args[1])

    def _post(self, args: List[str]) -> None:
        if len(args) < 3:
            self.emit(SYNTAX_ERROR)
            return
        author, target = args[0], args[1]
        self.network.post(author, target, " ".join(args[2:]))

    def _profile(self, args: List[str]) -> None:
        if self._require(args, 1):
            view = self.network.profile(args[0])
            self.emit(format_profile(view), end="")

    def _delete_user(self, args: List[str]) -> None:
        if self._require(args, 1):
            self.network.delete_user(args[0])
