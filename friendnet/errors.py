from __future__ import annotations


class FriendNetError(Exception):
    """Base class for recoverable directory errors.

    ``code`` mirrors the numeric status the command shell has always reported
    for the failing operation.
    """

    code: int = 1
    message: str = "operation failed"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)


class DuplicateName(FriendNetError):
    code = 1
    message = "A user by this name already exists"


class NameTooLong(FriendNetError):
    code = 2
    message = "Name is too long"


class NotFound(FriendNetError):
    code = 1
    message = "User not found"


class FileMissing(FriendNetError):
    code = 1
    message = "File not found"


class AlreadyFriends(FriendNetError):
    code = 1
    message = "Users are already friends"


class CapacityExceeded(FriendNetError):
    code = 2
    message = "At least one user you entered has the max number of friends"


class SelfFriend(FriendNetError):
    code = 3
    message = "You must enter two different users"


class UserNotFound(FriendNetError):
    code = 4
    message = "At least one user you entered does not exist"


class NotFriends(FriendNetError):
    code = 1
    message = "Users are not friends"


class NullUser(FriendNetError):
    code = 2
    message = "User not found"
