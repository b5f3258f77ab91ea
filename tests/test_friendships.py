from __future__ import annotations

import pytest

from friendnet.errors import (
    AlreadyFriends,
    CapacityExceeded,
    NotFriends,
    SelfFriend,
    UserNotFound,
)
from friendnet.graph import FriendSlots


def _assert_symmetric(network):
    for name in network.list_users():
        for friend in network.friends_of(name):
            assert network.are_friends(friend, name), f"{friend} does not list {name}"


def test_friend_slots_fill_lowest_open_index():
    slots = FriendSlots(3)
    assert slots.add("a") == 0
    assert slots.add("b") == 1
    assert slots.add("c") == 2
    assert slots.is_full()
    assert slots.first_open() is None

    slots.remove("a")
    assert slots.first_open() == 0
    assert slots.add("d") == 0
    assert slots.names() == ["d", "b", "c"]


def test_friend_slots_reject_when_full():
    slots = FriendSlots(1)
    slots.add("a")

    with pytest.raises(CapacityExceeded):
        slots.add("b")
    assert slots.names() == ["a"]


def test_friend_slots_need_capacity():
    with pytest.raises(ValueError):
        FriendSlots(0)


def test_make_friends_is_symmetric(network):
    network.create_user("alice")
    network.create_user("bob")

    network.make_friends("alice", "bob")

    assert network.are_friends("alice", "bob")
    assert network.are_friends("bob", "alice")
    assert network.friends_of("alice") == ["bob"]
    assert network.friends_of("bob") == ["alice"]


def test_missing_user_outranks_self_friend(network):
    with pytest.raises(UserNotFound) as excinfo:
        network.make_friends("ghost", "ghost")
    assert excinfo.value.code == 4


def test_self_friend(network):
    network.create_user("alice")

    with pytest.raises(SelfFriend):
        network.make_friends("alice", "alice")
    assert network.friends_of("alice") == []


def test_capacity_outranks_already_friends(network):
    for name in ["alice", "b1", "b2", "b3"]:
        network.create_user(name)
    for name in ["b1", "b2", "b3"]:
        network.make_friends("alice", name)

    with pytest.raises(CapacityExceeded):
        network.make_friends("alice", "b1")


def test_capacity_leaves_both_sides_untouched(network):
    for name in ["alice", "b1", "b2", "b3", "carol"]:
        network.create_user(name)
    for name in ["b1", "b2", "b3"]:
        network.make_friends("alice", name)

    with pytest.raises(CapacityExceeded) as excinfo:
        network.make_friends("carol", "alice")

    assert excinfo.value.code == 2
    assert network.friends_of("alice") == ["b1", "b2", "b3"]
    assert network.friends_of("carol") == []


def test_already_friends(network):
    network.create_user("alice")
    network.create_user("bob")
    network.make_friends("alice", "bob")

    with pytest.raises(AlreadyFriends):
        network.make_friends("bob", "alice")
    assert network.friends_of("alice") == ["bob"]
    assert network.friends_of("bob") == ["alice"]


def test_new_friend_takes_freed_slot(network):
    for name in ["alice", "bob", "carol", "dave"]:
        network.create_user(name)
    network.make_friends("alice", "bob")
    network.make_friends("alice", "carol")
    network.delete_user("bob")

    network.make_friends("alice", "dave")

    assert network.friends_of("alice") == ["dave", "carol"]


def test_unfriend(network):
    network.create_user("alice")
    network.create_user("bob")
    network.make_friends("alice", "bob")

    network.unfriend("bob", "alice")

    assert not network.are_friends("alice", "bob")
    assert not network.are_friends("bob", "alice")
    with pytest.raises(NotFriends):
        network.unfriend("alice", "bob")


def test_unfriend_missing_user(network):
    network.create_user("alice")

    with pytest.raises(UserNotFound):
        network.unfriend("alice", "bob")


def test_symmetry_holds_across_mixed_operations(network):
    names = ["a", "b", "c", "d", "e"]
    for name in names:
        network.create_user(name)
    for left, right in [("a", "b"), ("a", "c"), ("b", "c"), ("d", "e"), ("c", "d")]:
        network.make_friends(left, right)
    network.unfriend("a", "c")
    network.delete_user("d")
    network.make_friends("e", "a")

    _assert_symmetric(network)
    assert network.friends_of("c") == ["b"]
    assert network.friends_of("e") == ["a"]
