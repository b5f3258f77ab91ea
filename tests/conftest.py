from __future__ import annotations

import datetime as dt

import pytest

from friendnet.config import Settings
from friendnet.network import SocialNetwork
from friendnet.storage import InMemoryFileStore

START = dt.datetime(2024, 3, 1, 12, 0, tzinfo=dt.timezone.utc)


class TickingClock:
    """Returns START, then one minute later on every call."""

    def __init__(self, start: dt.datetime = START) -> None:
        self.start = start
        self.current = start
        self.calls = 0

    def __call__(self) -> dt.datetime:
        value = self.current
        self.current += dt.timedelta(minutes=1)
        self.calls += 1
        return value


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def files() -> InMemoryFileStore:
    return InMemoryFileStore({"pics/cat.txt": " /\\_/\\\n( o.o )\n > ^ <\n"})


@pytest.fixture()
def network(clock: TickingClock, files: InMemoryFileStore) -> SocialNetwork:
    return SocialNetwork(
        max_name=32,
        max_friends=3,
        clock=clock,
        file_store=files,
        settings=Settings(),
    )
