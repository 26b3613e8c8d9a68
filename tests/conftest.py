"""Shared fixtures."""

import random

import fakeredis
import pytest

from vocab.core.store import VocableStore


class FirstChoice(random.Random):
    """Random source that always draws the first element."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def store():
    return VocableStore(rng=FirstChoice())


@pytest.fixture
def redis_client():
    # a server per test keeps the fake databases isolated
    return fakeredis.FakeRedis(server=fakeredis.FakeServer())
