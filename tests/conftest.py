import pytest

from fakes import CHANNEL_ID, FakeGateway
from standby.queue import QueueEngine


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def engine(gateway):
    return QueueEngine(gateway, CHANNEL_ID)


@pytest.fixture
def no_waitlist_engine(gateway):
    return QueueEngine(gateway, CHANNEL_ID, waitlist_enabled=False)
