from hypothesis import given, settings, strategies

import pytest

from standby.errors import AlreadyOpen
from standby.queue import QueueEngine, QueueSession

from fakes import CHANNEL_ID, FakeGateway


events = strategies.lists(
    strategies.tuples(
        strategies.sampled_from(("join", "join", "leave", "open", "close")),
        strategies.integers(min_value=1, max_value=9),
    ),
    max_size=60,
)


async def apply(engine, event, user):
    if event == "join":
        await engine.join(user)
    elif event == "leave":
        await engine.leave(user)
    elif event == "close":
        await engine.close()
    else:
        try:
            await engine.open()
        except AlreadyOpen:
            pass


def check_invariants(engine, gateway, waitlist_enabled):
    session = engine.session
    num = len(session.participants)

    assert (session.primary_message_ref is not None) == session.is_open
    assert len(set(session.participants)) == num
    assert len(set(session.waitlist)) == len(session.waitlist)
    assert not set(session.participants) & set(session.waitlist)
    if waitlist_enabled:
        assert num <= session.capacity
        if session.waitlist:
            assert num == session.capacity
    else:
        assert session.waitlist == []

    if not session.is_open:
        assert session.participants == [] and session.waitlist == []
        assert session.last_event is None
        assert session.capacity_notification_ref is None
        assert session.one_more_notification_ref is None
        return

    assert session.primary_message_ref in gateway.messages
    assert gateway.messages[session.primary_message_ref].rendering == \
        engine.render()
    assert (session.capacity_notification_ref is not None) == \
        (num >= session.capacity)
    assert (session.one_more_notification_ref is not None) == \
        (num == session.capacity - 1)
    for ref in (session.capacity_notification_ref,
                session.one_more_notification_ref):
        if ref is not None:
            assert ref in gateway.messages


@settings(max_examples=200, deadline=None)
@given(events, strategies.integers(min_value=1, max_value=6),
       strategies.booleans())
@pytest.mark.asyncio
async def test_invariants_hold_for_any_events(event_list, capacity,
                                              waitlist_enabled):
    gateway = FakeGateway()
    engine = QueueEngine(gateway, CHANNEL_ID,
                         session=QueueSession(capacity=capacity),
                         waitlist_enabled=waitlist_enabled)
    for event, user in event_list:
        await apply(engine, event, user)
        check_invariants(engine, gateway, waitlist_enabled)


@settings(deadline=None)
@given(strategies.lists(strategies.integers(min_value=1, max_value=10**6),
                        unique=True, min_size=6, max_size=20))
@pytest.mark.asyncio
async def test_overflow_lands_in_waitlist_in_call_order(users):
    engine = QueueEngine(FakeGateway(), CHANNEL_ID)
    await engine.open()
    for user in users:
        await engine.join(user)
    capacity = engine.session.capacity
    assert engine.session.participants == users[:capacity]
    assert engine.session.waitlist == users[capacity:]


@settings(deadline=None)
@given(strategies.lists(strategies.integers(min_value=1, max_value=10**6),
                        unique=True, min_size=7, max_size=15),
       strategies.data())
@pytest.mark.asyncio
async def test_leave_promotes_exactly_the_head(users, data):
    engine = QueueEngine(FakeGateway(), CHANNEL_ID)
    await engine.open()
    for user in users:
        await engine.join(user)
    participants = list(engine.session.participants)
    waitlist = list(engine.session.waitlist)
    leaver = data.draw(strategies.sampled_from(participants))

    await engine.leave(leaver)
    assert engine.session.participants == \
        [p for p in participants if p != leaver] + waitlist[:1]
    assert engine.session.waitlist == waitlist[1:]
