import pytest

from standby import rendering
from standby.roster import StandbyRoster

from fakes import CHANNEL_ID


GUILD_ID = 7
ROLE = 200


@pytest.fixture
def roster(gateway):
    return StandbyRoster(gateway, GUILD_ID, CHANNEL_ID, ROLE, capacity=3)


@pytest.mark.asyncio
async def test_toggle_on_and_off(roster, gateway) -> None:
    assert await roster.toggle(1) is True
    assert ROLE in gateway.member_roles[1]
    assert await roster.toggle(1) is False
    assert ROLE not in gateway.member_roles[1]


@pytest.mark.asyncio
async def test_unresolvable_member_is_added(roster, gateway) -> None:
    gateway.member_roles[1] = {ROLE}
    gateway.unresolvable.add(1)
    assert await roster.toggle(1) is True


@pytest.mark.asyncio
async def test_toggle_failure(roster, gateway) -> None:
    gateway.failing.add("roles")
    assert await roster.toggle(1) is None
    assert gateway.member_roles == {}


@pytest.mark.asyncio
async def test_alert_follows_member_count(roster, gateway) -> None:
    for user in (1, 2):
        await roster.toggle(user)
    assert roster.alert_ref is None

    await roster.toggle(3)
    alert = roster.alert_ref
    assert gateway.messages[alert].content == rendering.role_alert(ROLE)

    # Already alerted, so no second ping.
    await roster.toggle(4)
    assert roster.alert_ref == alert
    assert len(gateway.sent) == 1

    await roster.toggle(4)
    await roster.toggle(3)
    assert roster.alert_ref is None
    assert alert not in gateway.messages


@pytest.mark.asyncio
async def test_purge(roster, gateway) -> None:
    for user in (1, 2, 3):
        await roster.toggle(user)
    assert roster.alert_ref is not None
    assert await roster.purge() == 3
    assert await gateway.list_role_members(GUILD_ID, ROLE) == []
    assert roster.alert_ref is None


def test_invalid_arguments(gateway) -> None:
    with pytest.raises(ValueError):
        StandbyRoster(gateway, GUILD_ID, CHANNEL_ID, 0)
    with pytest.raises(ValueError):
        StandbyRoster(gateway, GUILD_ID, CHANNEL_ID, ROLE, capacity=0)
