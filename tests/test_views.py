import discord
import pytest

from standby import rendering, views
from standby.queue import QueueSession


@pytest.mark.asyncio
async def test_closed_view() -> None:
    res = rendering.render(QueueSession())
    embed = views.to_embed(res)
    assert embed.title == res.title
    assert embed.description == rendering.CLOSED_TEXT
    assert embed.colour.value == rendering.COLOUR_CLOSED

    view = views.to_view(res)
    assert view.timeout is None
    assert [item.custom_id for item in view.children] == \
        [button.custom_id for button in rendering.CLOSED_BUTTONS]
    assert [item.disabled for item in view.children] == [True, True, False]
    assert view.children[-1].style == discord.ButtonStyle.success
