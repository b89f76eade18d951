"""Conversion of queue renderings into Discord embeds and buttons."""

import discord

from standby.rendering import Rendering


BUTTON_STYLES = {
    "primary": discord.ButtonStyle.primary,
    "secondary": discord.ButtonStyle.secondary,
    "success": discord.ButtonStyle.success,
    "danger": discord.ButtonStyle.danger,
}


def to_embed(rendering: Rendering) -> discord.Embed:
    return discord.Embed(title=rendering.title,
                         description=rendering.body,
                         colour=discord.Colour(rendering.colour))


def to_view(rendering: Rendering) -> discord.ui.View:
    """Builds the button row. The clicks are routed by custom ID in the
       bot's interaction listener, so the buttons carry no callbacks and
       the view never times out.
    """
    view = discord.ui.View(timeout=None)
    for button in rendering.buttons:
        view.add_item(discord.ui.Button(custom_id=button.custom_id,
                                        label=button.label,
                                        style=BUTTON_STYLES[button.style],
                                        disabled=button.disabled))
    return view
