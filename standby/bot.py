#!/usr/bin/env python3

"""Entry point of the standby queue bot.
   See the package docstring for the available commands.
"""

# MIT License
#
# Copyright (c) 2024- standby-bot collaborators
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import logging

import discord
from discord.ext import commands
import pendulum

import standby
from standby.config import cfg, validate
from standby.dispatch import (COMMAND_CLOSE, COMMAND_PURGE, COMMAND_START,
                              COMMAND_TOGGLE, QUEUE_BUTTONS, Dispatcher)
from standby.gateway import DiscordGateway
from standby.queue import QueueEngine, QueueSession
from standby.roster import StandbyRoster


assert discord.version_info.major == 2

_log = logging.getLogger(__name__)


def setup_logging(log_level):
    logging.basicConfig(
        level=logging.getLevelName(log_level),
        format="[{asctime}] [{levelname:<7}] {name}: {message}",
        datefmt="%Y-%m-%d %H:%M:%S",
        style="{",
    )
    logging.getLogger("discord").setLevel(logging.INFO)
    logging.getLogger("discord.http").setLevel(logging.WARNING)


class ErrorHandlerCog(commands.Cog):
    """Helper class for error handling."""

    def __init__(self, parent_bot):
        self.bot = parent_bot

    @commands.Cog.listener()
    async def on_application_command_error(self, ctx, err):
        """Error handler for slash commands."""
        # This command is on cooldown from being used too often.
        if isinstance(err, commands.CommandOnCooldown):
            # Returns a human readable "<so and so long> before" string.
            retry_after = pendulum.now().diff_for_humans(
                pendulum.now().add(seconds=err.retry_after)
            )
            await ctx.respond(
                f"{ctx.user.mention} You're doing it too much! "
                f"Please wait {retry_after} trying again.",
                ephemeral=True,
            )
            return
        # Something else happened! Just raise the error for the logs to catch.
        raise err


async def run_command(ctx, dispatcher, name):
    """Runs a slash command through the dispatcher and answers it."""
    # The queue lock is held across Discord calls, so the reply can take
    # longer than an interaction is allowed to wait for. The follow-up to a
    # deferred response is as visible as the deferral itself, so public
    # replies are posted to the channel instead.
    await ctx.defer(ephemeral=True)
    reply = await dispatcher.on_command(name, ctx.user.id)
    if reply.ephemeral:
        await ctx.respond(reply.content, ephemeral=True)
        return
    await ctx.channel.send(reply.content)
    await ctx.delete()


def create_bot(dispatcher):
    """Builds the bot, with the slash commands and the button listener
       routed to the dispatcher.
    """
    intents = discord.Intents.none()
    intents.guilds = True
    # Needed for listing everyone holding the standby role.
    intents.members = dispatcher.roster is not None
    bot = commands.Bot(intents=intents)
    guild_ids = [dispatcher.guild_id]

    @bot.slash_command(name="ping", description="Test if bot is active",
                       guild_ids=guild_ids)
    async def ping(ctx):
        """Just a standard Discord bot ping test command for confirming
        whether the bot is online or not.
        """
        await ctx.respond("pong", ephemeral=True)

    @bot.slash_command(name=COMMAND_START,
                       description="Start a standby queue",
                       guild_ids=guild_ids)
    async def start(ctx):
        await run_command(ctx, dispatcher, COMMAND_START)

    @bot.slash_command(name=COMMAND_CLOSE,
                       description="Close the standby queue",
                       guild_ids=guild_ids)
    async def close(ctx):
        await run_command(ctx, dispatcher, COMMAND_CLOSE)

    @commands.cooldown(
        rate=1,
        per=cfg("STANDBY_TOGGLE_COOLDOWN_SECS"),
        type=commands.BucketType.user,
    )
    @bot.slash_command(name=COMMAND_TOGGLE,
                       description="Toggle the standby role",
                       guild_ids=guild_ids)
    async def toggle(ctx):
        await run_command(ctx, dispatcher, COMMAND_TOGGLE)

    @bot.slash_command(name=COMMAND_PURGE,
                       description="Admin command to remove all members "
                       "from standby",
                       guild_ids=guild_ids)
    async def purge(ctx):
        await run_command(ctx, dispatcher, COMMAND_PURGE)

    @bot.listen("on_interaction")
    async def on_button(interaction):
        if interaction.type != discord.InteractionType.component:
            return
        custom_id = (interaction.data or {}).get("custom_id")
        if custom_id not in QUEUE_BUTTONS:
            return
        # Acknowledge right away, so the button doesn't spin while waiting
        # for the queue lock.
        await interaction.response.defer()
        reply = await dispatcher.on_button(custom_id, interaction.user.id,
                                           interaction.message.id)
        if reply is not None:
            await interaction.followup.send(reply.content, ephemeral=True)

    @bot.listen("on_ready")
    async def on_ready():
        _log.info("Logged in as %s (ID: %s)", bot.user, bot.user.id)
        if bot.application_id != cfg("STANDBY_APP_ID"):
            _log.warning("Configured application ID %s does not match %s",
                         cfg("STANDBY_APP_ID"), bot.application_id)
        await bot.change_presence(
            activity=discord.CustomActivity(name=cfg("STANDBY_PRESENCE_TEXT")),
            status=discord.Status.online,
        )

    bot.add_cog(ErrorHandlerCog(bot))
    return bot


def main():
    setup_logging(cfg("STANDBY_LOG_LEVEL"))
    validate()
    _log.info("Now running %s v.%s", standby.__title__, standby.__version__)

    # The gateway needs the bot, and the bot needs the dispatcher that uses
    # the gateway, so the bot gets attached to the gateway last.
    gateway = DiscordGateway(bot=None)
    engine = QueueEngine(
        gateway,
        channel_id=cfg("STANDBY_CHANNEL_ID"),
        session=QueueSession(capacity=cfg("STANDBY_QUEUE_SIZE")),
        waitlist_enabled=cfg("STANDBY_WAITLIST_ENABLED"),
        hard_cap=cfg("STANDBY_HARD_CAP"),
    )
    roster = None
    if cfg("STANDBY_ROLE_ID"):
        roster = StandbyRoster(gateway,
                               guild_id=cfg("STANDBY_GUILD_ID"),
                               channel_id=cfg("STANDBY_CHANNEL_ID"),
                               role_id=cfg("STANDBY_ROLE_ID"),
                               capacity=cfg("STANDBY_QUEUE_SIZE"))
    dispatcher = Dispatcher(engine, gateway,
                            guild_id=cfg("STANDBY_GUILD_ID"),
                            admin_role_id=cfg("STANDBY_ADMIN_ROLE_ID"),
                            roster=roster,
                            ephemeral_acks=cfg("STANDBY_EPHEMERAL_MESSAGES"))
    bot = create_bot(dispatcher)
    gateway.bot = bot

    bot.run(cfg("STANDBY_SECRET_TOKEN"))


if __name__ == "__main__":
    main()
