"""This module abstracts the Discord calls the standby queue depends on.

The queue logic only ever talks to a Gateway, so it can be driven by
something other than a live Discord connection, such as in the tests.
"""

from abc import ABC, abstractmethod
import logging
from typing import Optional

import discord

from standby.errors import GatewayIOError, MemberResolutionError
from standby.rendering import Rendering
from standby.views import to_embed, to_view


_log = logging.getLogger(__name__)


class Gateway(ABC):
    """Abstract notification gateway. Failures are raised as
       GatewayIOError or MemberResolutionError, never as library errors.
    """

    @abstractmethod
    async def send_message(self, channel_id: int,
                           content: Optional[str] = None,
                           rendering: Optional[Rendering] = None) -> int:
        """Posts a message and returns its ID."""

    @abstractmethod
    async def edit_message(self, channel_id: int, message_id: int,
                           rendering: Rendering) -> None:
        """Replaces the embed and buttons of a message."""

    @abstractmethod
    async def delete_message(self, channel_id: int, message_id: int) -> None:
        """Deletes a message. Deleting a missing message is not an error."""

    @abstractmethod
    async def resolve_member_roles(self, guild_id: int,
                                   user_id: int) -> set[int]:
        """Returns the IDs of the roles a guild member holds."""

    @abstractmethod
    async def add_member_role(self, guild_id: int, user_id: int,
                              role_id: int) -> None:
        """Gives a role to a guild member."""

    @abstractmethod
    async def remove_member_role(self, guild_id: int, user_id: int,
                                 role_id: int) -> None:
        """Takes a role away from a guild member."""

    @abstractmethod
    async def list_role_members(self, guild_id: int,
                                role_id: int) -> list[int]:
        """Returns the IDs of the non-bot members holding a role."""


class DiscordGateway(Gateway):
    """Gateway backed by a py-cord bot connection."""

    def __init__(self, bot):
        self.bot = bot

    async def _channel(self, channel_id):
        channel = self.bot.get_channel(channel_id)
        if channel is None:
            channel = await self.bot.fetch_channel(channel_id)
        return channel

    async def _guild(self, guild_id):
        guild = self.bot.get_guild(guild_id)
        if guild is None:
            guild = await self.bot.fetch_guild(guild_id)
        return guild

    async def send_message(self, channel_id, content=None, rendering=None):
        kwargs = {"content": content}
        if rendering is not None:
            kwargs["embed"] = to_embed(rendering)
            kwargs["view"] = to_view(rendering)
        try:
            channel = await self._channel(channel_id)
            msg = await channel.send(**kwargs)
        except discord.errors.HTTPException as err:
            raise GatewayIOError(f"send to {channel_id} failed: {err}") \
                from err
        return msg.id

    async def edit_message(self, channel_id, message_id, rendering):
        try:
            channel = await self._channel(channel_id)
            await channel.get_partial_message(message_id).edit(
                embed=to_embed(rendering), view=to_view(rendering))
        except discord.errors.HTTPException as err:
            raise GatewayIOError(f"edit of {message_id} failed: {err}") \
                from err

    async def delete_message(self, channel_id, message_id):
        try:
            channel = await self._channel(channel_id)
            await channel.get_partial_message(message_id).delete()
        except discord.errors.NotFound:
            _log.debug("Message %s was already deleted", message_id)
        except discord.errors.HTTPException as err:
            raise GatewayIOError(f"delete of {message_id} failed: {err}") \
                from err

    async def resolve_member_roles(self, guild_id, user_id):
        try:
            guild = await self._guild(guild_id)
            member = await guild.fetch_member(user_id)
        except discord.errors.HTTPException as err:
            raise MemberResolutionError(
                f"could not fetch member {user_id}: {err}") from err
        return {role.id for role in member.roles}

    async def add_member_role(self, guild_id, user_id, role_id):
        try:
            guild = await self._guild(guild_id)
            member = await guild.fetch_member(user_id)
            await member.add_roles(discord.Object(id=role_id))
        except discord.errors.HTTPException as err:
            raise GatewayIOError(
                f"adding role {role_id} to {user_id} failed: {err}") from err

    async def remove_member_role(self, guild_id, user_id, role_id):
        try:
            guild = await self._guild(guild_id)
            member = await guild.fetch_member(user_id)
            await member.remove_roles(discord.Object(id=role_id))
        except discord.errors.HTTPException as err:
            raise GatewayIOError(
                f"removing role {role_id} from {user_id} failed: {err}") \
                from err

    async def list_role_members(self, guild_id, role_id):
        try:
            guild = await self._guild(guild_id)
            return [member.id
                    async for member in guild.fetch_members(limit=None)
                    if not member.bot
                    and any(role.id == role_id for role in member.roles)]
        except discord.errors.HTTPException as err:
            raise GatewayIOError(
                f"listing members of role {role_id} failed: {err}") from err
