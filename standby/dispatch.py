"""Routing of slash commands and button clicks to the standby queue.

Nothing in here touches Discord objects directly: the bot hands over the
command name or button ID together with the IDs of the user and message
involved, and sends back whatever Reply it gets.
"""

import logging
from typing import NamedTuple, Optional

from standby import rendering
from standby.errors import (AlreadyOpen, MemberResolutionError,
                            NotAuthorized, StandbyError)


_log = logging.getLogger(__name__)

COMMAND_START = "standby"
COMMAND_CLOSE = "standby-close"
COMMAND_TOGGLE = "standby-toggle"
COMMAND_PURGE = "standby-purge"

QUEUE_BUTTONS = (rendering.BUTTON_JOIN, rendering.BUTTON_LEAVE,
                 rendering.BUTTON_CLOSE, rendering.BUTTON_OPEN)


class Reply(NamedTuple):
    """Response text for the user who triggered an event. Ephemeral
       replies are only shown to that user, the rest go to the channel.
    """
    content: str
    ephemeral: bool = True


class Dispatcher():
    """Maps commands and button clicks to queue and roster operations."""

    def __init__(self, engine, gateway, guild_id, admin_role_id=0,
                 roster=None, ephemeral_acks=True):
        self.engine = engine
        self.gateway = gateway
        self.guild_id = guild_id
        self.admin_role_id = admin_role_id
        self.roster = roster
        self.ephemeral_acks = ephemeral_acks

    def _ack(self, content) -> Reply:
        """Acknowledges a successful command. Rejections and errors are
           always ephemeral.
        """
        return Reply(content, ephemeral=self.ephemeral_acks)

    async def is_admin(self, user) -> bool:
        """Whether the user may run admin actions. If no admin role is
           configured, everyone may. Users whose roles can't be resolved
           are not admins.
        """
        if not self.admin_role_id:
            return True
        try:
            roles = await self.gateway.resolve_member_roles(self.guild_id,
                                                            user)
        except MemberResolutionError as err:
            _log.warning("Treating %s as non-admin: %s", user, err)
            return False
        return self.admin_role_id in roles

    async def require_admin(self, user, action) -> None:
        if not await self.is_admin(user):
            _log.info("Denied %s for %s", action, user)
            raise NotAuthorized(f"Only admins can {action}.")

    async def on_command(self, name, user) -> Reply:
        """Runs a slash command and returns the reply for its user."""
        handlers = {
            COMMAND_START: self._start,
            COMMAND_CLOSE: self._close,
            COMMAND_TOGGLE: self._toggle,
            COMMAND_PURGE: self._purge,
        }
        if name not in handlers:
            _log.error("Unknown slash command: %s", name)
            return Reply("Unknown command")
        try:
            return await handlers[name](user)
        except StandbyError as err:
            return Reply(str(err))

    async def on_button(self, custom_id, user, message_id) -> Optional[Reply]:
        """Handles a button click on a queue message. Returns a Reply only
           when the user needs to be told something.
        """
        if custom_id == rendering.BUTTON_OPEN:
            try:
                await self.engine.open_from_closed_post(user, message_id)
            except AlreadyOpen:
                _log.info("Queue already exists when trying to open")
            return None

        if not self.engine.is_active_message(message_id):
            _log.info("Stale queue message %s clicked", message_id)
            return None

        if custom_id == rendering.BUTTON_JOIN:
            await self.engine.join(user)
        elif custom_id == rendering.BUTTON_LEAVE:
            await self.engine.leave(user)
        elif custom_id == rendering.BUTTON_CLOSE:
            try:
                await self.require_admin(user, "close the queue")
            except NotAuthorized as err:
                return Reply(str(err))
            await self.engine.close()
        else:
            _log.error("Unknown button: %s", custom_id)
        return None

    async def _start(self, _user):
        if await self.engine.open() is None:
            return Reply("Failed to create queue")
        return self._ack("Queue started")

    async def _close(self, user):
        await self.require_admin(user, "close the queue")
        if await self.engine.close():
            return self._ack("Queue closed")
        return Reply("No queue is open")

    async def _toggle(self, user):
        if self.roster is None:
            return Reply("Standby role is not configured")
        on_standby = await self.roster.toggle(user)
        if on_standby is None:
            return Reply("Sorry, your standby role could not be changed. "
                         "Please try again later.")
        if on_standby:
            return self._ack(
                "You have been added to standby and will get pinged when "
                f"{self.roster.capacity} users are on standby. Use "
                "/standby-toggle again to remove yourself.")
        return self._ack("You have been removed from standby.")

    async def _purge(self, user):
        if self.roster is None:
            return Reply("Standby role is not configured")
        await self.require_admin(user, "purge standby")
        num_removed = await self.roster.purge()
        return Reply(f"Standby members purged ({num_removed}).",
                     ephemeral=False)
