"""Standby role toggling.

A lighter alternative to the queue: members put themselves on standby by
taking a role, and the role gets pinged once enough members hold it.
"""

import asyncio
import logging
from typing import Optional

from standby import rendering
from standby.errors import GatewayIOError, MemberResolutionError
from standby.queue import MAX_QUEUE_SIZE


_log = logging.getLogger(__name__)


class StandbyRoster():
    """Tracks the standby role of one guild, and the alert posted when
       enough members are on standby.
    """
    def __init__(self, gateway, guild_id, channel_id, role_id,
                 capacity=MAX_QUEUE_SIZE):
        if role_id <= 0:
            raise ValueError(f"Invalid standby role ID: {role_id}")
        if capacity <= 0:
            raise ValueError(f"Standby capacity must be positive: {capacity}")
        self.gateway = gateway
        self.guild_id = guild_id
        self.channel_id = channel_id
        self.role_id = role_id
        self.capacity = capacity
        self.alert_ref: Optional[int] = None
        self.lock = asyncio.Lock()

    async def is_standby(self, user) -> bool:
        """Whether the user holds the standby role. Users whose roles can't
           be resolved are treated as not being on standby.
        """
        try:
            roles = await self.gateway.resolve_member_roles(self.guild_id,
                                                            user)
        except MemberResolutionError as err:
            _log.warning("Treating %s as not on standby: %s", user, err)
            return False
        return self.role_id in roles

    async def toggle(self, user) -> Optional[bool]:
        """Puts the user on standby, or takes them off it.

           Returns True if the user is now on standby, False if they were
           taken off, and None if the role couldn't be changed.
        """
        async with self.lock:
            on_standby = await self.is_standby(user)
            try:
                if on_standby:
                    await self.gateway.remove_member_role(
                        self.guild_id, user, self.role_id)
                else:
                    await self.gateway.add_member_role(
                        self.guild_id, user, self.role_id)
            except GatewayIOError as err:
                _log.warning("Failed to toggle standby of %s: %s", user, err)
                return None
            await self._reconcile_alert()
            return not on_standby

    async def purge(self) -> int:
        """Takes everyone off standby. Returns how many were removed."""
        async with self.lock:
            try:
                members = await self.gateway.list_role_members(
                    self.guild_id, self.role_id)
            except GatewayIOError as err:
                _log.warning("Failed to list standby members: %s", err)
                return 0
            num_removed = 0
            for member in members:
                try:
                    await self.gateway.remove_member_role(
                        self.guild_id, member, self.role_id)
                except GatewayIOError as err:
                    _log.warning("Failed to remove standby of %s: %s",
                                 member, err)
                    continue
                num_removed += 1
            _log.info("Purged %d standby member(s)", num_removed)
            await self._reconcile_alert()
            return num_removed

    async def _reconcile_alert(self):
        try:
            members = await self.gateway.list_role_members(self.guild_id,
                                                           self.role_id)
        except GatewayIOError as err:
            _log.warning("Failed to count standby members: %s", err)
            return

        if len(members) >= self.capacity:
            if self.alert_ref is not None:
                return
            try:
                self.alert_ref = await self.gateway.send_message(
                    self.channel_id,
                    content=rendering.role_alert(self.role_id))
            except GatewayIOError as err:
                _log.warning("Failed to send standby alert: %s", err)
        elif self.alert_ref is not None:
            try:
                await self.gateway.delete_message(self.channel_id,
                                                  self.alert_ref)
            except GatewayIOError as err:
                _log.warning("Failed to delete standby alert %s: %s",
                             self.alert_ref, err)
                return
            self.alert_ref = None
