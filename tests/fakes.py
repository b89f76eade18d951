"""In-memory stand-in for Discord, for driving the queue in tests."""

import itertools
from typing import NamedTuple, Optional

from standby.errors import GatewayIOError, MemberResolutionError
from standby.gateway import Gateway
from standby.rendering import Rendering


CHANNEL_ID = 42


class FakeMessage(NamedTuple):
    channel_id: int
    content: Optional[str]
    rendering: Optional[Rendering]


class FakeGateway(Gateway):
    """Keeps the live messages of the channel in a dict, and fails the
       operations named in `failing` ("send", "edit", "delete", "roles").
    """

    def __init__(self):
        self.messages: dict[int, FakeMessage] = {}
        self.sent: list[FakeMessage] = []
        self.deleted: list[int] = []
        self.failing: set[str] = set()
        self.member_roles: dict[int, set[int]] = {}
        self.unresolvable: set[int] = set()
        self._ids = itertools.count(1000)

    def _check(self, operation):
        if operation in self.failing:
            raise GatewayIOError(f"{operation} failed")

    def contents(self) -> list[str]:
        """Texts of the live plain text messages, oldest first."""
        return [msg.content for msg in self.messages.values()
                if msg.content is not None]

    async def send_message(self, channel_id, content=None, rendering=None):
        self._check("send")
        message_id = next(self._ids)
        msg = FakeMessage(channel_id, content, rendering)
        self.messages[message_id] = msg
        self.sent.append(msg)
        return message_id

    async def edit_message(self, channel_id, message_id, rendering):
        self._check("edit")
        if message_id not in self.messages:
            raise GatewayIOError(f"unknown message {message_id}")
        self.messages[message_id] = self.messages[message_id]._replace(
            rendering=rendering)

    async def delete_message(self, channel_id, message_id):
        self._check("delete")
        self.messages.pop(message_id, None)
        self.deleted.append(message_id)

    async def resolve_member_roles(self, guild_id, user_id):
        if user_id in self.unresolvable:
            raise MemberResolutionError(f"unknown member {user_id}")
        return set(self.member_roles.get(user_id, ()))

    async def add_member_role(self, guild_id, user_id, role_id):
        self._check("roles")
        self.member_roles.setdefault(user_id, set()).add(role_id)

    async def remove_member_role(self, guild_id, user_id, role_id):
        self._check("roles")
        self.member_roles.get(user_id, set()).discard(role_id)

    async def list_role_members(self, guild_id, role_id):
        return [user for user, roles in self.member_roles.items()
                if role_id in roles]
