"""Standby queue state and the operations that change it."""

import asyncio
import enum
import logging
from typing import NamedTuple, Optional

import pendulum

from standby import rendering
from standby.errors import AlreadyOpen, GatewayIOError
from standby.phrases import random_one_more


_log = logging.getLogger(__name__)

MAX_QUEUE_SIZE = 5


class EventKind(enum.Enum):
    """Kinds of queue events, valued by how they read in the status line."""
    JOIN = "joined"
    LEAVE = "left"
    JOIN_WAITLIST = "joined the waitlist"
    LEAVE_WAITLIST = "left the waitlist"


class LastEvent(NamedTuple):
    kind: EventKind
    actor: int
    at: pendulum.DateTime


class QueueSession():
    """State of the one queue of a channel, open or closed.

       Users are referred to by their Discord user IDs, and messages by
       their Discord message IDs.
    """
    # pylint: disable=too-many-instance-attributes
    def __init__(self, capacity=MAX_QUEUE_SIZE):
        if capacity <= 0:
            raise ValueError(f"Queue capacity must be positive: {capacity}")
        self.capacity = capacity
        self.reset()

    def reset(self) -> None:
        """Clears the session back to the closed state."""
        self.is_open = False
        self.participants: list[int] = []
        self.waitlist: list[int] = []
        self.last_event: Optional[LastEvent] = None
        self.primary_message_ref: Optional[int] = None
        self.capacity_notification_ref: Optional[int] = None
        self.one_more_notification_ref: Optional[int] = None

    @property
    def one_more_threshold(self) -> int:
        """Number of participants at which exactly one slot remains."""
        return self.capacity - 1

    @property
    def num_queued(self) -> int:
        return len(self.participants)

    @property
    def is_full(self) -> bool:
        return self.num_queued >= self.capacity

    def contains(self, user) -> bool:
        """Whether the user is in either the queue or the waitlist."""
        return user in self.participants or user in self.waitlist


class QueueEngine():
    """Runs the queue operations of one channel.

       Every public operation holds the lock for its whole duration,
       including the Discord calls it makes, so the queue message and the
       notifications always reflect one operation at a time.

       Gateway failures are logged and cut the current operation short.
       Queue membership changes already made stay in place; the messages
       catch up with them on the next successful operation.
    """

    def __init__(self, gateway, channel_id, session=None,
                 waitlist_enabled=True, hard_cap=False,
                 mention_separator=rendering.MENTION_SEPARATOR):
        self.gateway = gateway
        self.channel_id = channel_id
        self.session = QueueSession() if session is None else session
        self.waitlist_enabled = waitlist_enabled
        self.hard_cap = hard_cap
        self.mention_separator = mention_separator
        # Notifications of closed sessions that couldn't be deleted.
        self.leftover_refs: list[int] = []
        self.lock = asyncio.Lock()

    def render(self) -> rendering.Rendering:
        return rendering.render(self.session)

    def is_active_message(self, message_id) -> bool:
        """Whether the message is the post of the currently open queue."""
        return (self.session.is_open
                and self.session.primary_message_ref == message_id)

    async def open(self) -> Optional[int]:
        """Starts a new queue and posts its message.

           Returns the new message's ID, or None if it couldn't be posted.
           Raises AlreadyOpen if a queue is already open.
        """
        async with self.lock:
            return await self._open()

    async def close(self) -> bool:
        """Closes the queue. Returns False if there was none open."""
        async with self.lock:
            return await self._close()

    async def join(self, user) -> bool:
        """Adds the user to the queue, or to the waitlist if the queue is
           full. Returns False if nothing changed.
        """
        async with self.lock:
            return await self._join(user)

    async def leave(self, user) -> bool:
        """Removes the user from the queue or the waitlist. A user leaving
           the queue is replaced by the first user of the waitlist, and the
           queue closes once nobody is left in it.
           Returns False if the user wasn't queued.
        """
        async with self.lock:
            if not self.session.is_open:
                return False
            session = self.session
            promoted = None
            if user in session.participants:
                session.participants.remove(user)
                kind = EventKind.LEAVE
                if session.waitlist and \
                        session.num_queued < session.capacity:
                    promoted = session.waitlist.pop(0)
                    session.participants.append(promoted)
            elif user in session.waitlist:
                session.waitlist.remove(user)
                kind = EventKind.LEAVE_WAITLIST
            else:
                return False
            session.last_event = LastEvent(kind, user, pendulum.now("UTC"))

            if not session.participants:
                _log.info("Last user left, closing the queue")
                await self._close()
                return True

            await self._sync()
            if promoted is not None:
                _log.info("Promoted %s from the waitlist", promoted)
                await self._send(content=rendering.promotion_notice(promoted))
            return True

    async def open_from_closed_post(self, user, closed_message_ref) -> \
            Optional[int]:
        """Reopens the queue from the Open button of a closed queue post.
           The user who clicked is the first one in, and the old post is
           deleted. Raises AlreadyOpen if a queue is already open, in which
           case the old post is deleted all the same.
        """
        async with self.lock:
            if self.session.is_open:
                if closed_message_ref != self.session.primary_message_ref:
                    await self._delete(closed_message_ref)
                raise AlreadyOpen()
            message_ref = await self._open()
            if message_ref is None:
                return None
            await self._join(user)
            await self._delete(closed_message_ref)
            return message_ref

    async def _open(self):
        if self.session.is_open:
            raise AlreadyOpen()
        await self._delete_leftovers()
        self.session.reset()
        self.session.is_open = True
        message_ref = await self._send(res=self.render())
        if message_ref is None:
            self.session.reset()
            return None
        self.session.primary_message_ref = message_ref
        _log.info("Opened queue, message %s", message_ref)
        await self._reconcile_notifications()
        return message_ref

    async def _close(self):
        session = self.session
        if not session.is_open:
            return False
        primary_ref = session.primary_message_ref
        notification_refs = (session.capacity_notification_ref,
                             session.one_more_notification_ref)
        session.reset()
        _log.info("Closed queue, message %s", primary_ref)
        await self._edit(primary_ref, self.render())
        for ref in notification_refs:
            if ref is not None and not await self._delete(ref):
                _log.warning("Notification %s left behind, retrying on "
                             "next open", ref)
                self.leftover_refs.append(ref)
        return True

    async def _delete_leftovers(self):
        """Retries deleting the notifications a Close failed to remove."""
        self.leftover_refs = [ref for ref in self.leftover_refs
                              if not await self._delete(ref)]

    async def _join(self, user):
        session = self.session
        if not session.is_open or session.contains(user):
            return False
        if session.num_queued < session.capacity:
            session.participants.append(user)
            kind = EventKind.JOIN
        elif self.waitlist_enabled:
            session.waitlist.append(user)
            kind = EventKind.JOIN_WAITLIST
        elif self.hard_cap:
            return False
        else:
            session.participants.append(user)
            kind = EventKind.JOIN
        session.last_event = LastEvent(kind, user, pendulum.now("UTC"))
        await self._sync()
        return True

    async def _sync(self):
        """Redraws the queue message and then the notifications."""
        if not await self._edit(self.session.primary_message_ref,
                                self.render()):
            return
        await self._reconcile_notifications()

    async def _reconcile_notifications(self):
        """Posts or deletes the notifications to match the queue size."""
        session = self.session

        if session.num_queued == session.one_more_threshold:
            if session.one_more_notification_ref is None:
                phrase, language = random_one_more()
                session.one_more_notification_ref = await self._send(
                    content=rendering.one_more_teaser(phrase, language))
        elif session.one_more_notification_ref is not None:
            if await self._delete(session.one_more_notification_ref):
                session.one_more_notification_ref = None

        if session.is_full:
            if session.capacity_notification_ref is None:
                session.capacity_notification_ref = await self._send(
                    content=rendering.capacity_alert(
                        session.participants, self.mention_separator))
        elif session.capacity_notification_ref is not None:
            if await self._delete(session.capacity_notification_ref):
                session.capacity_notification_ref = None

    async def _send(self, content=None, res=None):
        try:
            return await self.gateway.send_message(
                self.channel_id, content=content, rendering=res)
        except GatewayIOError as err:
            _log.warning("Failed to send message: %s", err)
            return None

    async def _edit(self, message_ref, new_rendering):
        try:
            await self.gateway.edit_message(self.channel_id, message_ref,
                                            new_rendering)
        except GatewayIOError as err:
            _log.warning("Failed to edit message %s: %s", message_ref, err)
            return False
        return True

    async def _delete(self, message_ref):
        try:
            await self.gateway.delete_message(self.channel_id, message_ref)
        except GatewayIOError as err:
            _log.warning("Failed to delete message %s: %s", message_ref, err)
            return False
        return True
