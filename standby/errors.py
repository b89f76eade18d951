"""Errors raised by the standby queue and its collaborators.

The message of a StandbyError is safe to show to the user who caused it.
"""


class StandbyError(Exception):
    """Base class for all standby bot errors."""


class AlreadyOpen(StandbyError):
    """A queue was started while another one is still open."""

    def __init__(self, message: str = "Queue already exists"):
        super().__init__(message)


class NotAuthorized(StandbyError):
    """The user lacks the admin role required for the action."""


class GatewayIOError(StandbyError):
    """Sending, editing or deleting a channel message failed."""


class MemberResolutionError(StandbyError):
    """Looking up a guild member's roles failed."""


class ConfigError(StandbyError):
    """Required configuration is missing or invalid."""
