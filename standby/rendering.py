"""Text and button layout of the queue message and its notifications.

Everything here is a pure function of the queue state, so the same state
always renders the same message. Turning a Rendering into actual Discord
objects is done in views.py.
"""

from typing import NamedTuple


BUTTON_JOIN = "join_queue"
BUTTON_LEAVE = "leave_queue"
BUTTON_CLOSE = "close_queue"
BUTTON_OPEN = "open_queue"

COLOUR_ACTIVE = 0x0099FF
COLOUR_CLOSED = 0x808080

CLOSED_TEXT = "Queue is closed"
EMPTY_TEXT = "No users in queue"

# Used for joining the mentions of the capacity alert.
MENTION_SEPARATOR = " "


class Button(NamedTuple):
    """One button of the queue message."""
    custom_id: str
    label: str
    style: str
    disabled: bool = False


class Rendering(NamedTuple):
    """Everything needed to draw the queue message."""
    title: str
    body: str
    colour: int
    buttons: tuple[Button, ...]


OPEN_BUTTONS = (
    Button(BUTTON_JOIN, "Join", "primary"),
    Button(BUTTON_LEAVE, "Leave", "danger"),
    Button(BUTTON_CLOSE, "Close", "secondary"),
)

# Disabled buttons use IDs that are never routed to a queue operation.
CLOSED_BUTTONS = (
    Button(f"{BUTTON_JOIN}_disabled", "Join", "primary", disabled=True),
    Button(f"{BUTTON_LEAVE}_disabled", "Leave", "danger", disabled=True),
    Button(BUTTON_OPEN, "Open", "success"),
)


def mention(user_id: int) -> str:
    """Returns the Discord mention markup of a user."""
    return f"<@{user_id}>"


def title(capacity: int) -> str:
    return f"{capacity}-stack queue"


def status_line(event) -> str:
    """One line describing the latest queue event, eg. "<@1> joined!"."""
    return (f"{mention(event.actor)} {event.kind.value}! "
            f"<t:{event.at.int_timestamp}:R>")


def _enumerated(heading, users):
    lines = [f"**{heading} ({len(users)}):**"]
    lines += [f"{i}. {mention(user)}" for i, user in enumerate(users, 1)]
    return lines


def render(session) -> Rendering:
    """Renders the queue message for the current state of the session."""
    if not session.is_open:
        return Rendering(title=title(session.capacity), body=CLOSED_TEXT,
                         colour=COLOUR_CLOSED, buttons=CLOSED_BUTTONS)

    lines = []
    if session.last_event is not None:
        lines.append(status_line(session.last_event))
    if session.participants:
        lines += _enumerated("Queued users", session.participants)
    else:
        lines.append(EMPTY_TEXT)
    if session.waitlist:
        lines.append("")
        lines += _enumerated("Waitlist", session.waitlist)

    return Rendering(title=title(session.capacity), body="\n".join(lines),
                     colour=COLOUR_ACTIVE, buttons=OPEN_BUTTONS)


def capacity_alert(users, separator=MENTION_SEPARATOR) -> str:
    """Alert pinging everyone in a queue that has enough users."""
    return ("There are enough users for a game!\n"
            f"{separator.join(mention(user) for user in users)}")


def one_more_teaser(phrase: str, language: str) -> str:
    return f"**{phrase}** _({language})_"


def promotion_notice(user_id: int) -> str:
    return f"{mention(user_id)} you're up!"


def role_alert(role_id: int) -> str:
    """Alert pinging the standby role once enough members hold it."""
    return f"<@&{role_id}> there are enough members for a game!"
