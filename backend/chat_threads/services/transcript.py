"""
Plain-text transcript rendering.

WHAT: Render a chat as "HH:MM sender: text" lines, oldest first
WHY: Readable transcript of the whole conversation
HOW: Sort a copy ascending, format local wall-clock times
"""

from datetime import datetime, tzinfo
from typing import Optional, Sequence

from ..core.config import settings
from ..models.message import Message
from .message_filters import sort_chronologically


def format_time(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """
    Format epoch seconds as zero-padded HH:MM.
    
    Args:
        timestamp: Seconds since epoch
        tz: Timezone to display in; falls back to settings.DISPLAY_TIMEZONE,
            then the host's local time
    
    Returns:
        "HH:MM" string
    """
    display_tz = tz if tz is not None else settings.get_display_tz()
    moment = datetime.fromtimestamp(timestamp, tz=display_tz)
    return f"{moment.hour:02d}:{moment.minute:02d}"


def render_chrono(messages: Sequence[Message], tz: Optional[tzinfo] = None) -> str:
    """
    Render all messages as a newline-terminated transcript, oldest first.
    
    Args:
        messages: Messages to render (not modified)
        tz: Optional display timezone override
    
    Returns:
        One "HH:MM sender: text" line per message; "" for no messages
    """
    return "".join(
        f"{format_time(msg.timestamp, tz)} {msg.sender}: {msg.text}\n"
        for msg in sort_chronologically(messages)
    )
