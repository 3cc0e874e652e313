"""
Message collection filters.

WHAT: Sender and time-window filters plus the shared chronological sort
WHY: Common slices of a chat without touching the caller's list
HOW: List comprehensions and sorted() copies
"""

from typing import List, Literal, Optional, Sequence

from ..core.config import settings
from ..models.message import Message, Sender
from ..utils.logger import get_logger

logger = get_logger(__name__)

SortOrder = Literal["asc", "desc"]


def sort_chronologically(messages: Sequence[Message], order: SortOrder = "asc") -> List[Message]:
    """
    Return a new list of messages sorted by timestamp.
    
    Stable, so messages sharing a timestamp keep their input order. The
    input sequence is never modified.
    
    Args:
        messages: Messages to sort
        order: "asc" for oldest first, "desc" for newest first
    
    Returns:
        Sorted copy
    """
    if order not in ("asc", "desc"):
        raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
    return sorted(messages, key=lambda msg: msg.timestamp, reverse=(order == "desc"))


def get_by_sender(messages: Sequence[Message], sender: Sender) -> List[Message]:
    """
    Get all messages sent by one party, in input order.
    
    Args:
        messages: Messages to filter
        sender: "Buyer" or "Seller"
    
    Returns:
        Matching messages (possibly empty)
    """
    return [msg for msg in messages if msg.sender == sender]


def get_in_range(
    messages: Sequence[Message],
    start: int,
    end: int,
    order: Optional[SortOrder] = None
) -> List[Message]:
    """
    Get messages strictly inside a time window.
    
    WHAT: Keep messages with start < timestamp < end
    WHY: Both boundaries are exclusive; an inverted window is simply empty
    HOW: Filter, then sort a copy by timestamp
    
    Args:
        messages: Messages to filter
        start: Exclusive lower bound (seconds since epoch)
        end: Exclusive upper bound (seconds since epoch)
        order: Sort direction; defaults to settings.DEFAULT_SORT_ORDER
    
    Returns:
        Matching messages sorted by timestamp
    """
    in_window = [msg for msg in messages if start < msg.timestamp < end]
    
    logger.debug(f"Range ({start}, {end}) matched {len(in_window)} of {len(messages)} messages")
    
    return sort_chronologically(in_window, order or settings.DEFAULT_SORT_ORDER)
