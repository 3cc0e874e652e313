"""
Chronological context lookup.

WHAT: Find a message together with the messages just before and after it
WHY: Reading a reply in isolation loses the surrounding conversation
HOW: Sort a copy by timestamp and index around the target
"""

from typing import Sequence

from ..models.message import Message
from ..models.thread import MessageContext
from .message_filters import sort_chronologically


def get_with_context(messages: Sequence[Message], message_id: str) -> MessageContext:
    """
    Get a message and its chronological neighbours.
    
    Args:
        messages: Full message collection (not modified)
        message_id: Id of the target message
    
    Returns:
        MessageContext; prev is None for the earliest message, next is None
        for the latest, and everything is None if the id is unknown
    """
    ordered = sort_chronologically(messages)
    
    for index, msg in enumerate(ordered):
        if msg.id == message_id:
            return MessageContext(
                prev=ordered[index - 1] if index > 0 else None,
                current=msg,
                next=ordered[index + 1] if index + 1 < len(ordered) else None,
            )
    
    return MessageContext()
