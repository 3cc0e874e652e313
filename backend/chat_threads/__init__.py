"""Buyer/seller chat message threading and filtering."""

from .models.message import Message, Sender, parse_messages
from .models.thread import ThreadNode, ThreadForest, MessageContext
from .services.thread_builder import build_threads
from .services.message_filters import get_by_sender, get_in_range, sort_chronologically
from .services.context_lookup import get_with_context
from .services.transcript import format_time, render_chrono
from .utils.exceptions import BusinessException, ValidationException, DuplicateMessageIdException

__all__ = [
    "Message",
    "Sender",
    "parse_messages",
    "ThreadNode",
    "ThreadForest",
    "MessageContext",
    "build_threads",
    "get_by_sender",
    "get_in_range",
    "sort_chronologically",
    "get_with_context",
    "format_time",
    "render_chrono",
    "BusinessException",
    "ValidationException",
    "DuplicateMessageIdException",
]
