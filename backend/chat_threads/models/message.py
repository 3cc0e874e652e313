"""
Chat message models.

WHAT: Immutable buyer/seller chat message record
WHY: Every operation works on the same validated, read-only value type
HOW: Frozen Pydantic v2 model with aliases for the raw JSON shape
"""

from pydantic import BaseModel, ConfigDict, Field, AliasChoices, ValidationError, field_validator
from typing import Literal, Optional, Any, Iterable, List

from ..utils.exceptions import ValidationException

Sender = Literal["Buyer", "Seller"]


class Message(BaseModel):
    """A single chat message, optionally replying to another message."""
    
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    id: str = Field(min_length=1)
    parent_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("parent_id", "parentId"),
    )
    sender: Sender
    timestamp: int = Field(validation_alias=AliasChoices("timestamp", "ts"))  # seconds since epoch
    text: str
    
    @field_validator("parent_id", mode="before")
    @classmethod
    def normalize_missing_parent(cls, v):
        """Treat an empty parent id the same as no parent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
    
    @property
    def is_root(self) -> bool:
        """True if this message does not reply to anything."""
        return self.parent_id is None


def parse_messages(raw: Iterable[dict[str, Any]]) -> List[Message]:
    """
    Validate raw message records into Message objects.
    
    WHAT: Convert dicts (JSON shape or field names) to Messages
    WHY: Callers often hold data as `{"parentId": ..., "ts": ...}` dicts
    HOW: Validate each record, collect pydantic errors into a ValidationException
    
    Args:
        raw: Iterable of message dicts
    
    Returns:
        List of Messages in input order
    
    Raises:
        ValidationException: If any record is malformed
    """
    messages = []
    field_errors = []
    
    for index, record in enumerate(raw):
        try:
            messages.append(Message.model_validate(record))
        except ValidationError as e:
            for error in e.errors():
                location = ".".join(str(part) for part in error["loc"])
                field_errors.append({
                    "field": f"[{index}].{location}" if location else f"[{index}]",
                    "message": error["msg"],
                })
    
    if field_errors:
        raise ValidationException(
            f"Invalid message records: {len(field_errors)} error(s)",
            field_errors=field_errors
        )
    
    return messages
