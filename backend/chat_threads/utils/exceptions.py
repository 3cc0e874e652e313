"""
Custom business exceptions for message collections.

WHAT: Domain-specific exceptions for contract violations
WHY: Consistent error shape (message, code, details) across the package
HOW: Custom exception classes with error codes and messages
"""

from typing import Optional, List, Dict, Any


class BusinessException(Exception):
    """Base class for business logic exceptions."""
    
    def __init__(self, message: str, code: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ValidationException(BusinessException):
    """Raised for validation errors."""
    
    def __init__(self, message: str, field_errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field_errors": field_errors} if field_errors else None
        )


class DuplicateMessageIdException(BusinessException):
    """Raised when a collection contains the same message id twice."""
    
    def __init__(self, message_id: str):
        super().__init__(
            message=f"Duplicate message id in collection: {message_id}",
            code="DUPLICATE_MESSAGE_ID",
            details={"message_id": message_id}
        )
