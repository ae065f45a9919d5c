"""
Custom application exceptions
"""

from typing import Optional, Dict, Any


class VenueRegistryException(Exception):
    """Base exception for the venue registry"""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(VenueRegistryException):
    """Authentication related errors"""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict] = None):
        super().__init__(
            message=message,
            code="AUTH_ERROR",
            status_code=401,
            details=details
        )


class NotFoundError(VenueRegistryException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} with ID {identifier} not found"
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            details={"resource": resource, "id": str(identifier)} if identifier else {}
        )


class ValidationError(VenueRegistryException):
    """Validation errors"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        self.field = field
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details=details
        )


class StorageError(VenueRegistryException):
    """Unexpected failure from the storage layer"""

    def __init__(self, message: str = "A storage error occurred"):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=500
        )
