"""Domain exceptions for the GVC dashboard.

Defines domain-level exceptions that represent failed lookups and reads.
These exceptions are independent of infrastructure concerns; callers
(display layer, scripts) map them to "not found" or "error" states.
"""

from typing import Any


class GVCException(Exception):
    """Base exception for all GVC dashboard errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(GVCException):
    """Raised when input validation fails (e.g. blank identifier)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or argument that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(GVCException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'gvc').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class SubjectNotFoundException(ResourceNotFoundException):
    """Raised when the profiled subject (GVC) does not exist."""

    def __init__(self, subject_id: str) -> None:
        super().__init__("gvc", subject_id)


class FetchException(GVCException):
    """Raised when a read against the record store fails.

    The underlying store error is kept as ``__cause__`` (raise ... from e)
    and summarized in details["reason"].
    """

    def __init__(self, resource: str, reason: str) -> None:
        """Initialize with the resource being read and the failure reason.

        Args:
            resource: Collection or record set that failed (e.g. 'cautelas').
            reason: Short description of the underlying error.
        """
        super().__init__(
            f"Failed to fetch {resource}",
            "FETCH_ERROR",
            {"resource": resource, "reason": reason},
        )
