"""Custom exception classes for the application.

Defines domain-specific exceptions raised by API endpoints and handled
consistently by the exception handlers in `core.error_handlers`.
"""

from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Food', 'MealPattern').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'update').
            details: Optional extra context merged into the error details.
        """
        merged = dict(details or {})
        if operation:
            merged["operation"] = operation
        super().__init__(message, status_code=500, details=merged)


class InfeasibleMealError(AppException):
    """Raised when no meal pattern can be built for the requested constraints."""

    def __init__(
        self,
        target_protein: float,
        exclude_categories: Optional[List[str]] = None,
        max_items: Optional[int] = None,
    ):
        """Initialize infeasible meal error.

        Args:
            target_protein: Protein target that could not be met.
            exclude_categories: Categories that were excluded from the search.
            max_items: Item cap that was applied.
        """
        super().__init__(
            "No meal pattern matches these conditions. Loosen the constraints and try again.",
            status_code=404,
            details={
                "target_protein": target_protein,
                "exclude_categories": exclude_categories or [],
                "max_items": max_items,
            },
        )
