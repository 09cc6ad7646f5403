"""
Custom domain exceptions for consistent error handling.

Errors are raised synchronously to the caller and never recovered inside
the services.
"""


class DomainError(Exception):
    """Base class for all domain-specific errors."""
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DomainError):
    """Invalid input (weight, policy name, ...)."""
    def __init__(self, message: str, field: str | None = None, details: dict | None = None):
        if field:
            message = f"Validation error on {field}: {message}"
        super().__init__(message, details=details)
        self.field = field


class InvalidTransition(DomainError):
    """An order operation was invoked from a status that does not permit it."""
    def __init__(self, action, status, message: str):
        super().__init__(
            message,
            details={"action": getattr(action, "value", action), "status": getattr(status, "value", status)},
        )
        self.action = action
        self.status = status
