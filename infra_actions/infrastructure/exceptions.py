from typing import Any, List, Optional


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(InfrastructureError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message, errors)
        self.errors = errors or []


class SessionError(InfrastructureError):
    """Raised when a provider session or client cannot be established."""
    pass


class ProviderError(InfrastructureError):
    """Raised when the provider call itself fails.

    Carries the provider's error code and message when the failure came back
    from the service, and the error kind derived from them.
    """
    def __init__(
        self,
        operation: str,
        error_message: str,
        error_code: Optional[str] = None,
        kind: Optional[Any] = None,
        details: Optional[Any] = None,
    ):
        prefix = f"{operation} failed"
        if error_code:
            prefix = f"{prefix} ({error_code})"
        super().__init__(f"{prefix}: {error_message}", details)
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.kind = kind


class AmbiguousResultError(InfrastructureError):
    """Raised when a call reported no error but also returned no usable result."""
    def __init__(self, operation: str, subject: Any):
        super().__init__(
            f"{operation} for {subject} returned no information - status unknown",
            {"operation": operation, "subject": subject},
        )
        self.operation = operation
