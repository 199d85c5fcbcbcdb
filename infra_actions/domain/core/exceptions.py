# infra_actions/domain/core/exceptions.py
from typing import Any, Dict, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when a triggering event is missing a required field or carries an invalid one."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

    @classmethod
    def from_pydantic(cls, event_name: str, error: Any) -> "ValidationError":
        """
        Build a ValidationError from a pydantic ValidationError.

        Args:
            event_name: Name of the event model that failed to validate
            error: pydantic.ValidationError raised while parsing the event

        Returns:
            ValidationError whose details list each offending field
        """
        details: List[Dict[str, Any]] = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in error.errors()
        ]
        fields = ", ".join(d["field"] or "<event>" for d in details)
        return cls(f"Invalid {event_name} event: {fields}", details)
