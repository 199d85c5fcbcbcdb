"""Base class for the event-triggered provider-action handlers."""
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Generic, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from infra_actions.domain.core.exceptions import DomainException, ValidationError
from infra_actions.infrastructure.aws.aws_client import AWSClientFactory
from infra_actions.infrastructure.exceptions import InfrastructureError

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=BaseModel)


def to_json_safe(data: Any) -> Any:
    """
    Render a provider response so the Lambda runtime can serialize it.

    Strips ``ResponseMetadata`` and converts datetimes to ISO-8601 strings.
    """
    if isinstance(data, dict):
        return {k: to_json_safe(v) for k, v in data.items() if k != "ResponseMetadata"}
    if isinstance(data, (list, tuple)):
        return [to_json_safe(v) for v in data]
    if isinstance(data, (datetime, date)):
        return data.isoformat()
    return data


class BaseLambdaHandler(ABC, Generic[E]):
    """
    Base handler for a single provider action.

    Every handler follows the same shape: validate the triggering event into
    its event model, build a client from the injected factory, issue one
    provider call and repackage the result. Errors are logged with the
    invocation inputs and re-raised unchanged; the Lambda runtime reports
    them on its error channel.
    """

    event_model: ClassVar[Type[BaseModel]]

    def __init__(self, client_factory: AWSClientFactory):
        """
        Initialize handler.

        Args:
            client_factory: Factory for per-invocation provider clients
        """
        self.client_factory = client_factory

    def __call__(self, event: Optional[Dict[str, Any]], context: Any = None) -> Any:
        """
        Handle one invocation.

        Args:
            event: Raw triggering event
            context: Lambda context object, if any

        Returns:
            Handler result

        Raises:
            ValidationError: If the event is missing a required field
            InfrastructureError: If the session, the call or its result fails
        """
        log = logger.bind(
            handler=type(self).__name__,
            aws_request_id=getattr(context, "aws_request_id", None),
        )
        log.info("Received event", trigger_event=event)

        try:
            request = self.parse_event(event)
            result = self.handle(request)
        except (DomainException, InfrastructureError) as e:
            log.error(
                "Invocation failed",
                trigger_event=event,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        log.debug("Invocation succeeded", result=result)
        return result

    def parse_event(self, event: Optional[Dict[str, Any]]) -> E:
        """
        Validate the raw event into the handler's event model.

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        if event is None:
            event = {}
        if not isinstance(event, dict):
            raise ValidationError(
                f"triggering event must be a JSON object, got {type(event).__name__}"
            )
        try:
            return self.event_model.model_validate(event)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(self.event_model.__name__, e) from e

    @abstractmethod
    def handle(self, request: E) -> Any:
        """Issue the provider call for a validated request."""
        pass
