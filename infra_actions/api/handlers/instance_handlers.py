"""Instance lifecycle handlers: start, stop and reboot EC2 instances.

None of these handlers checks the current state of the named instances
before acting; the caller is responsible for asking for an action that is
valid for that state.
"""
from typing import Any, Dict

import structlog

from infra_actions.api.handlers.base_handler import BaseLambdaHandler, to_json_safe
from infra_actions.domain.requests import InstanceSetRequest
from infra_actions.infrastructure.exceptions import AmbiguousResultError

logger = structlog.get_logger(__name__)


class StartInstancesHandler(BaseLambdaHandler[InstanceSetRequest]):
    """Start the named EC2 instances."""

    event_model = InstanceSetRequest

    def handle(self, request: InstanceSetRequest) -> Dict[str, Any]:
        ec2 = self.client_factory.ec2()
        response = self.client_factory.invoke(
            ec2.start_instances,
            InstanceIds=request.instances,
            DryRun=request.dry_run,
        )
        logger.debug("start_instances response", response=response)

        if not response or not response.get("StartingInstances"):
            raise AmbiguousResultError("instance start", request.instances)
        return to_json_safe(response)


class StopInstancesHandler(BaseLambdaHandler[InstanceSetRequest]):
    """Stop the named EC2 instances, forcibly when the event asks for it."""

    event_model = InstanceSetRequest

    def handle(self, request: InstanceSetRequest) -> Dict[str, Any]:
        ec2 = self.client_factory.ec2()
        response = self.client_factory.invoke(
            ec2.stop_instances,
            InstanceIds=request.instances,
            Force=request.force,
            DryRun=request.dry_run,
        )
        logger.debug("stop_instances response", response=response)

        if not response or not response.get("StoppingInstances"):
            raise AmbiguousResultError("instance stop", request.instances)
        return to_json_safe(response)


class RebootInstancesHandler(BaseLambdaHandler[InstanceSetRequest]):
    """Reboot the named EC2 instances.

    RebootInstances has no response body, so the result lists the instance
    ids the reboot was accepted for.
    """

    event_model = InstanceSetRequest

    def handle(self, request: InstanceSetRequest) -> Dict[str, Any]:
        ec2 = self.client_factory.ec2()
        response = self.client_factory.invoke(
            ec2.reboot_instances,
            InstanceIds=request.instances,
            DryRun=request.dry_run,
        )
        logger.debug("reboot_instances response", response=response)

        if response is None:
            raise AmbiguousResultError("instance reboot", request.instances)
        return {"RebootingInstances": list(request.instances)}
