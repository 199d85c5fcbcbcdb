"""Remote command handlers backed by SSM Run Command."""
from typing import Any, Dict

import structlog

from infra_actions.api.handlers.base_handler import BaseLambdaHandler, to_json_safe
from infra_actions.domain.requests import CommandRequest, CommandStatusQuery
from infra_actions.infrastructure.exceptions import AmbiguousResultError

logger = structlog.get_logger(__name__)

SHELL_SCRIPT_DOCUMENT = "AWS-RunShellScript"
MAX_CONCURRENCY = "2"
MAX_ERRORS = "4"
# Lowest timeout Run Command accepts
TIMEOUT_SECONDS = 30


def build_send_command_input(request: CommandRequest) -> Dict[str, Any]:
    """
    Build the SendCommand parameters for a single shell command.

    Concurrency, error tolerance and timeout are fixed and do not depend on
    how many instances are targeted.

    Args:
        request: Validated command request

    Returns:
        Keyword arguments for ``ssm.send_command``
    """
    command_input: Dict[str, Any] = {
        "DocumentName": SHELL_SCRIPT_DOCUMENT,
        "InstanceIds": list(request.instances),
        "Parameters": {"commands": [request.cmd]},
        "MaxConcurrency": MAX_CONCURRENCY,
        "MaxErrors": MAX_ERRORS,
        "TimeoutSeconds": TIMEOUT_SECONDS,
    }
    if request.comment:
        command_input["Comment"] = request.comment
    return command_input


class IssueCommandHandler(BaseLambdaHandler[CommandRequest]):
    """Run a shell command on the named instances and return the command handle."""

    event_model = CommandRequest

    def handle(self, request: CommandRequest) -> Dict[str, Any]:
        ssm = self.client_factory.ssm()
        response = self.client_factory.invoke(
            ssm.send_command, **build_send_command_input(request)
        )
        logger.debug("send_command response", response=response)

        command = (response or {}).get("Command")
        if not command:
            raise AmbiguousResultError("command issue", request.instances)

        logger.info(
            "Command issued",
            command_id=command.get("CommandId"),
            instance_ids=request.instances,
        )
        return to_json_safe(command)


class CommandStatusHandler(BaseLambdaHandler[CommandStatusQuery]):
    """List the commands matching a command id."""

    event_model = CommandStatusQuery

    def handle(self, request: CommandStatusQuery) -> Dict[str, Any]:
        logger.info(
            "Listing commands",
            command_id=request.command_id,
            instance_ids=request.instances,
        )
        ssm = self.client_factory.ssm()
        response = self.client_factory.invoke(
            ssm.list_commands, CommandId=request.command_id
        )
        logger.debug("list_commands response", response=response)

        result: Dict[str, Any] = {"Commands": to_json_safe(response.get("Commands", []))}
        if response.get("NextToken"):
            result["NextToken"] = response["NextToken"]
        return result
