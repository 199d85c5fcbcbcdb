"""Handler classes behind the Lambda entry points."""

from infra_actions.api.handlers.base_handler import BaseLambdaHandler
from infra_actions.api.handlers.command_handlers import CommandStatusHandler, IssueCommandHandler
from infra_actions.api.handlers.describe_handlers import (
    DescribeInstanceHandler,
    DescribeInstancesHandler,
    DescribeInstanceStatusHandler,
)
from infra_actions.api.handlers.instance_handlers import (
    RebootInstancesHandler,
    StartInstancesHandler,
    StopInstancesHandler,
)
from infra_actions.api.handlers.job_handlers import CheckJobHandler, SubmitJobHandler

__all__: list[str] = [
    "BaseLambdaHandler",
    "StartInstancesHandler",
    "StopInstancesHandler",
    "RebootInstancesHandler",
    "DescribeInstanceHandler",
    "DescribeInstancesHandler",
    "DescribeInstanceStatusHandler",
    "IssueCommandHandler",
    "CommandStatusHandler",
    "SubmitJobHandler",
    "CheckJobHandler",
]
