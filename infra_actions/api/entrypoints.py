"""Lambda entry points.

Each function here is what a Lambda function's handler setting points at,
e.g. ``infra_actions.api.entrypoints.ec2_instances_stop``. Configuration,
logging and the client factory are set up once per execution environment
(on the first invocation after a cold start) and shared by every handler;
each invocation still opens its own provider session.
"""
from functools import lru_cache
from typing import Any, Dict, Optional

from infra_actions.api.handlers import (
    CheckJobHandler,
    CommandStatusHandler,
    DescribeInstanceHandler,
    DescribeInstancesHandler,
    DescribeInstanceStatusHandler,
    IssueCommandHandler,
    RebootInstancesHandler,
    StartInstancesHandler,
    StopInstancesHandler,
    SubmitJobHandler,
)
from infra_actions.config.defaults import ConfigurationManager
from infra_actions.helpers.logger import setup_logging
from infra_actions.infrastructure.aws.aws_client import AWSClientFactory


@lru_cache(maxsize=None)
def get_client_factory() -> AWSClientFactory:
    """Build the process-wide client factory from configuration."""
    app_config = ConfigurationManager().get_app_config()
    setup_logging(app_config.logging)
    return AWSClientFactory(app_config.aws)


def ec2_instances_start(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """Start instances: ``{"instances": [...]}``."""
    return StartInstancesHandler(get_client_factory())(event, context)


def ec2_instances_stop(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """Stop instances: ``{"instances": [...], "force": false}``."""
    return StopInstancesHandler(get_client_factory())(event, context)


def ec2_instances_reboot(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """Reboot instances: ``{"instances": [...]}``."""
    return RebootInstancesHandler(get_client_factory())(event, context)


def get_ec2_instance(event: Optional[Dict[str, Any]], context: Any = None) -> str:
    """Describe one instance: ``{"instance": "i-..."}``; empty describes all."""
    return DescribeInstanceHandler(get_client_factory())(event, context)


def get_ec2_instances(event: Optional[Dict[str, Any]], context: Any = None) -> str:
    """Describe instances: ``{"instances": [...]}``; absent describes all."""
    return DescribeInstancesHandler(get_client_factory())(event, context)


def get_ec2_instance_status(event: Optional[Dict[str, Any]], context: Any = None) -> str:
    """Describe instance status: ``{"instances": [...]}``; absent describes all."""
    return DescribeInstanceStatusHandler(get_client_factory())(event, context)


def ec2_issue_cmd(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """Run a shell command: ``{"instances": [...], "cmd": "..."}``."""
    return IssueCommandHandler(get_client_factory())(event, context)


def ec2_list_cmd(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """List a command by id: ``{"cmd": "<command-id>", "instances": [...]}``."""
    return CommandStatusHandler(get_client_factory())(event, context)


def submit_job(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, str]:
    """Submit a Batch job: ``{"jobName", "jobDefinition", "jobQueue", "wait_time"}``."""
    return SubmitJobHandler(get_client_factory())(event, context)


def check_job(event: Optional[Dict[str, Any]], context: Any = None) -> str:
    """Return a Batch job's status: ``{"jobID": "..."}``."""
    return CheckJobHandler(get_client_factory())(event, context)
