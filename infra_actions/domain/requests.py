"""Event models for the triggering Lambda events.

Every model is built from the raw event dict the Lambda runtime hands to a
handler. Field aliases match the wire names used by the callers (mostly a
Step Functions state machine), so ``jobID`` stays ``jobID`` on the way in and
on the way out.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseEventModel(BaseModel):
    """Base class for all triggering event models."""
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


def _require_instance_ids(value: Optional[List[str]]) -> List[str]:
    if not value:
        raise ValueError("no instance names were specified")
    if any(not instance_id for instance_id in value):
        raise ValueError("instance names must be non-empty strings")
    return value


def _require_text(value: str, what: str) -> str:
    if not value:
        raise ValueError(f"no {what} was provided")
    return value


class InstanceSetRequest(BaseEventModel):
    """Event naming the EC2 instances for a start, stop or reboot."""
    instances: List[str]
    force: bool = False
    dry_run: bool = False

    @field_validator("instances")
    @classmethod
    def validate_instances(cls, v: List[str]) -> List[str]:
        return _require_instance_ids(v)


class CommandRequest(BaseEventModel):
    """Event carrying a shell command to run on a set of instances."""
    instances: List[str]
    cmd: str
    comment: str = ""

    @field_validator("instances")
    @classmethod
    def validate_instances(cls, v: List[str]) -> List[str]:
        return _require_instance_ids(v)

    @field_validator("cmd")
    @classmethod
    def validate_cmd(cls, v: str) -> str:
        return _require_text(v, "command")


class CommandStatusQuery(BaseEventModel):
    """Event identifying a previously issued command.

    ``instances`` is carried for logging only; the query is by command id.
    """
    cmd: str
    instances: List[str] = Field(default_factory=list)

    @field_validator("cmd")
    @classmethod
    def validate_cmd(cls, v: str) -> str:
        return _require_text(v, "command-id")

    @field_validator("instances", mode="before")
    @classmethod
    def default_instances(cls, v: Optional[List[str]]) -> List[str]:
        return v or []

    @property
    def command_id(self) -> str:
        return self.cmd


class JobSubmission(BaseEventModel):
    """Event describing an AWS Batch job to submit.

    ``wait_time`` is a hint consumed by the orchestrating state machine's
    wait state; it is accepted here but does not shape the submission.
    """
    job_name: str = Field(alias="jobName")
    job_definition: str = Field(alias="jobDefinition")
    job_queue: str = Field(alias="jobQueue")
    wait_time: int = Field(0, ge=0)

    @field_validator("wait_time", mode="before")
    @classmethod
    def default_wait_time(cls, v: Optional[int]) -> int:
        return 0 if v is None else v

    @field_validator("job_name", "job_definition", "job_queue")
    @classmethod
    def validate_names(cls, v: str, info) -> str:
        return _require_text(v, info.field_name.replace("_", " "))


class JobHandle(BaseEventModel):
    """Handle of a submitted Batch job: ``{"jobID": "..."}``."""
    job_id: str = Field(alias="jobID")

    @field_validator("job_id")
    @classmethod
    def validate_job_id(cls, v: str) -> str:
        return _require_text(v, "job id")

    def to_event(self) -> dict:
        """Render the handle with its wire field name."""
        return self.model_dump(by_alias=True)


class DescribeInstanceRequest(BaseEventModel):
    """Event naming a single instance; an empty name means every instance."""
    instance: str = ""

    @field_validator("instance", mode="before")
    @classmethod
    def default_instance(cls, v: Optional[str]) -> str:
        return v or ""

    @property
    def instance_ids(self) -> List[str]:
        return [self.instance] if self.instance else []


class DescribeInstancesRequest(BaseEventModel):
    """Event naming a set of instances; absent, null or ``[]`` means every instance.

    A list that names anything must not contain blank entries.
    """
    instances: Optional[List[str]] = None

    @field_validator("instances")
    @classmethod
    def validate_instances(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _require_instance_ids(v) if v else v

    @property
    def instance_ids(self) -> List[str]:
        return list(self.instances or [])
