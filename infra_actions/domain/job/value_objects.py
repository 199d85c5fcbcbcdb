"""Value objects for AWS Batch jobs."""

from enum import Enum


class JobStatus(str, Enum):
    """Batch job status enumeration."""

    SUBMITTED = "SUBMITTED"
    PENDING = "PENDING"
    RUNNABLE = "RUNNABLE"
    STARTING = "STARTING"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"