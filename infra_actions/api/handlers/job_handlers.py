"""AWS Batch job handlers.

Both handlers are steps of an orchestrating state machine: the submit
handler's result is stored as the job handle, and the status handler is
re-invoked with that handle until the job settles. Neither handler polls.
"""
from typing import Dict

import structlog

from infra_actions.api.handlers.base_handler import BaseLambdaHandler
from infra_actions.domain.job.value_objects import JobStatus
from infra_actions.domain.requests import JobHandle, JobSubmission
from infra_actions.infrastructure.exceptions import AmbiguousResultError

logger = structlog.get_logger(__name__)


class SubmitJobHandler(BaseLambdaHandler[JobSubmission]):
    """Submit a job to AWS Batch and return ``{"jobID": ...}``."""

    event_model = JobSubmission

    def handle(self, request: JobSubmission) -> Dict[str, str]:
        batch = self.client_factory.batch()
        response = self.client_factory.invoke(
            batch.submit_job,
            jobName=request.job_name,
            jobDefinition=request.job_definition,
            jobQueue=request.job_queue,
        )
        logger.debug("submit_job response", response=response)

        job_id = (response or {}).get("jobId")
        if not job_id:
            raise AmbiguousResultError("job submission", request.job_name)

        logger.info("Job submitted", job_id=job_id, wait_time=request.wait_time)
        return JobHandle(job_id=job_id).to_event()


class CheckJobHandler(BaseLambdaHandler[JobHandle]):
    """Return the current status string of a Batch job.

    A job id that matches no job reports ``FAILED``. The orchestrating state
    machine treats a job it can no longer find as a failed job, so this is
    returned as a status rather than raised as an error.
    """

    event_model = JobHandle

    def handle(self, request: JobHandle) -> str:
        batch = self.client_factory.batch()
        response = self.client_factory.invoke(
            batch.describe_jobs, jobs=[request.job_id]
        )
        logger.debug("describe_jobs response", response=response)

        jobs = response.get("jobs", [])
        if not jobs:
            logger.warning("No job found, reporting it as failed", job_id=request.job_id)
            return JobStatus.FAILED.value
        return jobs[0]["status"]
