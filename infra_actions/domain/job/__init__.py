"""Batch job domain types."""
from infra_actions.domain.job.value_objects import JobStatus

__all__ = ["JobStatus"]
