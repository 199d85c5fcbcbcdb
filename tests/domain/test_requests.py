import pytest
from pydantic import ValidationError as PydanticValidationError

from infra_actions.domain.core.exceptions import ValidationError
from infra_actions.domain.requests import (
    CommandStatusQuery,
    DescribeInstanceRequest,
    DescribeInstancesRequest,
    InstanceSetRequest,
    JobHandle,
    JobSubmission,
)


class TestInstanceSetRequest:
    """Tests for the start/stop/reboot event model."""

    def test_defaults(self):
        request = InstanceSetRequest.model_validate({"instances": ["i-1"]})

        assert request.instances == ["i-1"]
        assert request.force is False
        assert request.dry_run is False

    def test_force_flag(self):
        request = InstanceSetRequest.model_validate({"instances": ["i-1"], "force": True})

        assert request.force is True

    def test_extra_keys_ignored(self):
        request = InstanceSetRequest.model_validate({"instances": ["i-1"], "source": "aws.events"})

        assert request.instances == ["i-1"]

    @pytest.mark.parametrize("instances", [[], None, [" "]])
    def test_rejects_missing_instances(self, instances):
        with pytest.raises(PydanticValidationError):
            InstanceSetRequest.model_validate({"instances": instances})


class TestJobModels:
    """Tests for the Batch job event models."""

    def test_submission_aliases(self):
        submission = JobSubmission.model_validate(
            {"jobName": "n", "jobDefinition": "d", "jobQueue": "q", "wait_time": 60}
        )

        assert submission.job_name == "n"
        assert submission.job_definition == "d"
        assert submission.job_queue == "q"
        assert submission.wait_time == 60

    def test_wait_time_is_optional(self):
        assert JobSubmission.model_validate(
            {"jobName": "n", "jobDefinition": "d", "jobQueue": "q", "wait_time": None}
        ).wait_time == 0

        submission = JobSubmission.model_validate({"jobName": "n", "jobDefinition": "d", "jobQueue": "q"})

        assert submission.wait_time == 0

    def test_handle_round_trip(self):
        handle = JobHandle(job_id="643685f9")

        assert handle.to_event() == {"jobID": "643685f9"}
        assert JobHandle.model_validate(handle.to_event()).job_id == "643685f9"


class TestDescribeModels:
    """Tests for the describe event models."""

    def test_single_instance_empty_means_all(self):
        assert DescribeInstanceRequest.model_validate({"instance": ""}).instance_ids == []
        assert DescribeInstanceRequest.model_validate({}).instance_ids == []
        assert DescribeInstanceRequest.model_validate({"instance": None}).instance_ids == []

    def test_single_instance(self):
        assert DescribeInstanceRequest.model_validate({"instance": "i-1"}).instance_ids == ["i-1"]

    def test_instance_set(self):
        assert DescribeInstancesRequest.model_validate({}).instance_ids == []
        assert DescribeInstancesRequest.model_validate({"instances": None}).instance_ids == []
        assert DescribeInstancesRequest.model_validate({"instances": ["i-1", "i-2"]}).instance_ids == ["i-1", "i-2"]


def test_command_status_query_instances_are_optional():
    query = CommandStatusQuery.model_validate({"cmd": "cmd-1", "instances": None})

    assert query.command_id == "cmd-1"
    assert query.instances == []


def test_validation_error_lists_fields():
    with pytest.raises(PydanticValidationError) as exc:
        JobSubmission.model_validate({"jobName": "n"})

    error = ValidationError.from_pydantic("JobSubmission", exc.value)

    fields = {d["field"] for d in error.details}
    assert fields == {"jobDefinition", "jobQueue"}
    assert str(error).startswith("Invalid JobSubmission event:")


@pytest.mark.parametrize("instances", [[""], ["  "], ["i-1", " "]])
def test_describe_set_rejects_blank_ids(instances):
    with pytest.raises(PydanticValidationError):
        DescribeInstancesRequest.model_validate({"instances": instances})
