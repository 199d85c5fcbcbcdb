from datetime import datetime, timezone

import pytest

from infra_actions.api.handlers.command_handlers import (
    CommandStatusHandler,
    IssueCommandHandler,
    build_send_command_input,
)
from infra_actions.domain.core.exceptions import ValidationError
from infra_actions.domain.requests import CommandRequest
from infra_actions.infrastructure.aws.exceptions import ErrorKind
from infra_actions.infrastructure.exceptions import AmbiguousResultError, ProviderError


def _expected_send_command(instances, cmd):
    return {
        "DocumentName": "AWS-RunShellScript",
        "InstanceIds": instances,
        "Parameters": {"commands": [cmd]},
        "MaxConcurrency": "2",
        "MaxErrors": "4",
        "TimeoutSeconds": 30,
    }


def test_issue_command_returns_command(stubbed_factory):
    # Arrange
    stubbed_factory.stubbers["ssm"].add_response(
        "send_command",
        {
            "Command": {
                "CommandId": "cmd-123",
                "DocumentName": "AWS-RunShellScript",
                "InstanceIds": ["i-1", "i-2"],
                "Status": "Pending",
                "RequestedDateTime": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            }
        },
        _expected_send_command(["i-1", "i-2"], "uptime"),
    )
    handler = IssueCommandHandler(stubbed_factory)

    # Act
    command = handler({"instances": ["i-1", "i-2"], "cmd": "uptime"})

    # Assert
    assert command["CommandId"] == "cmd-123"
    assert command["RequestedDateTime"] == "2024-01-02T03:04:05+00:00"
    stubbed_factory.stubbers["ssm"].assert_no_pending_responses()


def test_issue_command_passes_comment(stubbed_factory):
    expected = _expected_send_command(["i-1"], "ls /tmp")
    expected["Comment"] = "nightly cleanup"
    stubbed_factory.stubbers["ssm"].add_response(
        "send_command", {"Command": {"CommandId": "cmd-1"}}, expected
    )

    command = IssueCommandHandler(stubbed_factory)(
        {"instances": ["i-1"], "cmd": "ls /tmp", "comment": "nightly cleanup"}
    )

    assert command == {"CommandId": "cmd-1"}


@pytest.mark.parametrize("count", [1, 5, 50])
def test_command_parameters_are_fixed(count):
    instances = [f"i-{n}" for n in range(count)]

    command_input = build_send_command_input(CommandRequest(instances=instances, cmd="date"))

    assert command_input == _expected_send_command(instances, "date")


def test_issue_command_provider_error_is_raised_before_result(stubbed_factory):
    stubbed_factory.stubbers["ssm"].add_client_error(
        "send_command",
        service_error_code="InvalidInstanceId",
        service_message="Instances [[i-1]] not in a valid state",
        http_status_code=400,
    )

    with pytest.raises(ProviderError) as exc:
        IssueCommandHandler(stubbed_factory)({"instances": ["i-1"], "cmd": "uptime"})

    assert exc.value.error_code == "InvalidInstanceId"
    assert "not in a valid state" in str(exc.value)
    assert exc.value.kind is ErrorKind.CLIENT


def test_issue_command_without_command_is_ambiguous(stubbed_factory):
    stubbed_factory.stubbers["ssm"].add_response(
        "send_command", {}, _expected_send_command(["i-1"], "uptime")
    )

    with pytest.raises(AmbiguousResultError):
        IssueCommandHandler(stubbed_factory)({"instances": ["i-1"], "cmd": "uptime"})


@pytest.mark.parametrize(
    "event",
    [
        {"cmd": "uptime"},
        {"instances": [], "cmd": "uptime"},
        {"instances": None, "cmd": "uptime"},
        {"instances": ["i-1"]},
        {"instances": ["i-1"], "cmd": "   "},
    ],
)
def test_issue_command_validation(mock_factory, event):
    with pytest.raises(ValidationError):
        IssueCommandHandler(mock_factory)(event)

    assert not mock_factory.method_calls


def test_command_status_lists_commands(stubbed_factory):
    # Arrange
    stubbed_factory.stubbers["ssm"].add_response(
        "list_commands",
        {
            "Commands": [
                {
                    "CommandId": "cmd-123",
                    "Status": "Success",
                    "InstanceIds": ["i-1"],
                    "RequestedDateTime": datetime(2024, 1, 2, tzinfo=timezone.utc),
                }
            ]
        },
        {"CommandId": "cmd-123"},
    )

    # Act
    result = CommandStatusHandler(stubbed_factory)({"cmd": "cmd-123", "instances": ["i-1"]})

    # Assert
    assert [c["CommandId"] for c in result["Commands"]] == ["cmd-123"]
    assert result["Commands"][0]["Status"] == "Success"
    assert "NextToken" not in result


def test_command_status_empty_list_is_not_error(stubbed_factory):
    stubbed_factory.stubbers["ssm"].add_response(
        "list_commands", {"Commands": []}, {"CommandId": "cmd-unknown"}
    )

    result = CommandStatusHandler(stubbed_factory)({"cmd": "cmd-unknown"})

    assert result == {"Commands": []}


def test_command_status_provider_error(stubbed_factory):
    stubbed_factory.stubbers["ssm"].add_client_error(
        "list_commands",
        service_error_code="InvalidCommandId",
        service_message="Invalid command id",
        http_status_code=400,
    )

    with pytest.raises(ProviderError) as exc:
        CommandStatusHandler(stubbed_factory)({"cmd": "bogus"})

    assert "Invalid command id" in str(exc.value)


@pytest.mark.parametrize("event", [{}, {"cmd": ""}, {"cmd": None, "instances": ["i-1"]}])
def test_command_status_validation(mock_factory, event):
    with pytest.raises(ValidationError):
        CommandStatusHandler(mock_factory)(event)

    assert not mock_factory.method_calls
