import pytest
from typer.testing import CliRunner

from cirrus.main import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        ["ec2", "explode"],
        ["logs", "tail"],
        ["s3", "objects"],
        ["lambda", "functions"],
    ],
)
def test_unknown_commands_are_usage_errors(args, mocker):
    mock_session = mocker.patch("boto3.Session")

    result = runner.invoke(app, args)

    assert result.exit_code == 2
    assert "No such command" in result.output
    mock_session.assert_not_called()


def test_all_service_groups_registered():
    group_names = {group.name for group in app.registered_groups}
    assert group_names == {"ec2", "logs", "s3"}


@pytest.mark.parametrize(
    "group, command",
    [
        ("ec2", "instances"),
        ("ec2", "addr"),
        ("ec2", "start"),
        ("ec2", "stop"),
        ("ec2", "reboot"),
        ("ec2", "terminate"),
        ("logs", "groups"),
        ("logs", "recent-streams"),
        ("s3", "buckets"),
    ],
)
def test_command_help_is_available(group, command):
    result = runner.invoke(app, [group, command, "--help"])

    assert result.exit_code == 0
    assert "--region" in result.output


@pytest.mark.parametrize("args", [[], ["ec2"], ["logs"], ["s3"]])
def test_group_without_verb_shows_help_and_fails(args, mocker):
    mock_session = mocker.patch("boto3.Session")

    result = runner.invoke(app, args)

    assert result.exit_code == 2
    assert "Usage" in result.output
    mock_session.assert_not_called()
