import typer

from cirrus.core.errors import handle_aws_errors
from cirrus.core.presenter import present
from cirrus.core.session import build_session, setup_logging
from cirrus.services.logs.client import MAX_STREAMS_PER_REQUEST, LogsClient
from cirrus.services.logs.views import LogGroupView, LogStreamView


def list_groups(
    prefix: str = typer.Argument(None, help="Only list groups starting with this"),
    verbose: bool = False,
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    List log groups.
    """
    setup_logging(verbose)
    with handle_aws_errors("failed to list log groups"):
        client = LogsClient(build_session(region, profile))
        groups = client.list_log_groups(prefix)

    present(
        groups, LogGroupView, json_output=json_output, empty_message="No log groups"
    )


def recent_streams(
    group_name: str = typer.Argument(
        ..., metavar="LOG_GROUP_NAME", help="Log group to inspect"
    ),
    limit: int = typer.Option(
        10,
        "--limit",
        "-n",
        min=1,
        max=MAX_STREAMS_PER_REQUEST,
        help="Maximum number of streams to show",
    ),
    verbose: bool = False,
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    List the most recently written streams of a log group.
    """
    setup_logging(verbose)
    with handle_aws_errors("failed to list log streams"):
        client = LogsClient(build_session(region, profile))
        streams = client.recent_streams(group_name, limit)

    present(
        streams, LogStreamView, json_output=json_output, empty_message="No log streams"
    )
