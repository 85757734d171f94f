import re

import typer

from cirrus.core.errors import handle_aws_errors
from cirrus.core.presenter import present
from cirrus.core.session import build_session, setup_logging
from cirrus.services.ec2.client import EC2Client
from cirrus.services.ec2.views import AddressView, InstanceListView, StateChangeView

INSTANCE_ID_PATTERN = re.compile(r"^i-[0-9a-f]{8,17}$")


def validate_instance_id(value: str) -> str:
    if not INSTANCE_ID_PATTERN.match(value):
        raise typer.BadParameter(
            f"'{value}' is not an EC2 instance id (expected i-xxxxxxxx)."
        )
    return value


def instance_id_argument():
    return typer.Argument(
        ...,
        metavar="INSTANCE_ID",
        help="EC2 instance id, e.g. i-0123456789abcdef0",
        callback=validate_instance_id,
    )


def list_instances(
    verbose: bool = False,
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    List instances.
    """
    setup_logging(verbose)
    with handle_aws_errors("failed to list instances"):
        client = EC2Client(build_session(region, profile))
        instances = client.list_instances()

    present(
        instances,
        InstanceListView,
        json_output=json_output,
        empty_message="No instances found",
    )


def show_addresses(
    instance_id: str = instance_id_argument(),
    verbose: bool = False,
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    Show an instance's IP address(es).
    """
    setup_logging(verbose)
    with handle_aws_errors("failed to get instance details"):
        client = EC2Client(build_session(region, profile))
        addresses = client.get_addresses(instance_id)

    present(addresses, AddressView, json_output=json_output)


def create_state_command(method_name: str, action: str, command_help_text: str):
    """
    Factory function to generate the start/stop commands.
    """

    def command(
        instance_id: str = instance_id_argument(),
        verbose: bool = False,
        region: str = typer.Option(None, "--region", help="AWS Region to query"),
        profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
    ):
        setup_logging(verbose)
        with handle_aws_errors(f"failed to {action} instance"):
            client = EC2Client(build_session(region, profile))
            changes = getattr(client, method_name)(instance_id)

        present(changes, StateChangeView)

    command.__doc__ = command_help_text
    return command


def terminate_instance(
    instance_id: str = instance_id_argument(),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation"),
    verbose: bool = False,
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    Terminate an instance.
    """
    if not yes:
        typer.confirm(f"Terminate {instance_id}? This cannot be undone", abort=True)

    setup_logging(verbose)
    with handle_aws_errors("failed to terminate instance"):
        client = EC2Client(build_session(region, profile))
        changes = client.terminate_instance(instance_id)

    present(changes, StateChangeView)


def reboot_instance(
    instance_id: str = instance_id_argument(),
    verbose: bool = False,
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    Reboot an instance.
    """
    setup_logging(verbose)
    with handle_aws_errors("failed to reboot instance"):
        client = EC2Client(build_session(region, profile))
        client.reboot_instance(instance_id)

    typer.echo(f"{instance_id} rebooting")
