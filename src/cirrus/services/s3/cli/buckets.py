import typer

from cirrus.core.errors import handle_aws_errors
from cirrus.core.presenter import present
from cirrus.core.session import build_session, setup_logging
from cirrus.services.s3.client import S3Client
from cirrus.services.s3.views import BucketView


def list_buckets(
    verbose: bool = False,
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON"),
    region: str = typer.Option(None, "--region", help="AWS Region to query"),
    profile: str = typer.Option(None, "--profile", help="Named AWS profile to use"),
):
    """
    List buckets.
    """
    setup_logging(verbose)
    with handle_aws_errors("failed to list buckets"):
        client = S3Client(build_session(region, profile))
        buckets = client.list_buckets()

    present(
        buckets, BucketView, json_output=json_output, empty_message="No buckets found"
    )
