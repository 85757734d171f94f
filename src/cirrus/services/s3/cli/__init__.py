import typer

from cirrus.core.commands import require_command
from cirrus.services.s3.cli import buckets

s3_app = typer.Typer(
    help="S3 bucket listing",
    invoke_without_command=True,
    callback=require_command,
)

s3_app.command("buckets")(buckets.list_buckets)
