"""
Entry Point.
This is the root of the CLI command tree. It should not contain business logic.
It aggregates the per-service sub-applications into the main Typer app.
"""

import typer

from cirrus.core.commands import require_command
from cirrus.services.ec2.cli import ec2_app
from cirrus.services.logs.cli import logs_app
from cirrus.services.s3.cli import s3_app

app = typer.Typer(
    help="Cirrus: AWS command-line tool",
    invoke_without_command=True,
    callback=require_command,
)
app.add_typer(ec2_app, name="ec2")
app.add_typer(logs_app, name="logs")
app.add_typer(s3_app, name="s3")

if __name__ == "__main__":
    app()
