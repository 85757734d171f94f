import typer

from cirrus.core.commands import require_command
from cirrus.services.logs.cli import groups

logs_app = typer.Typer(
    help="CloudWatch Logs groups & streams",
    invoke_without_command=True,
    callback=require_command,
)

logs_app.command("groups")(groups.list_groups)
logs_app.command("recent-streams")(groups.recent_streams)
