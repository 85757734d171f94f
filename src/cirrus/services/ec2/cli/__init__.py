import typer

from cirrus.core.commands import require_command
from cirrus.services.ec2.cli import instances

ec2_app = typer.Typer(
    help="EC2 instance listing & lifecycle",
    invoke_without_command=True,
    callback=require_command,
)

ec2_app.command("instances")(instances.list_instances)
ec2_app.command("addr")(instances.show_addresses)

STATE_COMMANDS = {
    "start": ("start_instance", "start", "Start an instance."),
    "stop": ("stop_instance", "stop", "Stop an instance."),
}

for cmd_name, (method_name, action, help_text) in STATE_COMMANDS.items():
    ec2_app.command(cmd_name)(
        instances.create_state_command(method_name, action, help_text)
    )

ec2_app.command("reboot")(instances.reboot_instance)
ec2_app.command("terminate")(instances.terminate_instance)
