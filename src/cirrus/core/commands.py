import typer


def require_command(ctx: typer.Context):
    """
    Group callback: shows the group's help and fails when no verb was given.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(2)
