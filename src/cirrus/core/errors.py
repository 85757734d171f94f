import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    NoRegionError,
    ProfileNotFound,
)
from rich.markup import escape

from cirrus.core.presenter import console_err

logger = logging.getLogger(__name__)


@contextmanager
def handle_aws_errors(action: str) -> Iterator[None]:
    """
    Turns SDK failures into a stderr message and a non-zero exit.

    The SDK message is printed verbatim, prefixed with what was being
    attempted (e.g. "failed to list instances").
    """
    try:
        yield
    except NoRegionError as e:
        console_err.print(
            "[bold red]Configuration Error:[/bold red] No AWS region specified."
        )
        console_err.print(
            "Please provide a region using the "
            "[green]--region[/green] flag or set the "
            "[green]AWS_DEFAULT_REGION[/green] environment variable."
        )
        raise typer.Exit(1) from e
    except (NoCredentialsError, ProfileNotFound) as e:
        console_err.print(
            f"[bold red]Credentials Error:[/bold red] {action}: {escape(str(e))}"
        )
        raise typer.Exit(1) from e
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "Unknown")
        logger.debug("AWS Error while trying to %s: %s", action, error_code)
        console_err.print(f"[bold red]AWS Error:[/bold red] {action}: {escape(str(e))}")
        raise typer.Exit(1) from e
    except BotoCoreError as e:
        console_err.print(f"[bold red]Error:[/bold red] {action}: {escape(str(e))}")
        raise typer.Exit(1) from e
