import json
from collections.abc import Sequence
from typing import Any, Protocol

import typer
from rich.console import Console

console_err = Console(stderr=True, soft_wrap=True, emoji=False)


class ViewProtocol(Protocol):
    @classmethod
    def format_lines(cls, records: Sequence[Any]) -> list[str]: ...


class LinePresenter:
    """
    Writes records to stdout, one resource per line.

    Status messages go to stderr so that stdout stays pipeable.
    """

    def __init__(self, records: Sequence[Any], view_class: type[ViewProtocol]):
        self.records = records
        self.view_class = view_class

    def print_json(self):
        payload = [record.to_dict() for record in self.records]
        typer.echo(json.dumps(payload, indent=2, default=str))

    def print_text(self, empty_message: str | None = None):
        if not self.records and empty_message:
            console_err.print(f"[bold blue]{empty_message}[/bold blue]")
            return

        for line in self.view_class.format_lines(self.records):
            typer.echo(line)


def present(
    records: Sequence[Any],
    view_class: type[ViewProtocol],
    json_output: bool = False,
    empty_message: str | None = None,
):
    presenter = LinePresenter(records, view_class)
    if json_output:
        presenter.print_json()
    else:
        presenter.print_text(empty_message=empty_message)
