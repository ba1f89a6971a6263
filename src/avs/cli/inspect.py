"""CLI: avs inspect"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from avs.errors import DecodeError
from avs.models.message import Message
from avs.transport.envelope import parse_message, serialize_message
from avs.typed import typed

console = Console()


@click.command("inspect")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--json-output", "--json", is_flag=True, help="Print the typed message as wire JSON.")
def inspect_cmd(source, json_output: bool):
    """Parse a wire message and show its typed form."""
    try:
        message = parse_message(source.read())
    except DecodeError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    result = typed(message)
    if json_output:
        click.echo(serialize_message(result).decode())
        return

    kind = "generic" if isinstance(result, Message) else type(result).__name__
    console.print(f"[bold]{escape(message.discriminator())}[/bold] [dim]({kind})[/dim]")

    table = Table("header", "value", show_edge=False)
    for key, value in message.header.items():
        table.add_row(escape(key), escape(value))
    console.print(table)

    if isinstance(result, Message):
        if message.payload is not None:
            console.print(escape(message.payload.decode(errors="replace")))
    else:
        console.print_json(data=result.payload.to_wire())
