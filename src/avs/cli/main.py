"""
avs CLI — `avs` command.

Commands:
  avs inspect [FILE]       Parse a wire message and show its typed form
  avs new <kind>           Build an outbound event or context
"""

import logging

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install avs-messages[cli]")

from avs import __version__

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__)
@click.option(
    "--log-level",
    envvar="AVS_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
def main(log_level: str):
    """AVS message tools — inspect and build protocol messages."""
    _setup_logging(log_level)


# Register subcommands from separate modules
from avs.cli.inspect import inspect_cmd
from avs.cli.new import new

main.add_command(inspect_cmd)
main.add_command(new)


if __name__ == "__main__":
    main()
