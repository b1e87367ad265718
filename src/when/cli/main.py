"""Main CLI entry point using rich-click."""

import logging
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

# Global console for Rich output
console = Console()

# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: bool = False

pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Log tokens and resolution steps",
)
@click.version_option(package_name="when-parser")
@pass_context
def cli(ctx: Context, config: Optional[Path], verbose: bool) -> None:
    """Natural-language date and time calculator.

    Resolve phrases such as "4th of next month", "2nd Tuesday of March at noon" or
    "1y 2M from now" to an absolute time.
    """
    ctx.config_path = config
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from when.cli.parse import parse_cmd
from when.cli.config import config_cmd

cli.add_command(parse_cmd, name="parse")
cli.add_command(config_cmd, name="config")


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
