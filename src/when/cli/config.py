"""Config command - manage configuration."""

from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.syntax import Syntax

from when.cli.main import Context, pass_context

console = Console()

DEFAULT_CONFIG = '''# when configuration

[defaults]
# strftime layout used when no --format is given
format = "%a %b %d %H:%M %Z"
# Semicolon-separated zones; "Local" is the system zone
zones = "Local"
# utc = false
# rfc3339 = false
# seconds = false

# Named phrases, usable in place of EXPR
[aliases]
# standup = "tomorrow at 9:30am"
# payday = "last day of the month at noon"
'''


@click.group()
def config_cmd() -> None:
    """Manage configuration."""
    pass


@config_cmd.command("show")
@pass_context
def show(ctx: Context) -> None:
    """Show current configuration."""
    from when.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path is None:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("Using default settings")
        console.print("\nSearch locations:")
        console.print("  1. ./when.toml")
        console.print("  2. ./pyproject.toml \\[tool.when]")
        console.print("  3. <git root>/when.toml")
        console.print("  4. ~/.config/when/config.toml")
        return

    console.print(f"[bold]Config file:[/bold] {config_path}")
    console.print()

    content = config_path.read_text()
    syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
    console.print(syntax)


@config_cmd.command("init")
@click.option("--global", "-g", "global_config", is_flag=True, help="Create global config")
def init(global_config: bool) -> None:
    """Create a new configuration file."""
    from when.core.config import CONFIG_NAME, user_config_path

    if global_config:
        config_path = user_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        config_path = Path.cwd() / CONFIG_NAME

    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    config_path.write_text(DEFAULT_CONFIG)
    console.print(f"[green]Created {config_path}[/green]")


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to active configuration file."""
    from when.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path:
        console.print(str(config_path), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print("[yellow]No configuration file found[/yellow]")
