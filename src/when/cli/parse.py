"""Parse command - resolve a phrase and print it in one or more zones."""

import sys
from datetime import datetime, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import rich_click as click
from rich.console import Console
from tzlocal import get_localzone

from when.cli.main import Context, pass_context

console = Console()
err_console = Console(stderr=True)

DEFAULT_FORMAT = "%a %b %d %H:%M %Z"
LOCAL_ZONE = "Local"


def _load_zone(name: str) -> tzinfo:
    """Resolve a zone name; ``Local`` is the system zone."""
    if name == LOCAL_ZONE:
        return get_localzone()
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def _reference_time(value: Optional[str]) -> datetime:
    if value is None:
        return datetime.now(get_localzone())
    try:
        reference = datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Not an ISO 8601 time: {value}", param_hint="'--now'")
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=get_localzone())
    return reference


def _error(message: str) -> None:
    err_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expr", nargs=-1)
@click.option("--utc", "-u", is_flag=True, help="Output as UTC")
@click.option("--format", "-f", "fmt", help=f"strftime layout (default: {DEFAULT_FORMAT})")
@click.option("--zones", "-l", help="Semicolon-separated time zones to output (default: Local)")
@click.option("--seconds", "-s", is_flag=True, help="Output as Unix time in seconds")
@click.option("--rfc-3339", "rfc3339", is_flag=True, help="Output in RFC 3339 format")
@click.option("--now", "now", metavar="ISO", help="Reference time instead of the current time")
@pass_context
def parse_cmd(
    ctx: Context,
    expr: Tuple[str, ...],
    utc: bool,
    fmt: Optional[str],
    zones: Optional[str],
    seconds: bool,
    rfc3339: bool,
    now: Optional[str],
) -> None:
    """Resolve EXPR to an absolute time.

    EXPR is joined with spaces, so quoting is optional:

        when parse on Tuesday at noon

        when parse "1y 2M from Jan 5th at 4pm"

    An empty EXPR prints the current time.
    """
    from when.core.config import load_config
    from when.core.exceptions import ConfigError, WhenError
    from when.core.parser import parse_at

    try:
        config = load_config(ctx.config_path)
    except ConfigError as e:
        _error(str(e))
        sys.exit(1)

    # Command line overrides config defaults
    utc = utc or bool(config.get_default("utc", False))
    seconds = seconds or bool(config.get_default("seconds", False))
    rfc3339 = rfc3339 or bool(config.get_default("rfc3339", False))
    fmt = fmt or config.get_default("format", DEFAULT_FORMAT)
    zones = zones or config.get_default("zones", LOCAL_ZONE)

    phrase = config.resolve_alias(" ".join(expr))
    reference = _reference_time(now)

    try:
        result = parse_at(phrase, reference)
    except WhenError as e:
        _error(str(e))
        sys.exit(1)

    if seconds:
        console.print(str(int(result.timestamp())), markup=False, highlight=False)
        return

    if isinstance(zones, list):
        # config may list zones as a TOML array
        zones = ";".join(zones)
    names = ["UTC"] if utc else [z.strip() for z in zones.split(";") if z.strip()]
    for name in names:
        try:
            zone = _load_zone(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            _error(f"unknown time zone {name!r}: {e}")
            continue

        local = result.astimezone(zone)
        if rfc3339:
            text = local.isoformat(timespec="seconds")
        else:
            text = local.strftime(fmt)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
