#!/usr/bin/env python3
"""Command-line entrypoints for the Kite MCP tools."""

from __future__ import annotations

import json

import click

from auth import get_session
from dispatcher import Dispatcher, to_json
from logging_config import configure_logging
from market_calendar import get_market_status
from registry import list_tools
from server import TRANSPORTS, run


def parse_argument(raw: str) -> tuple[str, object]:
    """Parse ``key=value``; the value is JSON-decoded when it parses."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise click.BadParameter(f"expected key=value, got {raw!r}")
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", default=None, help="Logging level (defaults to LOG_LEVEL or INFO).")
def cli(log_level: str | None) -> None:
    configure_logging(log_level)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print full input schemas as JSON.")
def tools(as_json: bool) -> None:
    """List the available tools."""
    if as_json:
        click.echo(to_json([
            {"name": t.name, "description": t.description, "inputSchema": t.input_schema()}
            for t in list_tools()
        ]))
        return
    for tool in list_tools():
        click.echo(f"{tool.name}: {tool.description}")


@cli.command()
@click.argument("name")
@click.option("-a", "--arg", "raw_args", multiple=True, help="Tool argument as key=value (repeatable).")
@click.pass_context
def call(ctx: click.Context, name: str, raw_args: tuple[str, ...]) -> None:
    """Invoke a tool and print its text result."""
    arguments = dict(parse_argument(raw) for raw in raw_args)
    session = get_session()
    result = Dispatcher(session.client).invoke(name, arguments)
    click.echo(result.text)
    if result.is_error:
        ctx.exit(1)


@cli.command("market-status")
def market_status() -> None:
    """Show the market session derived from the clock."""
    status = get_market_status()
    click.echo(f"{status['status']}: {status['message']} ({status['timestamp']})")


@cli.command()
@click.option("--transport", type=click.Choice(TRANSPORTS), default="stdio", show_default=True)
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", type=int, default=8000, show_default=True)
@click.option("--path", default="/messages", show_default=True)
def serve(transport: str, host: str, port: int, path: str) -> None:
    """Run the MCP server."""
    run(transport=transport, host=host, port=port, path=path)


if __name__ == "__main__":
    cli()
