#!/usr/bin/env python3
"""
GridQueue - Command Line Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the queue factory
3. Runs one queue operation against the MCP

All queue logic is in the modules.
"""

import dataclasses
from typing import Optional

import click

from gridqueue.config.provider import EnvConfigProvider
from gridqueue.logging_config import configure_logging
from gridqueue.modules.broker import KnownBrokers
from gridqueue.modules.mcp import QueueError
from gridqueue.modules.queue import MCPQueueFactory, QueueHandle


@click.group()
@click.option("--host", type=str, default=None, help="MCP host, overrides MCP_HOST")
@click.option("--port", type=int, default=None, help="MCP port, overrides MCP_PORT")
@click.pass_context
def cli(ctx: click.Context, host: Optional[str], port: Optional[int]) -> None:
    """Send to, receive from and probe queues through the YaCy Grid MCP."""
    ctx.ensure_object(dict)
    config_provider = EnvConfigProvider()
    configure_logging(config_provider.get_logging_config().level)

    mcp_config = config_provider.get_mcp_config()
    if host is not None:
        mcp_config = dataclasses.replace(mcp_config, host=host)
    if port is not None:
        mcp_config = dataclasses.replace(mcp_config, port=port)

    brokers = KnownBrokers()
    ctx.obj["brokers"] = brokers
    ctx.obj["factory"] = MCPQueueFactory.from_mcp_config(
        mcp_config, brokers, transport=ctx.obj.get("transport")
    )


def _open_queue(ctx: click.Context, key: str) -> QueueHandle:
    queue = ctx.obj["factory"].get_queue(key)
    if queue is None:
        raise click.ClickException(f"Invalid queue key {key!r}, expected <service>_<queue>")
    return queue


def _report_brokers(ctx: click.Context) -> None:
    for address in sorted(ctx.obj["brokers"].addresses):
        click.echo(f"broker: {address}")


@cli.command()
@click.argument("key")
@click.pass_context
def check(ctx: click.Context, key: str) -> None:
    """Check that the MCP is up and the queue is reachable."""
    queue = _open_queue(ctx, key)
    try:
        queue.check_connection()
    except QueueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Queue {key} reachable")
    _report_brokers(ctx)


@cli.command()
@click.argument("key")
@click.argument("message")
@click.pass_context
def send(ctx: click.Context, key: str, message: str) -> None:
    """Send MESSAGE to the queue."""
    queue = _open_queue(ctx, key)
    try:
        queue.send(message.encode("utf-8"))
    except QueueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Message sent to {key}")
    _report_brokers(ctx)


@cli.command()
@click.argument("key")
@click.option("--timeout", type=int, default=10000, help="Maximum wait in milliseconds")
@click.pass_context
def receive(ctx: click.Context, key: str, timeout: int) -> None:
    """Receive one message from the queue."""
    queue = _open_queue(ctx, key)
    try:
        message = queue.receive(timeout)
    except QueueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(message.decode("utf-8", errors="replace"))
    _report_brokers(ctx)


@cli.command()
@click.argument("key")
@click.pass_context
def available(ctx: click.Context, key: str) -> None:
    """Show the number of messages waiting in the queue."""
    queue = _open_queue(ctx, key)
    try:
        count = queue.available()
    except QueueError as e:
        raise click.ClickException(str(e)) from e
    click.echo(str(count))
    _report_brokers(ctx)


if __name__ == "__main__":
    cli()
