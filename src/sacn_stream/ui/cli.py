"""
Command-Line Interface for sacn-stream.

Provides commands for sending test frames, blacking out a universe and
looking up the multicast group of a universe.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

import click

from sacn_stream import __version__
from sacn_stream.core.config import Settings
from sacn_stream.core.exceptions import SACNError
from sacn_stream.core.logging import configure_logging
from sacn_stream.dmx.universe import (
    DMX_CHANNEL_COUNT,
    create_universe_buffer,
    is_valid_dmx_channel,
)
from sacn_stream.e131.addressing import multicast_address
from sacn_stream.sender import SACNSender

# Universe numbers must fit the 16-bit wire field
UNIVERSE_RANGE = click.IntRange(0, 0xFFFF)


def _load_settings(ctx: click.Context, universe: Optional[int]) -> Settings:
    if ctx.obj["config_path"]:
        settings = Settings.from_yaml(ctx.obj["config_path"])
    else:
        settings = Settings.from_env()

    settings.debug = ctx.obj["debug"]
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    if universe is not None:
        settings.sender.universe = universe
    return settings


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]) -> None:
    """
    sacn-stream - E1.31 (sACN) DMX512-A sender

    Streams DMX channel data to lighting equipment as E1.31 data packets
    over UDP multicast or unicast.
    """
    ctx.ensure_object(dict)

    configure_logging("DEBUG" if debug else "INFO")

    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.option("--universe", "-u", type=UNIVERSE_RANGE, default=None, help="Target universe")
@click.option("--channel", "-c", type=int, required=True, help="DMX channel (1-512)")
@click.option("--value", "-v", type=int, required=True, help="Value (0-255)")
@click.option(
    "--count", "-n", type=click.IntRange(min=1), default=1, help="Number of frames to send"
)
@click.option(
    "--fps",
    type=click.FloatRange(min=0, min_open=True),
    default=40.0,
    help="Frames per second",
)
@click.pass_context
def send(
    ctx: click.Context,
    universe: Optional[int],
    channel: int,
    value: int,
    count: int,
    fps: float,
) -> None:
    """Send frames with a single DMX channel set."""
    if not is_valid_dmx_channel(channel):
        click.echo("Error: Channel must be 1-512", err=True)
        sys.exit(1)

    if not 0 <= value <= 255:
        click.echo("Error: Value must be 0-255", err=True)
        sys.exit(1)

    try:
        settings = _load_settings(ctx, universe)
        frame = create_universe_buffer()
        frame[channel] = value
        payload = bytes(frame[1:])

        with SACNSender.from_config(settings) as sender:
            host, port = sender.destination
            click.echo(f"Sending channel {channel}={value} to {host}:{port}...")
            for i in range(count):
                sender.send_dmx_data(payload)
                if i + 1 < count:
                    time.sleep(1.0 / fps)
            click.echo(f"Sent {count} frame(s)")

    except SACNError as e:
        click.echo(f"Error: {e.message}", err=True)
        if ctx.obj["debug"]:
            raise
        sys.exit(1)


@cli.command()
@click.option("--universe", "-u", type=UNIVERSE_RANGE, default=None, help="Target universe")
@click.pass_context
def blackout(ctx: click.Context, universe: Optional[int]) -> None:
    """Send an all-zero frame, then terminate the stream."""
    try:
        settings = _load_settings(ctx, universe)
        zeros = bytes(DMX_CHANNEL_COUNT)

        with SACNSender.from_config(settings) as sender:
            sender.send_dmx_data(zeros)
            sender.terminate_stream(zeros)
            click.echo(f"Universe {sender.universe} blacked out")

    except SACNError as e:
        click.echo(f"Error: {e.message}", err=True)
        if ctx.obj["debug"]:
            raise
        sys.exit(1)


@cli.command()
@click.option("--universe", "-u", type=UNIVERSE_RANGE, required=True, help="Universe number")
def address(universe: int) -> None:
    """Print the multicast group for a universe."""
    click.echo(multicast_address(universe))


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
