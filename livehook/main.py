"""livehook entry point: wires config, notifier and server together."""

from __future__ import annotations

import asyncio
import signal
import sys

import click
from pydantic import ValidationError

from livehook import __version__
from livehook.config import Settings, load_settings
from livehook.notifications import create_notifier
from livehook.utils.logging import get_logger, setup_logging
from livehook.webhooks.server import WebhookServer

log = get_logger(__name__)


def build_server(settings: Settings) -> WebhookServer:
    """Build the server with its notifier and the startup-time room filter."""
    room_filter = settings.room_filter()
    if settings.roomid_filter and room_filter is None:
        log.warning("room_filter_empty", raw=settings.roomid_filter)
    return WebhookServer(settings, create_notifier(settings), room_filter)


async def run(settings: Settings) -> None:
    server = build_server(settings)

    loop = asyncio.get_running_loop()
    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        log.info("shutdown_signal")
        stop_event.set()

    if sys.platform != "win32":
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, _signal_handler)

    log.info("livehook_starting", version=__version__, dry_run=settings.dry_run)
    await server.start()

    try:
        if sys.platform == "win32":
            while not stop_event.is_set():
                await asyncio.sleep(1)
        else:
            await stop_event.wait()
    except KeyboardInterrupt:
        pass
    finally:
        await server.stop()


@click.command()
@click.option("--port", type=int, default=None, help="Webhook listen port (default 25550)")
@click.option("--bind", default=None, help="Listen address (default all interfaces)")
@click.option(
    "--roomid-filter",
    default=None,
    help="Comma-separated room IDs; only these rooms trigger notifications",
)
@click.option("--config", "config_path", default=None, help="Path to config YAML file")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--dry-run", is_flag=True, default=False, help="Log notifications instead of showing them")
@click.version_option(__version__)
def cli(
    port: int | None,
    bind: str | None,
    roomid_filter: str | None,
    config_path: str | None,
    log_level: str | None,
    dry_run: bool,
) -> None:
    """Show a desktop notification when a watched live stream starts."""
    try:
        settings = load_settings(
            config_path,
            port=port,
            bind=bind,
            roomid_filter=roomid_filter,
            log_level=log_level,
            dry_run=dry_run or None,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration:\n{e}") from e

    setup_logging(level=settings.log_level, json_output=settings.log_json)
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
