"""Webhook HTTP server using aiohttp."""

from __future__ import annotations

from aiohttp import web

from livehook.config import Settings
from livehook.notifications.base import Notifier
from livehook.room_filter import RoomFilter
from livehook.utils.logging import get_logger
from livehook.webhooks.errors import BodyReadError, RoutingMismatch, WebhookError
from livehook.webhooks.handlers import decode_event, dispatch_event
from livehook.webhooks.models import Event

log = get_logger(__name__)

WEBHOOK_PATH = "/webhook"


class WebhookServer:
    """Receives recorder webhooks and raises desktop notifications."""

    def __init__(
        self,
        settings: Settings,
        notifier: Notifier,
        room_filter: RoomFilter | None = None,
    ) -> None:
        self._settings = settings
        self._notifier = notifier
        self._room_filter = room_filter
        self._runner: web.AppRunner | None = None

    @property
    def room_filter(self) -> RoomFilter | None:
        return self._room_filter

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        app = self._build_app()
        self._runner = web.AppRunner(
            app,
            shutdown_timeout=self._settings.shutdown_timeout,
        )
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._settings.bind, self._settings.port)
        await site.start()
        log.info(
            "webhook_server_started",
            bind=self._settings.bind,
            port=self._settings.port,
            room_filter=(
                sorted(self._room_filter.room_ids) if self._room_filter is not None else None
            ),
            notifier=self._notifier.platform_name,
        )

    async def stop(self) -> None:
        """Stop accepting connections and drain in-flight requests."""
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
        log.info("webhook_server_stopped")

    # ------------------------------------------------------------------
    # App construction
    # ------------------------------------------------------------------

    def _build_app(self) -> web.Application:
        app = web.Application(client_max_size=self._settings.max_body_size)
        # Catch-all so wrong methods and unknown paths both get an empty 404
        app.router.add_route("*", "/{tail:.*}", self._handle_request)
        return app

    # ------------------------------------------------------------------
    # Request handling
    # ------------------------------------------------------------------

    async def _handle_request(self, request: web.Request) -> web.Response:
        try:
            self._route(request)
            body = await self._read_body(request)
            event = decode_event(body)
            await self._dispatch(event)
        except RoutingMismatch:
            return web.Response(status=404)
        except WebhookError as e:
            log.warning(
                e.log_event,
                error=type(e).__name__,
                status=e.status,
                detail=e.message,
            )
            return web.Response(status=e.status, text=e.message)

        return web.Response(status=200)

    def _route(self, request: web.Request) -> None:
        # Compare the path as sent, so percent-encoded spellings do not match
        if request.method != "POST" or request.rel_url.raw_path != WEBHOOK_PATH:
            raise RoutingMismatch(f"{request.method} {request.rel_url.raw_path}")

    async def _read_body(self, request: web.Request) -> bytes:
        try:
            return await request.read()
        except Exception as e:
            raise BodyReadError(f"{type(e).__name__}: {e}") from e

    async def _dispatch(self, event: Event) -> None:
        log.info(
            "webhook_received",
            event_type=event.event_type,
            event_id=event.event_id,
            room_id=event.event_data.room_id,
        )
        outcome = await dispatch_event(event, self._room_filter, self._notifier)
        log.debug("webhook_dispatched", event_id=event.event_id, outcome=outcome.value)
