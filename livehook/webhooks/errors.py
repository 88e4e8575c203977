"""Request pipeline errors, each mapped to an HTTP status by the server."""

from __future__ import annotations


class WebhookError(Exception):
    status: int = 500
    log_event: str = "webhook_failed"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class RoutingMismatch(WebhookError):
    """Anything other than POST /webhook."""

    status = 404


class BodyReadError(WebhookError):
    log_event = "webhook_body_read_failed"


class DecodeError(WebhookError):
    log_event = "webhook_decode_failed"


class DispatchError(WebhookError):
    log_event = "webhook_dispatch_failed"
