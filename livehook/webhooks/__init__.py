"""Webhook receiving: routing, decoding and dispatch."""

from livehook.webhooks.errors import (
    BodyReadError,
    DecodeError,
    DispatchError,
    RoutingMismatch,
    WebhookError,
)
from livehook.webhooks.handlers import DispatchOutcome, decode_event, dispatch_event
from livehook.webhooks.models import STREAM_START_EVENTS, Event, EventData
from livehook.webhooks.server import WebhookServer

__all__ = [
    "BodyReadError",
    "DecodeError",
    "DispatchError",
    "RoutingMismatch",
    "WebhookError",
    "DispatchOutcome",
    "decode_event",
    "dispatch_event",
    "STREAM_START_EVENTS",
    "Event",
    "EventData",
    "WebhookServer",
]
