"""Event decoding and notification dispatch."""

from __future__ import annotations

from enum import Enum

from pydantic import ValidationError

from livehook.notifications.base import NotificationError, Notifier
from livehook.room_filter import RoomFilter, to_filter_id
from livehook.utils.logging import get_logger
from livehook.webhooks.errors import DecodeError, DispatchError
from livehook.webhooks.models import Event

log = get_logger(__name__)

NOTIFICATION_SUMMARY = "Live start"


class DispatchOutcome(str, Enum):
    NOT_APPLICABLE = "not_applicable"
    SUPPRESSED = "suppressed"
    DISPATCHED = "dispatched"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_event(body: bytes) -> Event:
    """Parse a raw request body into an Event.

    Raises DecodeError with the validator's diagnostic on malformed JSON,
    invalid UTF-8, missing fields, or type mismatches.
    """
    try:
        return Event.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def format_notification_body(event: Event) -> str:
    data = event.event_data
    return f"Room {data.room_id} started live stream.\n\n{data.title}"


async def dispatch_event(
    event: Event, room_filter: RoomFilter | None, notifier: Notifier
) -> DispatchOutcome:
    """Raise a desktop notification for stream-start events that pass the filter."""
    if not event.is_stream_start:
        return DispatchOutcome.NOT_APPLICABLE

    room_id = event.event_data.room_id
    if room_filter is not None and not room_filter.allows(room_id):
        log.info(
            "notification_suppressed",
            room_id=room_id,
            filter_id=to_filter_id(room_id),
            event_type=event.event_type,
        )
        return DispatchOutcome.SUPPRESSED

    try:
        await notifier.notify(NOTIFICATION_SUMMARY, format_notification_body(event))
    except NotificationError as e:
        raise DispatchError(str(e)) from e

    log.info(
        "notification_sent",
        room_id=room_id,
        title=event.event_data.title,
        platform=notifier.platform_name,
    )
    return DispatchOutcome.DISPATCHED
