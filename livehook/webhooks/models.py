"""Webhook event models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

# Wire room IDs are signed 64-bit integers
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

STREAM_STARTED = "StreamStarted"
SESSION_STARTED = "SessionStarted"

STREAM_START_EVENTS: frozenset[str] = frozenset({STREAM_STARTED, SESSION_STARTED})

_WIRE_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    populate_by_name=True,
)


class EventData(BaseModel):
    model_config = _WIRE_CONFIG

    room_id: StrictInt = Field(alias="RoomId", ge=INT64_MIN, le=INT64_MAX)
    short_id: StrictInt = Field(alias="ShortId", ge=INT64_MIN, le=INT64_MAX)
    name: StrictStr = Field(alias="Name")
    title: StrictStr = Field(alias="Title")
    area_name_parent: StrictStr = Field(alias="AreaNameParent")
    area_name_child: StrictStr = Field(alias="AreaNameChild")
    recording: StrictBool = Field(alias="Recording")
    streaming: StrictBool = Field(alias="Streaming")
    danmaku_connected: StrictBool = Field(alias="DanmakuConnected")


class Event(BaseModel):
    """A decoded recorder webhook payload."""

    model_config = _WIRE_CONFIG

    event_type: StrictStr = Field(alias="EventType")
    event_timestamp: StrictStr = Field(alias="EventTimestamp")
    event_id: StrictStr = Field(alias="EventId")
    event_data: EventData = Field(alias="EventData")

    @property
    def is_stream_start(self) -> bool:
        return self.event_type in STREAM_START_EVENTS

    def to_wire(self) -> str:
        """Serialize back to the recorder's JSON shape."""
        return self.model_dump_json(by_alias=True)
