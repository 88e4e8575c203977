"""Shared fixtures: payloads and fake notifiers."""

from __future__ import annotations

import json
from typing import Any

import pytest

from livehook.notifications.base import NotificationError, Notifier


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    @property
    def platform_name(self) -> str:
        return "test"

    @property
    def sound_name(self) -> str:
        return "test-sound"

    async def notify(self, summary: str, body: str) -> None:
        self.calls.append((summary, body))


class FailingNotifier(RecordingNotifier):
    def __init__(self, message: str = "notification daemon unavailable") -> None:
        super().__init__()
        self.message = message

    async def notify(self, summary: str, body: str) -> None:
        self.calls.append((summary, body))
        raise NotificationError(self.message)


def make_payload(
    event_type: str = "StreamStarted",
    room_id: Any = 123,
    title: str = "Hello",
    **extra: Any,
) -> dict[str, Any]:
    payload = {
        "EventType": event_type,
        "EventTimestamp": "t",
        "EventId": "1",
        "EventData": {
            "RoomId": room_id,
            "ShortId": 1,
            "Name": "n",
            "Title": title,
            "AreaNameParent": "A",
            "AreaNameChild": "B",
            "Recording": False,
            "Streaming": True,
            "DanmakuConnected": True,
        },
    }
    payload.update(extra)
    return payload


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def body(payload) -> bytes:
    return json.dumps(payload).encode()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
