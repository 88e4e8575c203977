"""Notifier that only logs, for dry runs and headless hosts."""

from __future__ import annotations

from livehook.notifications.base import Notifier
from livehook.utils.logging import get_logger

log = get_logger(__name__)


class LogNotifier(Notifier):
    def __init__(self, sound_name: str = "") -> None:
        self._sound_name = sound_name

    @property
    def platform_name(self) -> str:
        return "log"

    @property
    def sound_name(self) -> str:
        return self._sound_name

    async def notify(self, summary: str, body: str) -> None:
        log.info("dry_run_notification", summary=summary, body=body, sound=self.sound_name)
