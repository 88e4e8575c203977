"""freedesktop.org notifications via notify-send."""

from __future__ import annotations

from livehook.notifications.base import CommandNotifier

APP_NAME = "livehook"


class LinuxNotifier(CommandNotifier):
    @property
    def platform_name(self) -> str:
        return "linux"

    @property
    def sound_name(self) -> str:
        return "message-new-instant"

    def build_command(self, summary: str, body: str) -> list[str]:
        return [
            "notify-send",
            f"--app-name={APP_NAME}",
            f"--hint=string:sound-name:{self.sound_name}",
            "--",
            summary,
            body,
        ]
