"""macOS Notification Center via osascript."""

from __future__ import annotations

from livehook.notifications.base import CommandNotifier

# Text is passed as script arguments so it never needs AppleScript quoting
_SCRIPT = (
    "on run argv",
    "display notification (item 2 of argv) with title (item 1 of argv) "
    "sound name (item 3 of argv)",
    "end run",
)


class MacOSNotifier(CommandNotifier):
    @property
    def platform_name(self) -> str:
        return "macos"

    @property
    def sound_name(self) -> str:
        return "Submarine"

    def build_command(self, summary: str, body: str) -> list[str]:
        args = ["osascript"]
        for line in _SCRIPT:
            args.extend(["-e", line])
        args.extend([summary, body, self.sound_name])
        return args
