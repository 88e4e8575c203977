"""Desktop notification backends, one per platform."""

from livehook.config import Settings
from livehook.notifications.base import CommandNotifier, NotificationError, Notifier
from livehook.notifications.linux import LinuxNotifier
from livehook.notifications.log import LogNotifier
from livehook.notifications.macos import MacOSNotifier
from livehook.notifications.windows import WindowsNotifier
from livehook.utils.platform import get_platform

__all__ = [
    "CommandNotifier",
    "NotificationError",
    "Notifier",
    "LinuxNotifier",
    "LogNotifier",
    "MacOSNotifier",
    "WindowsNotifier",
    "create_notifier",
]

_PLATFORM_NOTIFIERS: dict[str, type[CommandNotifier]] = {
    "linux": LinuxNotifier,
    "macos": MacOSNotifier,
    "windows": WindowsNotifier,
}


def create_notifier(settings: Settings, platform: str | None = None) -> Notifier:
    """Factory to create the notifier for this host from config."""
    platform = platform or get_platform()
    notifier_cls = _PLATFORM_NOTIFIERS.get(platform, LinuxNotifier)
    if settings.dry_run:
        return LogNotifier(sound_name=notifier_cls(settings.notify_timeout).sound_name)
    return notifier_cls(timeout=settings.notify_timeout)
