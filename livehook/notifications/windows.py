"""Windows toast notifications via PowerShell and the WinRT toast API."""

from __future__ import annotations

from livehook.notifications.base import CommandNotifier

# PowerShell's own AppUserModelID, always registered, so toasts are displayed
_APP_ID = r"{1AC14E77-02E7-4E5D-B744-2EB1AE5198B7}\WindowsPowerShell\v1.0\powershell.exe"

_SUMMARY_VAR = "LIVEHOOK_NOTIFY_SUMMARY"
_BODY_VAR = "LIVEHOOK_NOTIFY_BODY"


def _toast_script(sound: str) -> str:
    return "\n".join([
        "[Windows.UI.Notifications.ToastNotificationManager, Windows.UI.Notifications, ContentType = WindowsRuntime] | Out-Null",
        "[Windows.Data.Xml.Dom.XmlDocument, Windows.Data.Xml.Dom.XmlDocument, ContentType = WindowsRuntime] | Out-Null",
        "$xml = New-Object Windows.Data.Xml.Dom.XmlDocument",
        "$xml.LoadXml('<toast><visual><binding template=\"ToastGeneric\"><text/><text/></binding></visual>"
        f"<audio src=\"ms-winsoundevent:Notification.{sound}\"/></toast>')",
        "$texts = $xml.GetElementsByTagName('text')",
        f"$texts.Item(0).AppendChild($xml.CreateTextNode($env:{_SUMMARY_VAR})) | Out-Null",
        f"$texts.Item(1).AppendChild($xml.CreateTextNode($env:{_BODY_VAR})) | Out-Null",
        "$toast = [Windows.UI.Notifications.ToastNotification]::new($xml)",
        f"[Windows.UI.Notifications.ToastNotificationManager]::CreateToastNotifier('{_APP_ID}').Show($toast)",
    ])


class WindowsNotifier(CommandNotifier):
    @property
    def platform_name(self) -> str:
        return "windows"

    @property
    def sound_name(self) -> str:
        return "Mail"

    def build_command(self, summary: str, body: str) -> list[str]:
        return [
            "powershell",
            "-NoProfile",
            "-NonInteractive",
            "-Command",
            _toast_script(self.sound_name),
        ]

    def build_env(self, summary: str, body: str) -> dict[str, str] | None:
        # Text goes through the environment to avoid PowerShell quoting
        return {_SUMMARY_VAR: summary, _BODY_VAR: body}
