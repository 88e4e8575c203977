"""Desktop notification interface."""

from __future__ import annotations

import asyncio
import os
from abc import ABC, abstractmethod

from livehook.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


class NotificationError(Exception):
    """The OS notification facility reported a failure."""


class Notifier(ABC):
    @property
    @abstractmethod
    def platform_name(self) -> str: ...

    @property
    @abstractmethod
    def sound_name(self) -> str:
        """Alert sound requested with every notification."""
        ...

    @abstractmethod
    async def notify(self, summary: str, body: str) -> None:
        """Show a notification. Raises NotificationError on failure."""
        ...


class CommandNotifier(Notifier):
    """Notifier that shells out to a platform helper program."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    @abstractmethod
    def build_command(self, summary: str, body: str) -> list[str]: ...

    def build_env(self, summary: str, body: str) -> dict[str, str] | None:
        """Extra environment for the helper, if it reads its input from there."""
        return None

    async def notify(self, summary: str, body: str) -> None:
        args = self.build_command(summary, body)
        extra_env = self.build_env(summary, body)
        env = {**os.environ, **extra_env} if extra_env else None

        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=env,
            )
        except FileNotFoundError as e:
            raise NotificationError(f"Notification helper not found: {args[0]}") from e
        except OSError as e:
            raise NotificationError(f"Failed to start {args[0]}: {e}") from e

        try:
            _, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise NotificationError(
                f"{args[0]} timed out after {self.timeout}s"
            ) from e

        if proc.returncode != 0:
            stderr_str = stderr.decode("utf-8", errors="replace").strip()
            raise NotificationError(
                f"{args[0]} exited with code {proc.returncode}: {stderr_str}"
            )

        log.debug("notification_shown", platform=self.platform_name, helper=args[0])
