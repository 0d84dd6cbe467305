"""Best-effort desktop notifications."""

import logging
import shutil
import subprocess
import sys
from typing import Protocol

from ..config import Settings

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "Godspeed CLI"


class Notifier(Protocol):
    """Shows a short message to the user. Never raises."""

    def notify(self, message: str) -> None: ...


class NullNotifier:
    """Notifier that only logs."""

    def notify(self, message: str) -> None:
        logger.debug(f"Notification suppressed: {message}")


class OsascriptNotifier:
    """Send macOS notification."""

    def notify(self, message: str) -> None:
        escaped = message.replace('"', '\\"')
        script = f'display notification "{escaped}" with title "{NOTIFICATION_TITLE}"'
        try:
            subprocess.run(
                ["osascript", "-e", script],
                capture_output=True,
                timeout=5,
            )
        except Exception as e:
            logger.warning(f"Failed to send notification: {e}")


class NotifySendNotifier:
    """Send a freedesktop notification via notify-send."""

    def notify(self, message: str) -> None:
        try:
            subprocess.run(
                ["notify-send", NOTIFICATION_TITLE, message],
                capture_output=True,
                timeout=5,
            )
        except Exception as e:
            logger.warning(f"Failed to send notification: {e}")


def build_notifier(settings: Settings) -> Notifier:
    """Pick a notifier for the current platform."""
    if not settings.notifications:
        return NullNotifier()
    if sys.platform == "darwin":
        return OsascriptNotifier()
    if shutil.which("notify-send"):
        return NotifySendNotifier()
    return NullNotifier()
