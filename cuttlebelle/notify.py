"""
Desktop notifications for watch-mode builds.

Notifications only make sense while a developer leaves the watcher running in
the background, so they fire only when watch mode is active and the user has
not asked for silence. One-shot builds never notify.

Dispatch is fire-and-forget: the platform notifier is launched as a child
process and never awaited.
"""

import json
import os
import platform
import subprocess
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from .console import err_console
from .state import NotifyConfig

TITLE = "Cuttlebelle"
ICON = os.path.normpath(Path(__file__).parent / "assets" / "logo.png")


def _applescript_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def send_notification(title: str, message: str, icon: str, console: Console | None = None) -> None:
    """Launch the OS notifier for a single message.

    Uses ``notify-send`` on Linux and the BSDs and ``osascript`` on macOS.
    Other platforms are skipped. A notifier that cannot be launched is
    reported as a warning and otherwise ignored.
    """
    system = platform.system()
    if system == "Darwin":
        script = f'display notification "{_applescript_escape(message)}" with title "{_applescript_escape(title)}"'
        command = ["osascript", "-e", script]
    elif system in ("Linux", "FreeBSD", "OpenBSD", "NetBSD"):
        command = ["notify-send", "--icon", icon, title, message]
    else:
        return

    try:
        subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        (console or err_console).print(f"[yellow]Warning: Notification failed ({e})[/yellow]")


class Notify:
    """Gate and dispatch build notifications."""

    def __init__(
        self,
        config: NotifyConfig,
        is_watching: Callable[[], bool],
        send: Callable[[str, str, str], None] = send_notification,
    ):
        self.config = config
        self.is_watching = is_watching
        self.send = send

    def info(self, text: object) -> None:
        """Notify the system, but only while watching and not silenced."""
        if self.config.silent or not self.is_watching():
            return

        if isinstance(text, (dict, list, tuple)):
            message = json.dumps(text, default=str)
        else:
            message = str(text)

        self.send(TITLE, message, ICON)
