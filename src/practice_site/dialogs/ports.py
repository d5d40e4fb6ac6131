"""
Dialog ports.

Native alert/confirm/prompt dialogs are blocking calls. The DialogPort
protocol captures them as a synchronous capability so page logic can run
without a browser.
"""

from collections import deque
from typing import Protocol

from practice_site.errors import DialogScriptError
from practice_site.models.dialog_result import DialogKind


class DialogPort(Protocol):
    """Blocking dialog capability. Each call returns once the user responds."""

    def alert(self, message: str) -> None: ...

    def confirm(self, message: str) -> bool: ...

    def prompt(self, message: str, default: str = "") -> str | None: ...


class ScriptedDialogPort:
    """
    Headless dialog port answering from queued responses.

    Usage:
        port = ScriptedDialogPort()
        port.queue_confirm(False)
        port.queue_prompt("Alice")
        page = AlertsPage(port, navigator)
    """

    def __init__(self):
        self._confirms: deque[bool] = deque()
        self._prompts: deque[str | None] = deque()
        self.shown: list[tuple[DialogKind, str]] = []

    def queue_confirm(self, accepted: bool) -> None:
        self._confirms.append(accepted)

    def queue_prompt(self, value: str | None) -> None:
        """Queue text for the next prompt; None means the user cancels."""
        self._prompts.append(value)

    def alert(self, message: str) -> None:
        self.shown.append((DialogKind.ALERT, message))

    def confirm(self, message: str) -> bool:
        self.shown.append((DialogKind.CONFIRM, message))
        if not self._confirms:
            raise DialogScriptError(f"No scripted answer for confirm: {message!r}")
        return self._confirms.popleft()

    def prompt(self, message: str, default: str = "") -> str | None:
        self.shown.append((DialogKind.PROMPT, message))
        if not self._prompts:
            raise DialogScriptError(f"No scripted answer for prompt: {message!r}")
        return self._prompts.popleft()
