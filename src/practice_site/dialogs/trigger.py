"""
Dialog trigger.

Opens dialogs through a DialogPort and records the outcome. Because the
port blocks, ``last_result`` is already updated when a show_* call returns.
"""

import logging

from practice_site.dialogs.ports import DialogPort
from practice_site.models.dialog_result import DialogKind, DialogResult

logger = logging.getLogger(__name__)


class DialogTrigger:
    """Opens dialogs and remembers the most recent result."""

    def __init__(self, port: DialogPort):
        self._port = port
        self.last_result: DialogResult | None = None

    def show_alert(self, message: str) -> None:
        self._port.alert(message)
        self._record(DialogResult(kind=DialogKind.ALERT, message=message, accepted=True))

    def show_confirm(self, message: str) -> bool:
        accepted = bool(self._port.confirm(message))
        self._record(DialogResult(kind=DialogKind.CONFIRM, message=message, accepted=accepted))
        return accepted

    def show_prompt(self, message: str, default_value: str = "") -> str | None:
        value = self._port.prompt(message, default_value)
        self._record(
            DialogResult(
                kind=DialogKind.PROMPT,
                message=message,
                accepted=value is not None,
                input_value=value,
            )
        )
        return value

    def _record(self, result: DialogResult) -> None:
        self.last_result = result
        logger.debug("%s dialog closed (accepted=%s)", result.kind.value, result.accepted)
