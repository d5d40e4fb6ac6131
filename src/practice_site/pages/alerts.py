"""Alerts page controller."""

from practice_site.dialogs import DialogPort, DialogTrigger
from practice_site.pages.base import Navigator, PageController

ALERT_TEXT = "I am a JS Alert"
CONFIRM_TEXT = "I am a JS Confirm"
PROMPT_TEXT = "I am a JS prompt"


class AlertsPage(PageController):
    """Buttons opening an alert, a confirm and a prompt, with a result line."""

    path = "/alerts/"

    def __init__(self, navigator: Navigator, port: DialogPort):
        super().__init__(navigator)
        self.dialogs = DialogTrigger(port)
        self.result_text: str | None = None

    def click_alert(self) -> str:
        self._require_mounted()
        self.dialogs.show_alert(ALERT_TEXT)
        self.result_text = "You successfully clicked an alert"
        return self.result_text

    def click_confirm(self) -> str:
        self._require_mounted()
        accepted = self.dialogs.show_confirm(CONFIRM_TEXT)
        self.result_text = f"You clicked: {'Ok' if accepted else 'Cancel'}"
        return self.result_text

    def click_prompt(self, default_value: str = "") -> str:
        self._require_mounted()
        value = self.dialogs.show_prompt(PROMPT_TEXT, default_value)
        self.result_text = f"You entered: {'null' if value is None else value}"
        return self.result_text

    def on_teardown(self) -> None:
        self.dialogs.last_result = None
        self.result_text = None
