"""Dynamic content page controller."""

from practice_site.config import get_config
from practice_site.dynamic import DynamicContentController, Scheduler
from practice_site.pages.base import Navigator, PageController

CONTENT_BLOCK = "Hello World! This content was loaded dynamically."


class DynamicPage(PageController):
    """Page with a button that loads a content block after a delay."""

    path = "/dynamic/"

    def __init__(
        self,
        navigator: Navigator,
        scheduler: Scheduler,
        content: str = CONTENT_BLOCK,
        delay: float | None = None,
        jitter: float | None = None,
    ):
        super().__init__(navigator)
        config = get_config()
        self.controller = DynamicContentController(
            content,
            scheduler,
            delay=config.dynamic_delay if delay is None else delay,
            jitter=config.dynamic_jitter if jitter is None else jitter,
        )

    def click_load(self) -> bool:
        self._require_mounted()
        return self.controller.trigger()

    @property
    def visible_text(self) -> str | None:
        """What the region currently shows."""
        if self.controller.indicator_visible:
            return "Loading..."
        if self.controller.content_visible:
            return self.controller.content
        return None

    def on_teardown(self) -> None:
        self.controller.reset()
