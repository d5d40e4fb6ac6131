"""
Page controller base.

Each interactive page gets one controller object, constructed with its
rules and ports, mounted when the page initialises and torn down on
navigation. Nothing is shared between pages.
"""

import logging
from typing import Protocol

from practice_site.errors import PageNotMountedError

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Capability to move the browser to another page."""

    def navigate(self, path: str) -> None: ...


class HistoryNavigator:
    """In-process navigator that records visited paths."""

    def __init__(self, start: str = "/"):
        self.history: list[str] = [start]

    @property
    def current(self) -> str:
        return self.history[-1]

    def navigate(self, path: str) -> None:
        logger.info("Navigating to %s", path)
        self.history.append(path)


class PageController:
    """Base class for page controllers."""

    path: str = "/"

    def __init__(self, navigator: Navigator):
        self.navigator = navigator
        self.mounted = False

    def mount(self) -> "PageController":
        """Initialise the page. Returns self for chaining."""
        self.mounted = True
        logger.debug("Mounted %s", self.path)
        return self

    def teardown(self) -> None:
        """Release page-local state. Safe to call more than once."""
        if self.mounted:
            self.on_teardown()
            self.mounted = False
            logger.debug("Tore down %s", self.path)

    def on_teardown(self) -> None:
        """Hook for subclasses."""

    def navigate(self, path: str) -> None:
        """Leave this page for another one."""
        self.teardown()
        self.navigator.navigate(path)

    def _require_mounted(self) -> None:
        if not self.mounted:
            raise PageNotMountedError(self.path)
