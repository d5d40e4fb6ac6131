"""Mock API page controller."""

import logging

from practice_site.fixtures import FixtureLoader
from practice_site.models.api_outcome import ApiOutcome
from practice_site.pages.base import Navigator, PageController

logger = logging.getLogger(__name__)


class ApiPage(PageController):
    """Buttons fetching the fixture records or a scripted failure."""

    path = "/api/"

    def __init__(self, navigator: Navigator, loader: FixtureLoader | None = None):
        super().__init__(navigator)
        self.loader = loader or FixtureLoader()
        self.outcome: ApiOutcome | None = None

    def fetch_users(self) -> ApiOutcome:
        self._require_mounted()
        self.outcome = self.loader.fetch()
        return self.outcome

    def fetch_broken(self) -> ApiOutcome:
        self._require_mounted()
        self.outcome = self.loader.fetch_broken()
        logger.info("Scripted API failure: %s", self.outcome.error)
        return self.outcome

    def on_teardown(self) -> None:
        self.outcome = None
