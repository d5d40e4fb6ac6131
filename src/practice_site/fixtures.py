"""
Mock API fixture.

The API demo page fetches ``api/fakeapi.json`` from the static site. There
is no query or filter logic: the records are returned as stored.
"""

import json
import logging
from pathlib import Path
from typing import Any

from practice_site.config import get_config
from practice_site.errors import FixtureError
from practice_site.models.api_outcome import ApiOutcome

logger = logging.getLogger(__name__)

FIXTURE_RELATIVE_PATH = Path("api") / "fakeapi.json"

# Outcome of the API page's "broken endpoint" button
SCRIPTED_FAILURE = ApiOutcome(ok=False, status=500, error="Internal Server Error")


class FixtureLoader:
    """Reads the fake API fixture from a site directory."""

    def __init__(self, site_dir: str | Path | None = None):
        site_dir = Path(site_dir or get_config().site_dir)
        self.path = site_dir / FIXTURE_RELATIVE_PATH

    def read_text(self) -> str:
        """Raw fixture content, served verbatim."""
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise FixtureError(f"Cannot read fixture {self.path}: {e}") from e

    def records(self) -> list[dict[str, Any]]:
        """Parse the fixture into a list of record objects."""
        try:
            data = json.loads(self.read_text())
        except json.JSONDecodeError as e:
            raise FixtureError(f"Fixture {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise FixtureError(f"Fixture {self.path} must be a JSON array of objects")

        logger.debug("Loaded %d fixture records from %s", len(data), self.path)
        return data

    def fetch(self) -> ApiOutcome:
        """Successful fake request returning every record."""
        return ApiOutcome(ok=True, status=200, records=self.records())

    def fetch_broken(self) -> ApiOutcome:
        """Fake request that always fails."""
        return SCRIPTED_FAILURE
