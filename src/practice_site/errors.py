"""Exceptions raised by the practice site package."""


class PracticeSiteError(Exception):
    """Base class for practice site errors."""


class PageNotMountedError(PracticeSiteError):
    """A page action was invoked outside the page's mounted lifetime."""

    def __init__(self, path: str):
        super().__init__(f"Page {path} is not mounted")
        self.path = path


class DialogScriptError(PracticeSiteError):
    """A scripted dialog port was asked for a response it does not have."""


class FixtureError(PracticeSiteError):
    """The mock API fixture is missing or malformed."""
