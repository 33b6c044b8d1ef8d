"""Error types raised while driving the storefront page."""

from typing import List, Optional


class ScraperError(Exception):
    """Base class for scraper failures."""


class OperationTimeout(ScraperError):
    """A browser operation exceeded its deadline."""
    kind = "TimeoutError"


class NavigationTimeout(OperationTimeout):
    """The initial page load exceeded its deadline."""


class EvaluationFailure(ScraperError):
    """A script evaluation inside the page threw."""


def error_kind(error: BaseException) -> str:
    """Name reported to callers for a failure."""
    kind = getattr(error, 'kind', None)
    if kind:
        return kind
    if isinstance(error, TimeoutError):
        return "TimeoutError"
    return type(error).__name__


class ExtractionAborted(ScraperError):
    """A run was aborted by a failure after the driver was released.

    Carries the headings observed before the abort for diagnostics.
    """

    def __init__(self, kind: str, message: str, sections: Optional[List[str]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.sections = list(sections or [])

    @classmethod
    def from_exception(cls, error: BaseException, sections: List[str]) -> 'ExtractionAborted':
        if isinstance(error, ExtractionAborted):
            return error
        return cls(error_kind(error), str(error), sections)

    @property
    def is_timeout(self) -> bool:
        return self.kind == "TimeoutError"
