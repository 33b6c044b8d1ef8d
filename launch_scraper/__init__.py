"""Newly-launched games scraper for the Google Play games storefront."""

from .core.config import ScraperConfig, RevealConfig, PageLayout
from .core.models import ExtractionOutcome, OutcomeStatus, Record
from .core.exceptions import ExtractionAborted
from .core.scraper import NewLaunchScraper

__version__ = "1.0.0"

__all__ = [
    'ScraperConfig',
    'RevealConfig',
    'PageLayout',
    'ExtractionOutcome',
    'OutcomeStatus',
    'Record',
    'ExtractionAborted',
    'NewLaunchScraper',
]
