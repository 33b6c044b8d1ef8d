# launch_scraper/core/__init__.py
"""Core scraper components."""

from .config import ScraperConfig, RevealConfig, PageLayout, REVEAL_PRESETS
from .exceptions import (
    ScraperError,
    OperationTimeout,
    NavigationTimeout,
    EvaluationFailure,
    ExtractionAborted,
)
from .models import Record, Section, ExtractionOutcome, OutcomeStatus, HeadingObservation

__all__ = [
    'ScraperConfig',
    'RevealConfig',
    'PageLayout',
    'REVEAL_PRESETS',
    'ScraperError',
    'OperationTimeout',
    'NavigationTimeout',
    'EvaluationFailure',
    'ExtractionAborted',
    'Record',
    'Section',
    'ExtractionOutcome',
    'OutcomeStatus',
    'HeadingObservation',
]
