"""Browser-driven content reveal.

Components:
    - browser_engine: Playwright document driver
    - revealer: scroll/expand loop for lazy-loaded pages
"""

from .browser_engine import BrowserConfig, PlaywrightEngine
from .revealer import IncrementalRevealer

__all__ = [
    'BrowserConfig',
    'PlaywrightEngine',
    'IncrementalRevealer',
]
