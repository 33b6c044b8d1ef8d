# launch_scraper/extractors/__init__.py
"""Section location and record extraction."""

from .record_extractor import RecordExtractor, FieldSelector
from .section_locator import SectionLocator, is_newly_launched

__all__ = ['RecordExtractor', 'FieldSelector', 'SectionLocator', 'is_newly_launched']
