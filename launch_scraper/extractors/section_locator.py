"""Locate the "newly launched" section of the storefront page."""

import logging
from typing import Any, Callable, Dict, List, Optional

from ..core.config import PageLayout
from ..core.models import CardSnapshot, Section
from .record_extractor import RecordExtractor

logger = logging.getLogger(__name__)


# Both terms must appear, in any order, so phrase reordering still matches
NEWLY_LAUNCHED_TERMS = ('newly', 'launch')

SECTIONS_SCRIPT = """
({sectionSelector, headingSelector, anchorSelector, fields}) => {
    const read = (root, spec) => {
        const element = root.querySelector(spec.css);
        if (!element) return '';
        let value;
        if (spec.property) value = element[spec.property];
        else if (spec.attribute) value = element.getAttribute(spec.attribute);
        else value = element.textContent;
        return value == null ? '' : String(value);
    };
    return Array.from(document.querySelectorAll(sectionSelector)).map(section => {
        const heading = section.querySelector(headingSelector);
        return {
            heading: heading ? (heading.textContent || '') : '',
            cards: Array.from(section.querySelectorAll(anchorSelector)).map(anchor => {
                const values = {};
                for (const [field, chain] of Object.entries(fields)) {
                    values[field] = chain.map(spec => read(anchor, spec));
                }
                return {href: anchor.getAttribute('href'), values};
            }),
        };
    });
}
"""


def is_newly_launched(heading: str) -> bool:
    """Match a lowercase heading such as "newly launched games"."""
    return all(term in heading for term in NEWLY_LAUNCHED_TERMS)


def find_section(sections: List[Section],
                 predicate: Callable[[str], bool] = is_newly_launched) -> Optional[Section]:
    """Return the first section in document order whose heading matches."""
    for section in sections:
        if predicate(section.heading):
            return section
    return None


def parse_sections(raw: Optional[List[Dict[str, Any]]]) -> List[Section]:
    """Convert the in-page snapshot into Section values."""
    sections = []
    for index, item in enumerate(raw or []):
        cards = [
            CardSnapshot(
                href=card.get('href'),
                values={name: list(values) for name, values in (card.get('values') or {}).items()},
            )
            for card in item.get('cards') or []
        ]
        heading = (item.get('heading') or '').strip().lower()
        sections.append(Section(heading=heading, index=index, cards=cards))
    return sections


class SectionLocator:
    """
    Finds a section by its heading in the current document state.

    Every call takes a fresh snapshot: the page restructures while it
    loads, so sections are never cached between calls.
    """

    def __init__(self, layout: PageLayout = None, extractor: RecordExtractor = None):
        self.layout = layout or PageLayout()
        self.extractor = extractor or RecordExtractor(self.layout.origin)

    async def snapshot(self, driver) -> List[Section]:
        """Read all sections, with their candidate cards, in one evaluation."""
        raw = await driver.evaluate(SECTIONS_SCRIPT, {
            'sectionSelector': self.layout.section_selector,
            'headingSelector': self.layout.heading_selector,
            'anchorSelector': self.layout.anchor_selector,
            'fields': self.extractor.field_specs(),
        })
        return parse_sections(raw)

    async def locate(self, driver,
                     predicate: Callable[[str], bool] = is_newly_launched) -> Optional[Section]:
        """
        Locate the first section whose lowercase heading satisfies predicate.

        Returns:
            The matching Section, or None when no section matches. None is a
            normal outcome, not an error.
        """
        sections = await self.snapshot(driver)
        section = find_section(sections, predicate)
        if section is None:
            logger.info("No matching section among %d sections", len(sections))
        else:
            logger.info(
                "Found section '%s' at position %d with %d candidate cards",
                section.heading, section.index, len(section.cards),
            )
        return section
