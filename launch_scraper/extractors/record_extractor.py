"""Extract game records from a located section.

The storefront renders the same logical field with different class names
depending on which of its internal card variants is used, so every field is
read through an ordered chain of selectors: the first non-empty value wins.
Chains are ordered most-common-first.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from ..core.models import CardSnapshot, Record, Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSelector:
    """One step of a fallback chain.

    Reads the text content of the first element matching ``css`` inside the
    card, or ``attribute`` / DOM ``prop`` of that element when given.
    """
    css: str
    attribute: Optional[str] = None
    prop: Optional[str] = None

    def to_spec(self) -> Dict[str, Optional[str]]:
        return {'css': self.css, 'attribute': self.attribute, 'property': self.prop}


FIELD_CHAINS: Dict[str, Sequence[FieldSelector]] = {
    'name': (
        FieldSelector('div.Epkrse'),
        FieldSelector('div.sT93pb.DdYX5'),
        FieldSelector('div.ubGTjb span.sT93pb.DdYX5'),
    ),
    'category': (
        FieldSelector('div.ubGTjb span.sT93pb.w2kbF'),
        FieldSelector('div.vlGucd span.w2kbF'),
    ),
    'thumbnail_url': (
        FieldSelector('img', prop='src'),
        FieldSelector('img', attribute='data-src'),
    ),
}

# name and url have no default: such cards are rejected
FIELD_DEFAULTS: Dict[str, str] = {
    'category': 'Unknown',
    'thumbnail_url': '',
}


def first_non_empty(values: Iterable[Optional[str]]) -> str:
    """Return the first value that is non-empty after trimming."""
    for value in values:
        if value and value.strip():
            return value.strip()
    return ''


class RecordExtractor:
    """Build records from the card snapshots of a section."""

    def __init__(self, origin: str, chains: Dict[str, Sequence[FieldSelector]] = None):
        self.origin = origin
        self.chains = chains or FIELD_CHAINS

    def field_specs(self) -> Dict[str, List[Dict[str, Optional[str]]]]:
        """Selector chains in the form the in-page snapshot script expects."""
        return {
            name: [selector.to_spec() for selector in chain]
            for name, chain in self.chains.items()
        }

    def extract(self, section: Section) -> List[Record]:
        """
        Extract records from a section snapshot.

        Args:
            section: Located section

        Returns:
            Complete records in document order. Cards without a name or an
            href (decorative links sharing the item href prefix) are skipped.
        """
        records = []
        for card in section.cards:
            record = self._build_record(card)
            if record is not None:
                records.append(record)

        skipped = len(section.cards) - len(records)
        if skipped:
            logger.debug("Skipped %d incomplete cards in '%s'", skipped, section.heading)
        return records

    def _build_record(self, card: CardSnapshot) -> Optional[Record]:
        name = self._resolve(card, 'name')
        href = card.href or ''
        if not name or not href:
            return None

        return Record(
            name=name,
            url=self.origin + href,
            category=self._resolve(card, 'category') or FIELD_DEFAULTS['category'],
            thumbnail_url=self._resolve(card, 'thumbnail_url') or FIELD_DEFAULTS['thumbnail_url'],
        )

    @staticmethod
    def _resolve(card: CardSnapshot, field_name: str) -> str:
        return first_non_empty(card.values.get(field_name, ()))
