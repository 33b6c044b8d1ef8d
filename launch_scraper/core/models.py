"""Data model for one extraction run.

Everything here is a plain value: snapshots of document state are copied out
of the page by a single evaluation and never refer back to live nodes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional


@dataclass(frozen=True)
class Record:
    """One newly-launched game."""
    name: str
    url: str
    category: str = "Unknown"
    thumbnail_url: str = ""

    def to_dict(self) -> Dict[str, str]:
        """Serialize using the public JSON field names."""
        return {
            'name': self.name,
            'url': self.url,
            'category': self.category,
            'thumbnailUrl': self.thumbnail_url,
        }


@dataclass
class RenderCycle:
    """One scroll + optional expand + settle iteration."""
    index: int
    scroll_delta: float
    expanded: bool
    waited_ms: int


class HeadingObservation:
    """Distinct section headings seen across the cycles of one run."""

    def __init__(self, headings: Iterable[str] = ()):
        # dict keeps first-seen order for the response body
        self._seen: Dict[str, None] = {}
        self.update(headings)

    def add(self, heading: str):
        self._seen.setdefault(heading, None)

    def update(self, headings: Iterable[str]):
        for heading in headings:
            self.add(heading)

    def as_list(self) -> List[str]:
        return list(self._seen)

    def __contains__(self, heading: object) -> bool:
        return heading in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._seen)

    def __len__(self) -> int:
        return len(self._seen)


@dataclass
class CardSnapshot:
    """Raw values read from one candidate anchor.

    ``values`` maps a field name to the values produced by each selector of
    that field's fallback chain, in chain order.
    """
    href: Optional[str]
    values: Dict[str, List[str]] = field(default_factory=dict)


@dataclass
class Section:
    """A top-level content region located by its heading."""
    heading: str  # normalized lowercase
    index: int
    cards: List[CardSnapshot] = field(default_factory=list)


class OutcomeStatus(Enum):
    """How an extraction run ended."""
    SECTION_NOT_FOUND = "section_not_found"
    SECTION_EMPTY = "section_empty"
    SUCCESS = "success"


@dataclass
class ExtractionOutcome:
    """Tagged result of a completed run, with the heading diagnostics."""
    status: OutcomeStatus
    sections: List[str]
    records: List[Record] = field(default_factory=list)

    @classmethod
    def not_found(cls, sections: List[str]) -> 'ExtractionOutcome':
        return cls(OutcomeStatus.SECTION_NOT_FOUND, list(sections))

    @classmethod
    def empty(cls, sections: List[str]) -> 'ExtractionOutcome':
        return cls(OutcomeStatus.SECTION_EMPTY, list(sections))

    @classmethod
    def success(cls, records: List[Record], sections: List[str]) -> 'ExtractionOutcome':
        return cls(OutcomeStatus.SUCCESS, list(sections), list(records))

    @property
    def count(self) -> int:
        return len(self.records)
