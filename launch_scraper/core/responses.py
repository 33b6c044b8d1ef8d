"""Map extraction outcomes to HTTP status codes and response bodies."""

from typing import List, Tuple, Union

from pydantic import BaseModel, Field

from .exceptions import ExtractionAborted
from .models import ExtractionOutcome, OutcomeStatus


ERROR_CODES = {
    'SUCCESS': 200,
    'NOT_FOUND': 404,
    'TIMEOUT': 408,
    'SERVER_ERROR': 500,
}


class GameRecord(BaseModel):
    name: str
    url: str
    category: str = "Unknown"
    thumbnailUrl: str = ""


class ScrapeSuccess(BaseModel):
    code: int = ERROR_CODES['SUCCESS']
    count: int
    games: List[GameRecord]
    sections: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "code": 200,
                "count": 1,
                "games": [{
                    "name": "Example Quest",
                    "url": "https://play.google.com/store/apps/details?id=com.example.quest",
                    "category": "Adventure",
                    "thumbnailUrl": "https://play-lh.googleusercontent.com/example",
                }],
                "sections": ["Top charts", "Newly launched games"],
            }
        }


class ScrapeError(BaseModel):
    code: int
    error: str
    message: str
    sections: List[str] = Field(default_factory=list)


ScrapeBody = Union[ScrapeSuccess, ScrapeError]


def outcome_response(outcome: ExtractionOutcome) -> Tuple[int, ScrapeBody]:
    """Status code and body for a completed run."""
    if outcome.status is OutcomeStatus.SECTION_NOT_FOUND:
        code = ERROR_CODES['NOT_FOUND']
        return code, ScrapeError(
            code=code,
            error="Newly-launched section not found",
            message="Could not locate the newly-launched games section",
            sections=outcome.sections,
        )

    if outcome.status is OutcomeStatus.SECTION_EMPTY:
        code = ERROR_CODES['NOT_FOUND']
        return code, ScrapeError(
            code=code,
            error="No games found",
            message="The newly-launched section was found but no games were extracted",
            sections=outcome.sections,
        )

    code = ERROR_CODES['SUCCESS']
    return code, ScrapeSuccess(
        code=code,
        count=outcome.count,
        games=[GameRecord(**record.to_dict()) for record in outcome.records],
        sections=outcome.sections,
    )


def failure_response(error: ExtractionAborted) -> Tuple[int, ScrapeError]:
    """Status code and body for an aborted run."""
    code = ERROR_CODES['TIMEOUT'] if error.is_timeout else ERROR_CODES['SERVER_ERROR']
    return code, ScrapeError(
        code=code,
        error=error.kind,
        message=error.message,
        sections=error.sections,
    )
