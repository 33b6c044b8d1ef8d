"""
FastAPI wrapper for the newly-launched games scraper
"""

import logging
import os
import resource
import time
from datetime import datetime, timezone

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from launch_scraper.core.config import ScraperConfig
from launch_scraper.core.exceptions import ExtractionAborted
from launch_scraper.core.responses import (
    ERROR_CODES,
    ScrapeError,
    ScrapeSuccess,
    failure_response,
    outcome_response,
)
from launch_scraper.core.scraper import NewLaunchScraper
from launch_scraper.utils.log import configure_logging

configure_logging()
logger = logging.getLogger("launch_scraper.api")


# ============================================================
# APP INITIALIZATION
# ============================================================

app = FastAPI(
    title="Newly Launched Games Scraper API",
    description="Extract newly-launched games from the Google Play games storefront",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

STARTED_AT = time.monotonic()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=ERROR_CODES['SERVER_ERROR'],
        content={
            "code": ERROR_CODES['SERVER_ERROR'],
            "error": "Internal Server Error",
            "message": str(exc),
        },
    )


def get_scraper() -> NewLaunchScraper:
    """One scraper, and so one browser, per request."""
    return NewLaunchScraper(ScraperConfig.from_env())


# ============================================================
# API ENDPOINTS
# ============================================================

@app.get("/")
def read_root():
    return {
        "message": "Google Play Scraper API Running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "memory": {"maxRssKb": usage.ru_maxrss},
    }


@app.get(
    "/scrape-new-games",
    response_model=ScrapeSuccess,
    responses={
        404: {"model": ScrapeError, "description": "Section missing or empty"},
        408: {"model": ScrapeError, "description": "Page load timed out"},
        500: {"model": ScrapeError, "description": "Scraping failed"},
    },
)
async def scrape_new_games(scraper: NewLaunchScraper = Depends(get_scraper)):
    """
    Scrape the newly-launched games section.

    Scrolls the storefront for the configured number of cycles, then
    extracts every game card of the "newly launched" section. The body
    always lists the section headings seen while scrolling.
    """
    try:
        outcome = await scraper.scrape()
    except ExtractionAborted as e:
        code, body = failure_response(e)
    else:
        code, body = outcome_response(outcome)

    return JSONResponse(status_code=code, content=body.model_dump())


# ============================================================
# ENTRY POINT
# ============================================================

if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 3000)),
        reload=False,
    )
