"""Newly-launched games scraper.

One run: acquire a browser, load the storefront, reveal content for the whole
cycle budget, then locate the target section once and extract its records.

Usage:
    scraper = NewLaunchScraper(ScraperConfig.from_env())
    outcome = await scraper.scrape()
"""

import logging
from typing import Callable, List, Optional

from ..dynamic.browser_engine import BrowserConfig, PlaywrightEngine
from ..dynamic.revealer import IncrementalRevealer
from ..extractors.record_extractor import RecordExtractor
from ..extractors.section_locator import NEWLY_LAUNCHED_TERMS, SectionLocator, is_newly_launched
from .config import ScraperConfig
from .exceptions import ExtractionAborted
from .models import ExtractionOutcome, HeadingObservation

logger = logging.getLogger(__name__)


class NewLaunchScraper:
    """
    Runs reveal-then-extract against a fresh document driver per call.

    Attributes:
        config: ScraperConfig with target page, timings and selectors
        driver_factory: Returns a new, not yet started, document driver
        predicate: Heading test for the target section
        clock: Monotonic clock handed to the revealer
    """

    def __init__(
        self,
        config: ScraperConfig = None,
        driver_factory: Callable[[], object] = None,
        browser_config: BrowserConfig = None,
        predicate: Callable[[str], bool] = is_newly_launched,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.config = config or ScraperConfig()
        self.browser_config = browser_config or BrowserConfig()
        self.driver_factory = driver_factory or (lambda: PlaywrightEngine(self.browser_config))
        self.predicate = predicate
        self.clock = clock

        self.extractor = RecordExtractor(self.config.layout.origin)
        self.locator = SectionLocator(self.config.layout, self.extractor)

    async def scrape(self) -> ExtractionOutcome:
        """
        Run one extraction.

        Returns:
            ExtractionOutcome (section not found, section empty, or success)

        Raises:
            ExtractionAborted: any failure while loading, revealing or
                extracting. The driver is already released when it is raised.
        """
        logger.info("Starting scraping process...")
        observation = HeadingObservation()
        driver = self.driver_factory()

        try:
            await driver.start()
            return await self._run(driver, observation)
        except ExtractionAborted:
            raise
        except Exception as e:
            aborted = ExtractionAborted.from_exception(e, observation.as_list())
            logger.error("Error during scraping: %s: %s", aborted.kind, aborted.message)
            raise aborted from e
        finally:
            await self._release(driver)

    async def _run(self, driver, observation: HeadingObservation) -> ExtractionOutcome:
        config = self.config
        reveal = config.reveal

        await driver.navigate(
            config.target_url,
            wait_until=config.wait_until,
            timeout_ms=reveal.navigation_deadline_ms,
        )
        logger.info("Waiting for initial load...")
        await driver.sleep(config.initial_wait_ms)

        revealer = IncrementalRevealer(
            driver, reveal, config.layout, target=self.predicate, clock=self.clock
        )
        await revealer.reveal(observation)

        logger.info("Extracting game data...")
        section = await self.locator.locate(driver, self.predicate)
        sections = observation.as_list()

        if section is None:
            logger.info("Newly-launched section not found")
            self._report_near_matches(sections)
            return ExtractionOutcome.not_found(sections)

        records = self.extractor.extract(section)
        if not records:
            logger.info("No games found in newly-launched section")
            return ExtractionOutcome.empty(sections)

        logger.info("Successfully extracted %d games", len(records))
        return ExtractionOutcome.success(records, sections)

    @staticmethod
    def _report_near_matches(sections: List[str]):
        # A heading carrying only part of the target phrase usually means
        # the page changed its wording rather than dropping the section.
        near = [
            heading for heading in sections
            if any(term in heading.lower() for term in NEWLY_LAUNCHED_TERMS)
        ]
        if near:
            logger.warning("Headings partially matching the target: %s", near)

    @staticmethod
    async def _release(driver):
        try:
            await driver.close()
        except Exception as e:
            logger.warning("Driver teardown failed: %s", e)
