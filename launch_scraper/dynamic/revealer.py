"""Incremental content reveal for lazy-loaded, infinitely-scrolling pages.

Algorithm (per cycle, for a fixed number of cycles):
    1. Scroll by one viewport height (times a multiplier)
    2. Wait for lazy content to settle
    3. If the expand cooldown has elapsed, click the first "show more" control
    4. Sweep all section headings into the run's observation set

There is no early exit when the target section shows up: its record count
may still be growing, so the whole budget is always spent.
Failures are not caught here; they abort the run.
"""

import logging
import time
from typing import Callable, List, Optional

from ..core.config import PageLayout, RevealConfig
from ..core.models import HeadingObservation, RenderCycle

logger = logging.getLogger(__name__)


EXPAND_SCRIPT = """
({candidates, phrases}) => {
    for (const selector of candidates) {
        for (const element of document.querySelectorAll(selector)) {
            const text = (element.textContent || '').toLowerCase();
            if (phrases.some(phrase => text.includes(phrase))) {
                element.click();
                return true;
            }
        }
    }
    return false;
}
"""

HEADINGS_SCRIPT = """
({sectionSelector, headingSelector, placeholder}) => {
    return Array.from(document.querySelectorAll(sectionSelector)).map(section => {
        const heading = section.querySelector(headingSelector);
        const text = heading && heading.textContent ? heading.textContent.trim() : '';
        return text || placeholder;
    });
}
"""


class IncrementalRevealer:
    """
    Drives scroll and expand interactions against a document driver.

    Args:
        driver: Document driver (see PlaywrightEngine)
        config: Timing and budget of the loop
        layout: Page selectors
        target: Optional heading predicate, only used to log when the
            target section first appears
        clock: Monotonic clock in seconds, used for the expand cooldown
    """

    def __init__(
        self,
        driver,
        config: RevealConfig,
        layout: PageLayout = None,
        target: Optional[Callable[[str], bool]] = None,
        clock: Callable[[], float] = None,
    ):
        self.driver = driver
        self.config = config
        self.layout = layout or PageLayout()
        self.target = target
        self.clock = clock or time.monotonic

    async def reveal(self, observation: HeadingObservation,
                     budget: Optional[int] = None) -> List[RenderCycle]:
        """
        Run the scroll/expand loop for ``budget`` cycles.

        Args:
            observation: Heading set of the current run, updated in place
            budget: Cycle count (defaults to config.cycle_budget)

        Returns:
            The cycles that were run, in order
        """
        budget = self.config.cycle_budget if budget is None else budget
        cycles: List[RenderCycle] = []
        last_expand: Optional[float] = None
        target_seen = False

        for index in range(budget):
            logger.debug("Scroll %d/%d", index + 1, budget)

            delta = (await self.driver.viewport_height()) * self.config.scroll_multiplier
            await self.driver.scroll_by(delta)
            await self.driver.sleep(self.config.settle_delay_ms)
            waited = self.config.settle_delay_ms

            expanded = False
            now = self.clock()
            if last_expand is None or (now - last_expand) * 1000 >= self.config.expand_cooldown_ms:
                expanded = await self._expand()
                if expanded:
                    logger.info('Clicked "Show more" control (cycle %d)', index + 1)
                    last_expand = now
                    await self.driver.sleep(self.config.expand_settle_ms)
                    waited += self.config.expand_settle_ms

            headings = await self._sweep_headings()
            observation.update(headings)

            if self.target and not target_seen:
                if any(self.target(heading.lower()) for heading in headings):
                    target_seen = True
                    logger.info("Target section visible at cycle %d/%d", index + 1, budget)

            cycles.append(RenderCycle(index, delta, expanded, waited))

        logger.info("Reveal finished: %d cycles, %d headings seen", len(cycles), len(observation))
        return cycles

    async def _expand(self) -> bool:
        clicked = await self.driver.evaluate(EXPAND_SCRIPT, {
            'candidates': list(self.layout.expand_candidates),
            'phrases': list(self.layout.expand_phrases),
        })
        return bool(clicked)

    async def _sweep_headings(self) -> List[str]:
        headings = await self.driver.evaluate(HEADINGS_SCRIPT, {
            'sectionSelector': self.layout.section_selector,
            'headingSelector': self.layout.heading_selector,
            'placeholder': self.layout.missing_heading,
        })
        return list(headings or [])
