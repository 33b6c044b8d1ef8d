"""Browser automation engine backing the document driver."""

import asyncio
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from playwright.async_api import (
    Error as PlaywrightError,
    TimeoutError as PlaywrightTimeoutError,
    async_playwright,
)

from ..core.exceptions import EvaluationFailure, NavigationTimeout, OperationTimeout

logger = logging.getLogger(__name__)


DEFAULT_LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-dev-shm-usage',
    '--disable-accelerated-2d-canvas',
    '--disable-gpu',
    '--no-first-run',
    '--no-zygote',
    '--disable-extensions',
]


@dataclass
class BrowserConfig:
    """Configuration for browser execution."""
    headless: bool = True
    launch_timeout: int = 30000  # ms
    viewport: Dict = field(default_factory=lambda: {'width': 1280, 'height': 720})
    user_agent: str = (
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    )
    launch_args: List[str] = field(default_factory=lambda: list(DEFAULT_LAUNCH_ARGS))
    executable_path: Optional[str] = field(
        default_factory=lambda: os.getenv("BROWSER_EXECUTABLE_PATH") or None
    )
    # Not needed to read the DOM, and they dominate page weight
    blocked_resource_types: Tuple[str, ...] = ('image', 'stylesheet', 'font', 'media')


class PlaywrightEngine:
    """
    Rendered-document handle on top of Playwright.

    One engine owns one browser, one context and one page. It is not safe to
    share between concurrent extraction runs; every run starts its own.
    Playwright failures are translated into the scraper's error types.
    """

    def __init__(self, config: BrowserConfig = None):
        self.config = config or BrowserConfig()
        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

    async def start(self):
        """Launch the browser and open a page."""
        logger.info("Launching browser...")
        self.playwright = await async_playwright().start()

        self.browser = await self.playwright.chromium.launch(
            headless=self.config.headless,
            args=self.config.launch_args,
            executable_path=self.config.executable_path,
            timeout=self.config.launch_timeout,
        )

        self.context = await self.browser.new_context(
            viewport=self.config.viewport,
            user_agent=self.config.user_agent,
        )
        if self.config.blocked_resource_types:
            await self.context.route("**/*", self._filter_request)

        self.page = await self.context.new_page()
        self.page.on("pageerror", self._log_page_error)
        logger.info("✓ Browser ready")

    async def navigate(self, url: str, wait_until: str = "domcontentloaded",
                       timeout_ms: int = 90000):
        """
        Navigate to URL.

        Args:
            url: Target URL
            wait_until: When to consider navigation successful
                - "domcontentloaded": Fast, waits for DOM to be ready (recommended)
                - "load": Waits for page load event
                - "networkidle": Waits for no network activity (may time out)
            timeout_ms: Navigation deadline

        Raises:
            NavigationTimeout: the deadline expired before the page loaded
        """
        logger.info("Navigating to %s", url)
        try:
            await self.page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeout(
                f"Navigation timeout of {timeout_ms} ms exceeded for {url}"
            ) from e
        logger.info("  ✓ Loaded: %s", url)

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Run a function inside the page and return its JSON result."""
        try:
            return await self.page.evaluate(script, arg)
        except PlaywrightTimeoutError as e:
            raise OperationTimeout(str(e)) from e
        except PlaywrightError as e:
            raise EvaluationFailure(str(e)) from e

    async def viewport_height(self) -> float:
        return await self.evaluate("() => window.innerHeight")

    async def scroll_by(self, delta: float):
        await self.evaluate("(dy) => window.scrollBy(0, dy)", delta)

    async def sleep(self, ms: int):
        await asyncio.sleep(ms / 1000)

    async def close(self):
        """
        Close browser and cleanup.

        Every step runs even when an earlier one fails, so a crashed page
        cannot leave the browser process behind. The first failure is
        re-raised once all steps have run.
        """
        logger.info("Closing browser...")
        steps = [
            ('page', self.page and self.page.close),
            ('context', self.context and self.context.close),
            ('browser', self.browser and self.browser.close),
            ('playwright', self.playwright and self.playwright.stop),
        ]
        self.page = self.context = self.browser = self.playwright = None

        first_error = None
        for name, step in steps:
            if not step:
                continue
            try:
                await step()
            except Exception as e:
                logger.warning("  ✗ Closing %s failed: %s", name, e)
                if first_error is None:
                    first_error = e

        if first_error is not None:
            raise first_error
        logger.info("✓ Browser cleanup complete")

    async def _filter_request(self, route):
        if route.request.resource_type in self.config.blocked_resource_types:
            await route.abort()
        else:
            await route.continue_()

    @staticmethod
    def _log_page_error(error):
        logger.warning("Page error: %s", error)
