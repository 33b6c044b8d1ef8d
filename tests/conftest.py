"""Test configuration for the newly-launched games scraper."""

import asyncio
import inspect
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from launch_scraper.core.config import RevealConfig, ScraperConfig  # noqa: E402

SCRAPER_ENV_VARS = (
    "SCRAPER_TARGET_URL",
    "SCRAPER_PRESET",
    "SCRAPER_INITIAL_WAIT_MS",
    "SCRAPER_CYCLE_BUDGET",
    "SCRAPER_SETTLE_DELAY_MS",
    "SCRAPER_EXPAND_COOLDOWN_MS",
    "SCRAPER_SCROLL_MULTIPLIER",
    "SCRAPER_NAVIGATION_TIMEOUT_MS",
    "BROWSER_EXECUTABLE_PATH",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep developer .env / shell settings out of the tests."""
    for name in SCRAPER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fast_config() -> ScraperConfig:
    """A short run: 4 cycles, 100 ms settle, 300 ms expand cooldown."""
    return ScraperConfig(
        initial_wait_ms=0,
        reveal=RevealConfig(
            scroll_multiplier=1.0,
            settle_delay_ms=100,
            expand_cooldown_ms=300,
            cycle_budget=4,
            navigation_deadline_ms=5000,
            expand_settle_ms=0,
        ),
    )


def pytest_pyfunc_call(pyfuncitem):
    if inspect.iscoroutinefunction(pyfuncitem.obj):
        loop = asyncio.new_event_loop()
        try:
            signature = inspect.signature(pyfuncitem.obj)
            kwargs = {
                name: pyfuncitem.funcargs[name]
                for name in signature.parameters
                if name in pyfuncitem.funcargs
            }
            loop.run_until_complete(pyfuncitem.obj(**kwargs))
        finally:
            loop.close()
        return True
    return None
