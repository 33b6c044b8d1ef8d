"""Configuration management for the scraper."""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class RevealConfig:
    """Timing and budget of the scroll/expand loop."""
    scroll_multiplier: float = 1.0      # viewport heights per scroll
    settle_delay_ms: int = 1000         # wait after each scroll
    expand_cooldown_ms: int = 3000      # min gap between "show more" clicks
    cycle_budget: int = 20              # scroll cycles, no early exit
    navigation_deadline_ms: int = 90000
    expand_settle_ms: int = 3000        # extra wait after a successful click


# The page was tuned three times with different constants; same loop for all.
REVEAL_PRESETS: Dict[str, RevealConfig] = {
    'standard': RevealConfig(),
    'brisk': RevealConfig(
        scroll_multiplier=1.5,
        settle_delay_ms=300,
        expand_cooldown_ms=2000,
        cycle_budget=30,
        navigation_deadline_ms=60000,
        expand_settle_ms=2000,
    ),
    'deep': RevealConfig(
        settle_delay_ms=500,
        expand_cooldown_ms=2000,
        cycle_budget=30,
        expand_settle_ms=2000,
    ),
}


@dataclass
class PageLayout:
    """Structural selectors of the storefront page."""
    origin: str = "https://play.google.com"
    section_selector: str = "section"
    heading_selector: str = "div.kcen6d span"
    item_path_prefix: str = "/store/apps/details"
    expand_candidates: Tuple[str, ...] = ('button', '[role="button"]', '.VfPpkd-LhBDec')
    expand_phrases: Tuple[str, ...] = ('show more', 'see more')
    missing_heading: str = "No heading"

    @property
    def anchor_selector(self) -> str:
        return f'a[href^="{self.item_path_prefix}"]'


def get_preset(name: str) -> RevealConfig:
    """Return a fresh copy of a named reveal preset."""
    try:
        return replace(REVEAL_PRESETS[name])
    except KeyError:
        raise ValueError(
            f"Unknown preset '{name}'. Valid: {sorted(REVEAL_PRESETS)}"
        ) from None


@dataclass
class ScraperConfig:
    """Configuration for the newly-launched games scraper."""

    # Target page
    target_url: str = "https://play.google.com/store/games?device=phone"
    wait_until: str = "domcontentloaded"
    initial_wait_ms: int = 3000

    # Reveal loop
    preset: str = "standard"
    reveal: Optional[RevealConfig] = None

    layout: PageLayout = field(default_factory=PageLayout)

    def __post_init__(self):
        if self.reveal is None:
            self.reveal = get_preset(self.preset)

    @classmethod
    def from_env(cls, preset: Optional[str] = None) -> 'ScraperConfig':
        """
        Build a configuration from SCRAPER_* environment variables.

        Args:
            preset: Preset name taking precedence over SCRAPER_PRESET. The
                per-field SCRAPER_* overrides are applied on top of it.
        """
        config = cls(
            target_url=os.getenv("SCRAPER_TARGET_URL", cls.target_url),
            initial_wait_ms=_env_int("SCRAPER_INITIAL_WAIT_MS", cls.initial_wait_ms),
            preset=preset or os.getenv("SCRAPER_PRESET", cls.preset),
        )
        reveal = config.reveal
        reveal.cycle_budget = _env_int("SCRAPER_CYCLE_BUDGET", reveal.cycle_budget)
        reveal.settle_delay_ms = _env_int("SCRAPER_SETTLE_DELAY_MS", reveal.settle_delay_ms)
        reveal.expand_cooldown_ms = _env_int("SCRAPER_EXPAND_COOLDOWN_MS", reveal.expand_cooldown_ms)
        reveal.navigation_deadline_ms = _env_int(
            "SCRAPER_NAVIGATION_TIMEOUT_MS", reveal.navigation_deadline_ms
        )
        multiplier = os.getenv("SCRAPER_SCROLL_MULTIPLIER")
        if multiplier:
            reveal.scroll_multiplier = float(multiplier)
        return config

    def validate(self) -> bool:
        """Validate configuration."""
        problems = []
        reveal = self.reveal
        if reveal.cycle_budget < 1:
            problems.append("cycle_budget must be at least 1")
        if reveal.scroll_multiplier <= 0:
            problems.append("scroll_multiplier must be positive")
        if min(reveal.settle_delay_ms, reveal.expand_cooldown_ms,
               reveal.expand_settle_ms, self.initial_wait_ms) < 0:
            problems.append("delays must not be negative")
        if reveal.navigation_deadline_ms <= 0:
            problems.append("navigation_deadline_ms must be positive")

        for problem in problems:
            logger.warning("Invalid configuration: %s", problem)
        return not problems


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return int(value)
