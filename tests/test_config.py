"""Configuration presets and environment overrides."""

import pytest

from launch_scraper.core.config import REVEAL_PRESETS, RevealConfig, ScraperConfig, get_preset


def test_default_config_uses_standard_preset():
    config = ScraperConfig()

    assert config.preset == "standard"
    assert config.reveal == REVEAL_PRESETS["standard"]
    assert config.reveal.cycle_budget == 20
    assert config.layout.anchor_selector == 'a[href^="/store/apps/details"]'


def test_presets_stay_within_tuned_ranges():
    for reveal in REVEAL_PRESETS.values():
        assert 1.0 <= reveal.scroll_multiplier <= 1.5
        assert 300 <= reveal.settle_delay_ms <= 1000
        assert 2000 <= reveal.expand_cooldown_ms <= 3000
        assert 20 <= reveal.cycle_budget <= 30


def test_get_preset_returns_a_copy():
    reveal = get_preset("deep")
    reveal.cycle_budget = 1

    assert REVEAL_PRESETS["deep"].cycle_budget == 30


def test_unknown_preset():
    with pytest.raises(ValueError):
        ScraperConfig(preset="turbo")


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("SCRAPER_PRESET", "brisk")
    monkeypatch.setenv("SCRAPER_CYCLE_BUDGET", "7")
    monkeypatch.setenv("SCRAPER_SCROLL_MULTIPLIER", "1.25")
    monkeypatch.setenv("SCRAPER_NAVIGATION_TIMEOUT_MS", "45000")
    monkeypatch.setenv("SCRAPER_INITIAL_WAIT_MS", "0")

    config = ScraperConfig.from_env()

    assert config.preset == "brisk"
    assert config.reveal.cycle_budget == 7
    assert config.reveal.scroll_multiplier == 1.25
    assert config.reveal.navigation_deadline_ms == 45000
    assert config.reveal.settle_delay_ms == REVEAL_PRESETS["brisk"].settle_delay_ms
    assert config.initial_wait_ms == 0
    assert REVEAL_PRESETS["brisk"].cycle_budget == 30


def test_validate():
    assert ScraperConfig().validate()
    assert not ScraperConfig(reveal=RevealConfig(cycle_budget=0)).validate()
    assert not ScraperConfig(reveal=RevealConfig(scroll_multiplier=0)).validate()
    assert not ScraperConfig(initial_wait_ms=-1).validate()


def test_explicit_preset_keeps_env_overrides(monkeypatch):
    monkeypatch.setenv("SCRAPER_PRESET", "brisk")
    monkeypatch.setenv("SCRAPER_CYCLE_BUDGET", "3")

    config = ScraperConfig.from_env(preset="deep")

    assert config.preset == "deep"
    assert config.reveal.cycle_budget == 3
    assert config.reveal.settle_delay_ms == REVEAL_PRESETS["deep"].settle_delay_ms
    assert REVEAL_PRESETS["deep"].cycle_budget == 30
