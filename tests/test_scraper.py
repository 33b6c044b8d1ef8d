"""End-to-end runs of the scraper against the fake driver."""

import pytest

from launch_scraper.core.exceptions import ExtractionAborted
from launch_scraper.core.models import OutcomeStatus
from launch_scraper.core.scraper import NewLaunchScraper
from tests.fakes import DETAILS, FakeDriver, make_card, make_section


def scraper_for(driver, config) -> NewLaunchScraper:
    return NewLaunchScraper(config, driver_factory=lambda: driver, clock=driver.clock)


async def test_section_absent_reports_observed_headings(fast_config):
    driver = FakeDriver(sections=[make_section("Top charts"), make_section("Editor's choice")])

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SECTION_NOT_FOUND
    assert outcome.sections == ["Top charts", "Editor's choice"]
    assert outcome.records == []
    assert driver.closed


async def test_document_without_sections(fast_config):
    driver = FakeDriver()

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SECTION_NOT_FOUND
    assert outcome.sections == []


async def test_decorative_anchor_is_skipped(fast_config):
    driver = FakeDriver(sections=[
        make_section("Top charts"),
        make_section("Newly launched games", cards=[
            make_card(href=DETAILS + "com.example.rally", name="Rally Legends", category="Racing"),
            make_card(href=DETAILS + "com.example.rally", names=["", "", ""]),
        ]),
    ])

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SUCCESS
    assert outcome.count == 1
    assert outcome.records[0].name == "Rally Legends"
    assert outcome.records[0].url == "https://play.google.com/store/apps/details?id=com.example.rally"
    assert outcome.sections == ["Top charts", "Newly launched games"]


async def test_section_with_only_unlinked_cards_is_empty(fast_config):
    driver = FakeDriver(sections=[
        make_section("Newly launched", cards=[make_card(href=None, name="A"), make_card(href="", name="B")]),
    ])

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SECTION_EMPTY
    assert outcome.sections == ["Newly launched"]


async def test_unresolvable_category_defaults_to_unknown(fast_config):
    driver = FakeDriver(sections=[
        make_section("Newly launched games", cards=[make_card(name="Mystery Box", categories=["", ""])]),
    ])

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SUCCESS
    assert outcome.records[0].category == "Unknown"


async def test_section_loaded_late_is_still_found(fast_config):
    driver = FakeDriver(
        sections=[
            make_section("Top charts"),
            make_section("Newly launched games", cards=[make_card(name="Late Arrival")], after_scrolls=4),
        ],
        buttons=["Show more"],
    )

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SUCCESS
    assert [r.name for r in outcome.records] == ["Late Arrival"]
    assert driver.clicks >= 1


async def test_navigation_timeout_aborts_with_timeout_kind(fast_config):
    driver = FakeDriver(navigation_timeout=True)

    with pytest.raises(ExtractionAborted) as excinfo:
        await scraper_for(driver, fast_config).scrape()

    assert excinfo.value.kind == "TimeoutError"
    assert excinfo.value.is_timeout
    assert excinfo.value.sections == []
    assert driver.scrolls == []
    assert driver.closed


async def test_mid_loop_failure_keeps_partial_headings_and_releases_driver(fast_config):
    driver = FakeDriver(sections=[make_section("Top charts")], fail_on_scroll=3)

    with pytest.raises(ExtractionAborted) as excinfo:
        await scraper_for(driver, fast_config).scrape()

    assert excinfo.value.kind == "EvaluationFailure"
    assert not excinfo.value.is_timeout
    assert excinfo.value.sections == ["Top charts"]
    assert driver.closed


async def test_teardown_failure_does_not_mask_success(fast_config):
    driver = FakeDriver(
        sections=[make_section("Newly launched", cards=[make_card(name="Kept")])],
        close_error=RuntimeError("browser already gone"),
    )

    outcome = await scraper_for(driver, fast_config).scrape()

    assert outcome.status is OutcomeStatus.SUCCESS
    assert driver.closed


async def test_teardown_failure_does_not_mask_primary_error(fast_config):
    driver = FakeDriver(navigation_timeout=True, close_error=RuntimeError("browser already gone"))

    with pytest.raises(ExtractionAborted) as excinfo:
        await scraper_for(driver, fast_config).scrape()

    assert excinfo.value.kind == "TimeoutError"


async def test_navigation_uses_configured_target_and_deadline(fast_config):
    driver = FakeDriver()
    fast_config.initial_wait_ms = 250

    await scraper_for(driver, fast_config).scrape()

    assert driver.started
    assert driver.navigations == [
        ("https://play.google.com/store/games?device=phone", "domcontentloaded", 5000),
    ]
    assert driver.sleeps[0] == 250
    assert len(driver.scrolls) == fast_config.reveal.cycle_budget


async def test_each_run_gets_its_own_driver_and_headings(fast_config):
    drivers = [
        FakeDriver(sections=[make_section("Top charts")]),
        FakeDriver(sections=[make_section("Editor's choice")]),
    ]
    pending = list(drivers)
    scraper = NewLaunchScraper(fast_config, driver_factory=lambda: pending.pop(0))

    first = await scraper.scrape()
    second = await scraper.scrape()

    assert first.sections == ["Top charts"]
    assert second.sections == ["Editor's choice"]
    assert all(d.closed for d in drivers)
