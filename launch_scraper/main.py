"""Command line entry point: run one extraction and print the result."""

import argparse
import asyncio
import json
import sys

from .core.config import REVEAL_PRESETS, ScraperConfig
from .core.exceptions import ExtractionAborted
from .core.models import OutcomeStatus
from .core.responses import failure_response, outcome_response
from .core.scraper import NewLaunchScraper
from .dynamic.browser_engine import BrowserConfig
from .utils.log import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Scrape newly-launched games from the Google Play games storefront',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  launch-scraper                      # Standard preset, summary output
  launch-scraper --preset deep        # 30 slower cycles
  launch-scraper --cycles 5 --json    # Quick run, print the JSON body
  launch-scraper --headed             # Watch the browser
        """
    )

    parser.add_argument(
        '--preset',
        choices=sorted(REVEAL_PRESETS),
        default=None,
        help='Reveal timing preset (default: SCRAPER_PRESET or standard)'
    )

    parser.add_argument(
        '--cycles',
        type=int,
        default=None,
        help='Override the number of scroll cycles'
    )

    parser.add_argument(
        '--headed',
        action='store_true',
        help='Show the browser window'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the response body as JSON instead of a summary'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: LOG_LEVEL or INFO)'
    )

    return parser


def main(argv=None) -> int:
    """Main function to run the scraper."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config = ScraperConfig.from_env(preset=args.preset)
    if args.cycles is not None:
        config.reveal.cycle_budget = args.cycles

    if not config.validate():
        print("❌ Invalid configuration, see log for details.")
        return 2

    scraper = NewLaunchScraper(config, browser_config=BrowserConfig(headless=not args.headed))

    try:
        outcome = asyncio.run(scraper.scrape())
    except ExtractionAborted as e:
        code, body = failure_response(e)
        succeeded = False
    else:
        code, body = outcome_response(outcome)
        succeeded = outcome.status is OutcomeStatus.SUCCESS

    if args.json:
        print(json.dumps(body.model_dump(), indent=2, ensure_ascii=False))
    else:
        print_summary(code, body.model_dump())

    return 0 if succeeded else 1


def print_summary(code: int, body: dict):
    print(f"\n{'='*80}")
    if code == 200:
        print(f"✅ Found {body['count']} newly-launched games")
        print(f"{'='*80}\n")
        for game in body['games']:
            print(f"  • {game['name']} [{game['category']}]")
            print(f"    {game['url']}")
    else:
        print(f"❌ {body['error']} ({code})")
        print(f"   {body['message']}")
        print(f"{'='*80}")

    if body.get('sections'):
        print(f"\n📁 Sections seen ({len(body['sections'])}):")
        for heading in body['sections']:
            print(f"   • {heading}")
    print()


if __name__ == "__main__":
    sys.exit(main())
