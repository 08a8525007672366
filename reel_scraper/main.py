"""
Command-line entry point for the reel scraper.

Usage:
    python -m reel_scraper <instagram_video_url>
    python -m reel_scraper <url> --visible            # Show browser window
    python -m reel_scraper <url> --output-dir videos  # Custom output directory
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .config import BrowserConfig, ScraperConfig, Settings
from .scraper import InstagramVideoScraper
from .utils import PLACEHOLDER_URL, is_valid_target


USAGE = (
    "Usage: python -m reel_scraper <instagram_video_url>\n"
    "Example: python -m reel_scraper https://www.instagram.com/reel/YOUR_VIDEO_ID/"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='reel_scraper',
        description='Download the video from an Instagram post and hand it to AI processing',
    )
    parser.add_argument('url', nargs='?', help='Public Instagram post or reel URL')
    parser.add_argument('--visible', action='store_true',
                        help='Show browser window (default: headless)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory for downloaded videos')
    parser.add_argument('--timeout', type=float, default=15.0,
                        help='Seconds to wait for the video element (default: 15)')
    parser.add_argument('--driver-version', type=str, default=None,
                        help='Pin a chromedriver version, e.g. 120.0.6099.109')
    return parser


def build_config(args: argparse.Namespace, settings: Optional[Settings] = None) -> ScraperConfig:
    """Merge command-line flags over environment settings."""
    settings = settings or Settings()
    browser = BrowserConfig(
        headless=not args.visible,
        driver_version=args.driver_version or settings.reel_driver_version,
    )
    overrides = {'browser': browser, 'video_wait_timeout': args.timeout}
    if args.output_dir:
        overrides['download_dir'] = args.output_dir
    return ScraperConfig.from_settings(settings, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    env_path = Path.cwd() / '.env'
    if env_path.exists():
        load_dotenv(env_path)

    args = build_parser().parse_args(argv)

    if not is_valid_target(args.url):
        print(USAGE)
        return 2

    if args.url == PLACEHOLDER_URL:
        print("WARNING: Using a placeholder Instagram URL. Please provide a real public video URL.")

    scraper = InstagramVideoScraper(build_config(args))
    result = scraper.scrape_and_download(args.url)

    print("\n" + "=" * 60)
    print("SCRAPE COMPLETE" if result.success else "SCRAPE FAILED")
    print("=" * 60)
    print(f"URL:       {result.source_url}")
    if result.video_source:
        print(f"Source:    {result.video_source.kind.value} ({result.video_source.strategy})")
    if result.video_path:
        print(f"File:      {result.video_path} ({result.bytes_written} bytes)")
    if result.error:
        print(f"Error:     {result.error}")
    print(f"Duration:  {result.duration_seconds:.1f}s")

    return 0 if result.success else 1


if __name__ == '__main__':
    sys.exit(main())
