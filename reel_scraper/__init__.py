"""
Instagram reel scraper: locates the video on a post page with a headless
browser, downloads it and hands the file to an AI processing step.
"""

from .config import BrowserConfig, ScraperConfig
from .models import ScrapeResult, SourceKind, VideoSource
from .scraper import InstagramVideoScraper

__all__ = [
    'BrowserConfig',
    'ScraperConfig',
    'ScrapeResult',
    'SourceKind',
    'VideoSource',
    'InstagramVideoScraper',
]
