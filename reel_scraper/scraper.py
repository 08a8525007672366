"""
Instagram video scraper.
Loads a post page in a headless browser, locates the video, downloads it and
passes the file on to an AI processor.
"""

import time
from datetime import datetime
from typing import Callable, Optional

import requests
from selenium.common.exceptions import WebDriverException

from .ai_handoff import PlaceholderVideoProcessor, VideoProcessor
from .blob_extractor import extract_blob
from .browser import browser_session
from .config import BrowserConfig, ScraperConfig
from .downloader import fetch_video, save_video
from .exceptions import InvalidTargetError, ScraperError, VideoNotFoundError
from .locator import locate_video
from .models import ScrapeResult, VideoSource
from .navigator import load_page
from .utils import is_valid_target


class InstagramVideoScraper:
    """Scrape-and-download flow for a single post URL per run."""

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        processor: Optional[VideoProcessor] = None,
        driver_factory: Optional[Callable[[BrowserConfig], object]] = None,
        http_session: Optional[requests.Session] = None,
    ):
        """
        Initialize the scraper.

        Args:
            config: ScraperConfig instance, uses defaults if None
            processor: AI hand-off, defaults to PlaceholderVideoProcessor
            driver_factory: Replaces browser.open_session (used by tests)
            http_session: requests session for direct downloads
        """
        self.config = config or ScraperConfig()
        self.processor = processor or PlaceholderVideoProcessor()
        self.driver_factory = driver_factory
        self.http_session = http_session
        self.driver = None

    def scrape_and_download(self, url: str) -> ScrapeResult:
        """
        Run the whole flow for one post URL.

        Never raises for expected failures; the reason is printed and stored
        on ``ScrapeResult.error``. The browser is closed on every path.
        """
        start = time.time()
        result = ScrapeResult(
            success=False,
            source_url=url,
            started_at=datetime.now().isoformat(),
        )

        try:
            if not is_valid_target(url):
                raise InvalidTargetError(f"Invalid URL (expected http:// or https://): {url!r}")

            print(f"Starting video scraping for: {url}")
            with browser_session(self.config.browser, self.driver_factory) as driver:
                self.driver = driver
                self._download(driver, url, result)
        except ScraperError as e:
            result.error = str(e)
            print(f"Error: {e}")
        except WebDriverException as e:
            result.error = f"Selenium WebDriver error: {e.msg or e}"
            print(result.error)
            print("Ensure you have a compatible browser (e.g., Chrome) and its driver installed.")
        finally:
            self.driver = None

        if result.video_path and result.error is None:
            result.processing = self.processor.process(result.video_path)
            result.success = True

        return self._finish(result, start)

    def _download(self, driver, url: str, result: ScrapeResult):
        """Navigate, locate and save the video, filling in ``result``."""
        load_page(
            driver,
            url,
            timeout=self.config.video_wait_timeout,
            settle_delay=self.config.settle_delay,
            implicit_wait=self.config.browser.implicit_wait,
        )

        source = locate_video(driver)
        if source is None:
            raise VideoNotFoundError(
                "No video found on the page, or could not extract video URL. "
                "Make sure the URL is a public video post."
            )
        result.video_source = source

        data = self._fetch(driver, source)
        path = save_video(data, self.config.download_dir, self.config.file_prefix)

        result.video_path = str(path)
        result.bytes_written = len(data)
        print(f"Video downloaded to: {path}")

    def _fetch(self, driver, source: VideoSource) -> bytes:
        if source.is_blob:
            print(f"Found dynamic video URL (blob): {source.url}")
            return extract_blob(driver, source.url)

        print(f"Found direct video URL: {source.url[:100]}")
        return fetch_video(
            source.url,
            session=self.http_session,
            timeout=self.config.download_timeout,
            user_agent=self.config.browser.user_agent,
        )

    def _finish(self, result: ScrapeResult, start: float) -> ScrapeResult:
        result.completed_at = datetime.now().isoformat()
        result.duration_seconds = time.time() - start
        return result
