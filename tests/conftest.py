"""
Pytest Configuration File

Fake browser and HTTP objects shared by the scraper tests.
"""

import os
import sys

import pytest
import requests
from selenium.common.exceptions import NoSuchElementException

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reel_scraper.config import BrowserConfig, ScraperConfig


class FakeElement:
    """Stand-in for a selenium WebElement."""

    def __init__(self, attributes=None, displayed=True):
        self.attributes = attributes or {}
        self.displayed = displayed

    def get_attribute(self, name):
        return self.attributes.get(name)

    def is_displayed(self):
        return self.displayed


class FakeDriver:
    """Records what the scraper asks of the browser."""

    def __init__(self, videos=None, sources=None, page_source='', script_result=None, script_error=None,
                 quit_error=None):
        self.videos = videos or []
        self.sources = sources or []
        self.page_source = page_source
        self.script_result = script_result
        self.script_error = script_error
        self.quit_error = quit_error
        self.implicit_waits = []
        self.lookup_waits = []
        self.visited = []
        self.script_calls = []
        self.quit_count = 0
        self.implicit_wait = None
        self.page_load_timeout = None
        self.script_timeout = None

    def get(self, url):
        self.visited.append(url)

    def find_element(self, by, selector):
        self.lookup_waits.append(self.implicit_wait)
        if selector == 'video' and self.videos:
            return self.videos[0]
        raise NoSuchElementException(f"no element for {selector}")

    def find_elements(self, by, selector):
        if selector == 'video':
            return list(self.videos)
        if selector == 'video, video source':
            return list(self.videos) + list(self.sources)
        return []

    def set_script_timeout(self, seconds):
        self.script_timeout = seconds

    def execute_async_script(self, script, *args):
        self.script_calls.append(args)
        if self.script_error is not None:
            raise self.script_error
        return self.script_result

    def implicitly_wait(self, seconds):
        self.implicit_wait = seconds
        self.implicit_waits.append(seconds)

    def set_page_load_timeout(self, seconds):
        self.page_load_timeout = seconds

    def quit(self):
        self.quit_count += 1
        if self.quit_error is not None:
            raise self.quit_error


class FakeResponse:
    def __init__(self, content=b'', status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Client Error")


class FakeHttpSession:
    """requests.Session replacement returning a canned response."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(b'')
        self.error = error
        self.requests = []

    def get(self, url, headers=None, timeout=None):
        self.requests.append({'url': url, 'headers': headers, 'timeout': timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        pass


@pytest.fixture
def make_driver():
    """Factory for FakeDriver instances."""
    return FakeDriver


@pytest.fixture
def make_element():
    return FakeElement


@pytest.fixture
def make_http():
    def _make(content=b'', status_code=200, error=None):
        return FakeHttpSession(FakeResponse(content, status_code), error)
    return _make


@pytest.fixture
def scraper_config(tmp_path):
    """Fast config writing into a temporary directory."""
    return ScraperConfig(
        browser=BrowserConfig(),
        video_wait_timeout=0.1,
        settle_delay=0,
        download_dir=str(tmp_path / 'downloads'),
        file_prefix='instagram_video',
    )
