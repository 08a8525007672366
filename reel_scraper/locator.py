"""
Video source discovery on a loaded page.

Each strategy inspects the page and returns a VideoSource or None. They are
tried in order and the first hit wins, so explicit signals (the player's own
src attribute) beat best-effort text scanning of the markup.
"""

from typing import Callable, List, Optional

from bs4 import BeautifulSoup
from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.common.by import By

from .models import SourceKind, VideoSource
from .utils import find_video_urls, has_video_extension, is_blob_url


VIDEO_META_PROPERTIES = ('og:video', 'og:video:url', 'og:video:secure_url')

Strategy = Callable[[object], Optional[VideoSource]]


def _primary_video_src(driver) -> Optional[str]:
    try:
        element = driver.find_element(By.CSS_SELECTOR, 'video')
        return element.get_attribute('src') or None
    except (NoSuchElementException, StaleElementReferenceException):
        return None


def primary_direct_source(driver) -> Optional[VideoSource]:
    """Player src attribute, when it is a normal network address."""
    src = _primary_video_src(driver)
    if src and not is_blob_url(src):
        return VideoSource(SourceKind.DIRECT, src, 'primary_src')
    return None


def primary_blob_source(driver) -> Optional[VideoSource]:
    """Player src attribute, when it is an in-page blob handle."""
    src = _primary_video_src(driver)
    if src and is_blob_url(src):
        return VideoSource(SourceKind.BLOB, src, 'primary_blob')
    return None


def video_element_sources(driver) -> Optional[VideoSource]:
    """Any video (or nested source) element pointing at a video file."""
    elements = driver.find_elements(By.CSS_SELECTOR, 'video, video source')
    print(f"  Found {len(elements)} video/source elements")
    for element in elements:
        try:
            src = element.get_attribute('src')
        except StaleElementReferenceException:
            continue
        if src and not is_blob_url(src) and has_video_extension(src):
            return VideoSource(SourceKind.DIRECT, src, 'video_elements')
    return None


def page_source_scan(driver) -> Optional[VideoSource]:
    """
    Regex scan of the rendered markup for URLs ending in a video extension.

    Best-effort only: a match is not checked for reachability and may belong
    to a different post embedded on the same page.
    """
    markup = driver.page_source or ''
    urls = find_video_urls(markup)
    print(f"  Page source length: {len(markup)}, video URLs found: {len(urls)}")
    if urls:
        return VideoSource(SourceKind.DIRECT, urls[0], 'page_source')
    return None


def meta_tag_source(driver) -> Optional[VideoSource]:
    """Open Graph video tags whose content names a video file."""
    soup = BeautifulSoup(driver.page_source or '', 'html.parser')
    for prop in VIDEO_META_PROPERTIES:
        for meta in soup.find_all('meta', property=prop):
            content = meta.get('content', '')
            if has_video_extension(content):
                return VideoSource(SourceKind.DIRECT, content, 'meta_tag')
    return None


LOCATOR_STRATEGIES: List[Strategy] = [
    primary_direct_source,
    primary_blob_source,
    video_element_sources,
    page_source_scan,
    meta_tag_source,
]


def locate_video(driver, strategies: Optional[List[Strategy]] = None) -> Optional[VideoSource]:
    """
    Find the video source on the current page.

    Args:
        driver: Browser session with the post page loaded
        strategies: Ordered strategy functions, defaults to LOCATOR_STRATEGIES

    Returns:
        VideoSource from the first matching strategy, or None if none match
    """
    for strategy in strategies or LOCATOR_STRATEGIES:
        source = strategy(driver)
        if source is not None:
            print(f"  Video source ({source.kind.value}) via {source.strategy}: {source.url[:100]}")
            return source
    return None
