"""
Shared utility functions for the scraper.
"""

import re
from typing import List


VIDEO_EXTENSIONS = ('mp4', 'mov', 'avi', 'webm')

BLOB_PREFIX = 'blob:'

VIDEO_URL_PATTERN = re.compile(
    r'https?://[^"\'\s<>]+\.(?:' + '|'.join(VIDEO_EXTENSIONS) + r')\b',
    re.IGNORECASE,
)

PLACEHOLDER_URL = "https://www.instagram.com/p/C8y4z2gO_o7/"


def is_valid_target(url: str) -> bool:
    """
    Check that a target reference looks like a web address.

    Only the scheme prefix is validated; the page itself is not contacted.
    """
    if not url:
        return False
    return url.startswith('http://') or url.startswith('https://')


def is_blob_url(url: str) -> bool:
    """Check if URL is an in-page blob handle."""
    return bool(url) and url.startswith(BLOB_PREFIX)


def has_video_extension(url: str) -> bool:
    """
    Check if a URL mentions a known video file extension.

    This is a substring check, so query strings after the extension are
    tolerated (``.../clip.mp4?token=abc``).
    """
    if not url:
        return False
    lowered = url.lower()
    return any(f'.{ext}' in lowered for ext in VIDEO_EXTENSIONS)


def find_video_urls(markup: str) -> List[str]:
    """
    Find absolute video URLs in raw page markup.

    Args:
        markup: Rendered page source

    Returns:
        Matched URLs in document order, without duplicates
    """
    urls = []
    for match in VIDEO_URL_PATTERN.finditer(markup or ''):
        url = match.group(0)
        if url not in urls:
            urls.append(url)
    return urls
