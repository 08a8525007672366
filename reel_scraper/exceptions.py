"""
Exceptions raised by the scrape-and-download flow.
"""


class ScraperError(Exception):
    """Base class for all scraper failures."""


class InvalidTargetError(ScraperError):
    """Target reference is not an http(s) URL."""


class BrowserLaunchError(ScraperError):
    """Browser or driver could not be started."""


class VideoNotFoundError(ScraperError):
    """No video element appeared, or no video source could be located."""


class BlobExtractionError(ScraperError):
    """In-page fetch of a blob URL failed or returned no data."""


class DownloadError(ScraperError):
    """Direct fetch or file write failed."""
