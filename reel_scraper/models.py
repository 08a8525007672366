"""
Data models for the reel scraper.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SourceKind(str, Enum):
    """How the video bytes have to be obtained."""
    DIRECT = "direct"
    BLOB = "blob"


@dataclass(frozen=True)
class VideoSource:
    """Where a located video lives and which strategy found it."""
    kind: SourceKind
    url: str
    strategy: str = ""

    @property
    def is_blob(self) -> bool:
        return self.kind is SourceKind.BLOB


@dataclass
class ProcessingResult:
    """Outcome of handing a downloaded video to an AI service."""
    video_path: str
    status: str
    transcript: Optional[str] = None
    translation: Optional[str] = None
    details: dict = field(default_factory=dict)


@dataclass
class ScrapeResult:
    """Result of one scrape-and-download run."""
    success: bool
    source_url: str
    started_at: str
    completed_at: str = ""
    video_source: Optional[VideoSource] = None
    video_path: Optional[str] = None
    bytes_written: int = 0
    processing: Optional[ProcessingResult] = None
    error: Optional[str] = None
    duration_seconds: float = 0.0
