"""
Hand-off point between a downloaded video and an AI transcription/translation
service.

No service is wired in yet. ``VideoProcessor`` is the single-method interface
an integration has to implement; the scraper takes any instance of it.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from .models import ProcessingResult


class VideoProcessor(ABC):
    """Sends a local video file to an external AI service."""

    @abstractmethod
    def process(self, video_path: Union[str, Path]) -> ProcessingResult:
        """Process the video at ``video_path`` and return the outcome."""


class PlaceholderVideoProcessor(VideoProcessor):
    """Default processor: reports that the video is ready and does nothing."""

    def process(self, video_path: Union[str, Path]) -> ProcessingResult:
        print("\n--- AI Processing Placeholder ---")
        print(f"Video ready for AI processing: {video_path}")
        print("Implement a VideoProcessor to transcribe and translate the video,")
        print("e.g. upload to cloud storage and call a speech-to-text API.")
        print("---------------------------------\n")
        return ProcessingResult(video_path=str(video_path), status="skipped")
