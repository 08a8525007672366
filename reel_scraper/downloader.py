"""
Video download and persistence.
"""

import os
import time
from pathlib import Path
from typing import Optional, Union

import requests

from .config import DEFAULT_USER_AGENT
from .exceptions import DownloadError


VIDEO_SUFFIX = ".mp4"


def build_filename(prefix: str, timestamp: int) -> str:
    """Filename for a video saved at ``timestamp`` (unix seconds)."""
    return f"{prefix}_{int(timestamp)}{VIDEO_SUFFIX}"


def save_video(
    data: bytes,
    destination: Union[str, Path] = "downloaded_videos",
    prefix: str = "instagram_video",
) -> Path:
    """
    Write video bytes to a new file in ``destination``.

    The name is derived from the current unix time. Files are created
    exclusively, so if a file for this second already exists the timestamp is
    bumped until a free name is found. A failed write leaves no file behind.

    Args:
        data: Video payload
        destination: Output directory, created if absent
        prefix: Filename prefix

    Returns:
        Path of the written file

    Raises:
        DownloadError: If the payload is empty or the file cannot be written
    """
    if not data:
        raise DownloadError("Refusing to save an empty video payload")

    out_dir = Path(destination)
    out_dir.mkdir(parents=True, exist_ok=True)

    timestamp = int(time.time())
    while True:
        path = out_dir / build_filename(prefix, timestamp)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, 'O_BINARY', 0), 0o644)
            break
        except FileExistsError:
            timestamp += 1
        except OSError as e:
            raise DownloadError(f"Could not create {path}: {e}") from e

    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
    except OSError as e:
        path.unlink(missing_ok=True)
        raise DownloadError(f"Could not write {path}: {e}") from e

    print(f"Saving video to: {path} ({len(data)} bytes)")
    return path


def fetch_video(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> bytes:
    """
    Download a video from a direct address.

    Args:
        url: Direct video URL
        session: requests session to use, a new one is created if None
        timeout: Request timeout in seconds
        user_agent: User-Agent header sent with the request

    Returns:
        Response body

    Raises:
        DownloadError: On network errors, non-2xx status or an empty body
    """
    print(f"Downloading video from: {url[:100]}")
    http = session or requests.Session()
    try:
        response = http.get(url, headers={'User-Agent': user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise DownloadError(f"Timed out downloading video after {timeout:g}s") from e
    except requests.exceptions.RequestException as e:
        raise DownloadError(f"Failed to download video: {e}") from e
    finally:
        if session is None:
            http.close()

    data = response.content
    if not data:
        raise DownloadError("Video download returned an empty body")
    return data
