"""
Test video persistence and direct downloads.
"""

import os
import re

import pytest
import requests

from reel_scraper import downloader
from reel_scraper.downloader import build_filename, fetch_video, save_video
from reel_scraper.exceptions import DownloadError


def test_build_filename():
    assert build_filename('instagram_video', 1718000000) == 'instagram_video_1718000000.mp4'


def test_save_creates_directory(tmp_path):
    out = tmp_path / 'nested' / 'videos'

    path = save_video(b'abc', out, 'clip')

    assert path.parent == out
    assert re.fullmatch(r'clip_\d+\.mp4', path.name)
    assert path.read_bytes() == b'abc'


def test_quick_saves_get_distinct_names(tmp_path):
    first = save_video(b'one', tmp_path, 'instagram_video')
    second = save_video(b'two', tmp_path, 'instagram_video')

    assert first != second
    assert first.read_bytes() == b'one'
    assert second.read_bytes() == b'two'


def test_existing_file_not_overwritten(tmp_path, monkeypatch):
    monkeypatch.setattr(downloader.time, 'time', lambda: 1718000000.5)
    (tmp_path / 'instagram_video_1718000000.mp4').write_bytes(b'old')

    path = save_video(b'new', tmp_path)

    assert path.name == 'instagram_video_1718000001.mp4'
    assert (tmp_path / 'instagram_video_1718000000.mp4').read_bytes() == b'old'


def test_empty_payload_rejected(tmp_path):
    with pytest.raises(DownloadError):
        save_video(b'', tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_failed_write_leaves_no_file(tmp_path, monkeypatch):
    class BrokenFile:
        def __init__(self, fd):
            os.close(fd)

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def write(self, data):
            raise OSError(28, 'No space left on device')

    monkeypatch.setattr(downloader.os, 'fdopen', lambda fd, mode: BrokenFile(fd))

    with pytest.raises(DownloadError, match='No space left'):
        save_video(b'data', tmp_path)
    assert list(tmp_path.iterdir()) == []


def test_fetch_sends_user_agent(make_http):
    http = make_http(b'video')

    assert fetch_video('https://cdn.example.com/a.mp4', session=http, timeout=7, user_agent='UA/1') == b'video'
    assert http.requests == [{
        'url': 'https://cdn.example.com/a.mp4',
        'headers': {'User-Agent': 'UA/1'},
        'timeout': 7,
    }]


def test_fetch_http_error(make_http):
    with pytest.raises(DownloadError, match='403'):
        fetch_video('https://cdn.example.com/a.mp4', session=make_http(b'denied', status_code=403))


def test_fetch_timeout(make_http):
    http = make_http(error=requests.exceptions.ReadTimeout('read timed out'))
    with pytest.raises(DownloadError, match='Timed out'):
        fetch_video('https://cdn.example.com/a.mp4', session=http, timeout=3)


def test_fetch_empty_body(make_http):
    with pytest.raises(DownloadError, match='empty body'):
        fetch_video('https://cdn.example.com/a.mp4', session=make_http(b''))
