"""
Test the AI hand-off placeholder.
"""

import pytest

from reel_scraper.ai_handoff import PlaceholderVideoProcessor, VideoProcessor


def test_placeholder_skips(capsys, tmp_path):
    video = tmp_path / 'instagram_video_1718000000.mp4'

    result = PlaceholderVideoProcessor().process(video)

    assert result.status == 'skipped'
    assert result.video_path == str(video)
    assert result.transcript is None
    assert str(video) in capsys.readouterr().out


def test_interface_requires_process():
    with pytest.raises(TypeError):
        VideoProcessor()
