"""
Test the command-line entry point and configuration merging.
"""

import pytest

from reel_scraper import main as cli
from reel_scraper.config import ScraperConfig, Settings
from reel_scraper.models import ScrapeResult


class ExplodingScraper:
    def __init__(self, *args, **kwargs):
        raise AssertionError("scraper must not be created for invalid input")


@pytest.mark.parametrize("argv", [[], ["instagram.com/reel/ABC/"], ["file:///etc/passwd"]])
def test_invalid_input_prints_usage(monkeypatch, capsys, argv):
    monkeypatch.setattr(cli, 'InstagramVideoScraper', ExplodingScraper)

    assert cli.main(argv) == 2
    assert "Usage:" in capsys.readouterr().out


def test_success_exit_code(monkeypatch, capsys):
    seen = {}

    class FakeScraper:
        def __init__(self, config):
            seen['config'] = config

        def scrape_and_download(self, url):
            return ScrapeResult(success=True, source_url=url, started_at='t',
                                video_path='out/instagram_video_1.mp4', bytes_written=3)

    monkeypatch.setattr(cli, 'InstagramVideoScraper', FakeScraper)

    code = cli.main(["https://www.instagram.com/reel/ABC/", "--visible", "--output-dir", "vids",
                     "--driver-version", "120.0.6099.109"])

    assert code == 0
    config = seen['config']
    assert config.browser.headless is False
    assert config.browser.driver_version == "120.0.6099.109"
    assert config.download_dir == "vids"
    assert "SCRAPE COMPLETE" in capsys.readouterr().out


def test_failure_exit_code(monkeypatch):
    class FailingScraper:
        def __init__(self, config):
            pass

        def scrape_and_download(self, url):
            return ScrapeResult(success=False, source_url=url, started_at='t', error='Timed out')

    monkeypatch.setattr(cli, 'InstagramVideoScraper', FailingScraper)

    assert cli.main(["https://www.instagram.com/reel/ABC/"]) == 1


def test_config_from_settings():
    settings = Settings(reel_download_dir='/data/videos', reel_driver_version='121.0.6167.85')

    config = ScraperConfig.from_settings(settings, video_wait_timeout=20)

    assert config.download_dir == '/data/videos'
    assert config.browser.driver_version == '121.0.6167.85'
    assert config.video_wait_timeout == 20
    assert config.file_prefix == 'instagram_video'


def test_settings_read_env_file_from_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv('REEL_DOWNLOAD_DIR', raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / '.env').write_text('REEL_DOWNLOAD_DIR=/srv/reels\n', encoding='utf-8')

    assert Settings().reel_download_dir == '/srv/reels'
