"""
Configuration for the reel scraper.

Dataclasses hold the per-run browser and scraper settings; ``Settings`` reads
the environment (and an optional ``.env`` file) for values that differ
between machines.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Environment settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = "development"

    # Database (development/test use RDS, production uses SQLite files)
    rds_hostname: str = "localhost"
    rds_username: str = ""
    rds_password: str = ""
    rds_port: int = 5432
    storage_dir: str = "storage"

    # Scraper
    reel_download_dir: str = "downloaded_videos"
    reel_driver_version: Optional[str] = None


@dataclass
class BrowserConfig:
    """Launch options for the headless browser session."""
    headless: bool = True
    disable_gpu: bool = True
    no_sandbox: bool = True
    disable_dev_shm_usage: bool = True
    window_size: str = "1920,1080"
    user_agent: str = DEFAULT_USER_AGENT
    # Pin a specific chromedriver, e.g. "120.0.6099.109". None lets
    # SeleniumBase pick the one matching the installed browser.
    driver_version: Optional[str] = None
    implicit_wait: float = 10.0
    page_load_timeout: float = 30.0

    def chromium_args(self) -> List[str]:
        """Extra Chrome switches not covered by Driver() keyword arguments."""
        args = []
        if self.disable_dev_shm_usage:
            args.append("--disable-dev-shm-usage")
        return args


@dataclass
class ScraperConfig:
    """Main configuration for one scrape-and-download run."""
    browser: BrowserConfig = field(default_factory=BrowserConfig)

    # Navigation
    video_wait_timeout: float = 15.0
    settle_delay: float = 3.0

    # Output
    download_dir: str = "downloaded_videos"
    file_prefix: str = "instagram_video"

    # Direct downloads
    download_timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **overrides) -> "ScraperConfig":
        """
        Build a config from environment settings.

        Args:
            settings: Settings instance, read from the environment if None
            **overrides: Field values that take precedence over the environment

        Returns:
            ScraperConfig instance
        """
        settings = settings or Settings()
        browser = overrides.pop('browser', None) or BrowserConfig(
            driver_version=settings.reel_driver_version
        )
        values = {'download_dir': settings.reel_download_dir}
        values.update(overrides)
        return cls(browser=browser, **values)
