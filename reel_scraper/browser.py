"""
Headless browser session management.
Launches Chrome through SeleniumBase with a fixed configuration and makes
sure the browser process is always shut down.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from selenium.common.exceptions import WebDriverException
from seleniumbase import Driver

from .config import BrowserConfig
from .exceptions import BrowserLaunchError


def open_session(config: Optional[BrowserConfig] = None):
    """
    Launch a browser session.

    Args:
        config: BrowserConfig instance, uses defaults if None

    Returns:
        SeleniumBase driver

    Raises:
        BrowserLaunchError: If the browser or driver could not be started
    """
    config = config or BrowserConfig()
    mode = "headless" if config.headless else "visible"
    print(f"Initializing {mode} Chrome browser...")
    if config.driver_version:
        print(f"  Using pinned driver version {config.driver_version}")

    extra_args = config.chromium_args()
    try:
        driver = Driver(
            browser="chrome",
            headless=config.headless,
            agent=config.user_agent,
            disable_gpu=config.disable_gpu,
            no_sandbox=config.no_sandbox,
            window_size=config.window_size,
            driver_version=config.driver_version,
            chromium_arg=",".join(extra_args) if extra_args else None,
        )
    except Exception as e:
        raise BrowserLaunchError(
            f"Could not start Chrome ({type(e).__name__}: {e}). "
            "Ensure a compatible browser and driver are installed."
        ) from e

    try:
        driver.implicitly_wait(config.implicit_wait)
        driver.set_page_load_timeout(config.page_load_timeout)
    except Exception as e:
        close_session(driver)
        raise BrowserLaunchError(
            f"Could not configure Chrome ({type(e).__name__}: {e})"
        ) from e
    return driver


def close_session(driver) -> bool:
    """
    Quit the browser.

    A failing quit is reported and not raised, so it never hides the error
    that ended the run.

    Returns:
        True if the browser quit cleanly
    """
    if driver is None:
        return True
    print("Quitting browser.")
    try:
        driver.quit()
    except (WebDriverException, OSError) as e:
        print(f"  Warning: browser did not quit cleanly ({type(e).__name__}: {e})")
        return False
    return True


@contextmanager
def browser_session(
    config: Optional[BrowserConfig] = None,
    factory: Optional[Callable[[BrowserConfig], object]] = None,
) -> Iterator[object]:
    """
    Open a browser for the duration of a ``with`` block.

    The browser is quit exactly once however the block exits.

    Args:
        config: BrowserConfig instance, uses defaults if None
        factory: Callable used instead of ``open_session`` (tests pass fakes)
    """
    config = config or BrowserConfig()
    driver = (factory or open_session)(config)
    try:
        yield driver
    finally:
        close_session(driver)
