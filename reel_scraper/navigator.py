"""
Page navigation: load a post page and wait for its video player.
"""

import time

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .exceptions import VideoNotFoundError


VIDEO_SELECTOR = "video"


def load_page(
    driver,
    url: str,
    timeout: float = 15.0,
    settle_delay: float = 3.0,
    implicit_wait: float = 10.0,
):
    """
    Navigate to a page and block until a video element is visible.

    The session's implicit wait is switched off while polling, so the wait
    ends after ``timeout`` rather than ``timeout`` plus one implicit wait.

    Args:
        driver: Browser session
        url: Page to load
        timeout: Seconds to wait for the video element
        settle_delay: Seconds to let client-side rendering start before waiting
        implicit_wait: Implicit wait restored on the session afterwards

    Returns:
        The visible video WebElement

    Raises:
        VideoNotFoundError: If no video element became visible within timeout
    """
    print(f"Navigating to: {url}")
    driver.get(url)

    if settle_delay:
        time.sleep(settle_delay)

    driver.implicitly_wait(0)
    try:
        element = WebDriverWait(driver, timeout).until(
            EC.visibility_of_element_located((By.CSS_SELECTOR, VIDEO_SELECTOR))
        )
    except TimeoutException as e:
        raise VideoNotFoundError(
            f"Timed out after {timeout:g}s waiting for a video element on {url}"
        ) from e
    finally:
        driver.implicitly_wait(implicit_wait)

    print("  Found video element")
    return element
