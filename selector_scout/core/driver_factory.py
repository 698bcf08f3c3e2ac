"""
Driver Factory - Browser sessions backed by Selenium WebDriver.

Provides the ``BrowserSession`` capability the extractor depends on
and a Selenium/Chrome implementation of it. Selenium is imported
lazily so a missing install surfaces as a ``BrowserUnavailableError``
with a remediation hint instead of an import crash.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, TYPE_CHECKING
import base64
import logging

from selector_scout.core.exceptions import BrowserUnavailableError

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)

INSTALL_HINT = "Try: pip install selenium (and make sure Google Chrome is installed)"


class BrowserSession(ABC):
    """
    A single page in a browser, owned by one extraction.

    Operations are invoked in order: navigate, evaluate, screenshot,
    close.
    """

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Load a URL and wait for the page to finish loading."""

    @abstractmethod
    def evaluate(self, script: str, *args: Any) -> Any:
        """Run a script against the live document and return its JSON result."""

    @abstractmethod
    def screenshot(self, path: str) -> str:
        """Save a full-page PNG and return its path."""

    @abstractmethod
    def close(self) -> None:
        """Release the browser."""


class SeleniumSession(BrowserSession):
    """
    BrowserSession over a Selenium WebDriver.

    Example:
        >>> session = SeleniumSession(create_driver(headless=True))
        >>> session.navigate("https://example.com")
        >>> session.evaluate("return document.title;")
        'Example Domain'
        >>> session.close()
    """

    def __init__(self, driver: "WebDriver"):
        self.driver = driver

    def navigate(self, url: str) -> None:
        # WebDriver.get blocks until the load event
        self.driver.get(url)

    def evaluate(self, script: str, *args: Any) -> Any:
        return self.driver.execute_script(script, *args)

    def screenshot(self, path: str) -> str:
        """
        Capture the whole page, not just the viewport.

        Uses the DevTools protocol when the driver exposes it (Chrome,
        Edge) and falls back to a viewport screenshot otherwise.
        """
        if not hasattr(self.driver, "execute_cdp_cmd"):
            self.driver.save_screenshot(path)
            return path

        metrics = self.driver.execute_cdp_cmd("Page.getLayoutMetrics", {})
        size = metrics.get("cssContentSize") or metrics.get("contentSize") or {}
        params = {"format": "png", "captureBeyondViewport": True}
        if size.get("width") and size.get("height"):
            params["clip"] = {
                "x": 0,
                "y": 0,
                "width": size["width"],
                "height": size["height"],
                "scale": 1,
            }
        shot = self.driver.execute_cdp_cmd("Page.captureScreenshot", params)
        with open(path, "wb") as f:
            f.write(base64.b64decode(shot["data"]))
        return path

    def close(self) -> None:
        self.driver.quit()


def create_driver(
    headless: bool = True,
    page_load_timeout: int = 30,
    window_size: Tuple[int, int] = (1920, 1080),
    profile_path: Optional[str] = None,
) -> "WebDriver":
    """
    Create a Chrome WebDriver.

    Args:
        headless: Run browser in headless mode
        page_load_timeout: Seconds to wait for a navigation to finish
        window_size: Initial window width and height
        profile_path: Path to browser profile for session persistence

    Returns:
        Chrome WebDriver instance

    Raises:
        BrowserUnavailableError: Selenium is missing or Chrome failed to start
    """
    try:
        from selenium import webdriver
        from selenium.common.exceptions import WebDriverException
        from selenium.webdriver.chrome.options import Options as ChromeOptions
    except ImportError as e:
        raise BrowserUnavailableError(
            f"The 'selenium' package is required ({e}).", hint=INSTALL_HINT
        ) from e

    options = ChromeOptions()

    if headless:
        options.add_argument("--headless=new")

    if profile_path:
        options.add_argument(f"--user-data-dir={profile_path}")

    # Common stability options
    options.add_argument("--disable-extensions")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument(f"--window-size={window_size[0]},{window_size[1]}")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])

    try:
        driver = webdriver.Chrome(options=options)
    except WebDriverException as e:
        raise BrowserUnavailableError(
            f"Chrome could not be launched: {e.msg or e}", hint=INSTALL_HINT
        ) from e

    driver.set_page_load_timeout(page_load_timeout)
    logger.debug(f"[DriverFactory] Chrome started (headless={headless})")
    return driver


def create_session(
    headless: bool = True,
    page_load_timeout: int = 30,
    window_size: Tuple[int, int] = (1920, 1080),
) -> BrowserSession:
    """Launch Chrome and wrap it in a SeleniumSession."""
    driver = create_driver(
        headless=headless,
        page_load_timeout=page_load_timeout,
        window_size=window_size,
    )
    return SeleniumSession(driver)
