"""
Selector Extractor - The extraction workflow.

Opens a browser session, loads the page, snapshots the DOM, turns it
into grouped selectors and a page object, saves a full-page screenshot
and always releases the browser.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import logging
import os
import time

from selector_scout.core.driver_factory import BrowserSession, create_session
from selector_scout.layers.locate import ExtractResult, aggregate
from selector_scout.layers.sense import DOMSnapshot

logger = logging.getLogger(__name__)

SessionFactory = Callable[["ExtractorConfig"], BrowserSession]


@dataclass
class ExtractorConfig:
    """Configuration for a selector extraction."""
    headless: bool = True
    page_load_timeout: int = 30  # Seconds to wait for navigation
    screenshot_dir: str = "."
    take_screenshot: bool = True
    window_size: Tuple[int, int] = (1920, 1080)


def selenium_session_factory(config: ExtractorConfig) -> BrowserSession:
    """Default session factory: a Chrome session built from the config."""
    return create_session(
        headless=config.headless,
        page_load_timeout=config.page_load_timeout,
        window_size=config.window_size,
    )


class SelectorExtractor:
    """
    Extracts grouped selectors and a page object from a URL.

    Failures after the browser is up never propagate: the caller gets an
    empty ``ExtractResult`` and the session is closed regardless.
    Launch failures (``BrowserUnavailableError``) do propagate.

    Example:
        >>> extractor = SelectorExtractor()
        >>> result = extractor.extract("https://example.com")
        >>> result.roles
        ['role=link[name="More information..."]']
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Extraction settings (defaults to ExtractorConfig())
            session_factory: Callable that opens a BrowserSession for a config
        """
        self.config = config or ExtractorConfig()
        self.session_factory = session_factory or selenium_session_factory
        self.last_screenshot_path: Optional[str] = None

    def extract(self, url: str) -> ExtractResult:
        """
        Run one extraction against a URL.

        Args:
            url: Absolute URL of the page to inspect

        Returns:
            ExtractResult, empty if anything went wrong after launch
        """
        self.last_screenshot_path = None
        session = self.session_factory(self.config)
        try:
            session.navigate(url)
            logger.info(f"[SelectorExtractor] Loaded {url}")

            elements = DOMSnapshot(session).capture()
            result = aggregate(elements)
            logger.info(
                f"[SelectorExtractor] {len(elements)} elements -> "
                f"{len(result.all)} selectors, {len(result.page_object)} page object entries"
            )

            if self.config.take_screenshot:
                self.last_screenshot_path = session.screenshot(self._screenshot_path())
                logger.info(f"[SelectorExtractor] Screenshot saved to {self.last_screenshot_path}")

            return result
        except Exception as e:
            logger.warning(f"[SelectorExtractor] Extraction failed for {url}: {e}", exc_info=True)
            return ExtractResult.empty()
        finally:
            self._release(session)

    def _screenshot_path(self) -> str:
        """Timestamped PNG path inside the screenshot directory."""
        os.makedirs(self.config.screenshot_dir, exist_ok=True)
        name = f"screenshot-{int(time.time() * 1000)}.png"
        return os.path.abspath(os.path.join(self.config.screenshot_dir, name))

    def _release(self, session: BrowserSession) -> None:
        try:
            session.close()
        except Exception as e:
            logger.warning(f"[SelectorExtractor] Failed to close browser: {e}")


def extract_selectors(
    url: str,
    config: Optional[ExtractorConfig] = None,
    session_factory: Optional[SessionFactory] = None,
) -> ExtractResult:
    """
    Extract selectors from a URL, grouped by locating strategy.

    Any error once the browser is open results in an empty result, but
    the browser is always closed.
    """
    return SelectorExtractor(config, session_factory).extract(url)
