"""Core module - Extraction workflow and browser management."""

from selector_scout.core.driver_factory import BrowserSession, SeleniumSession, create_driver
from selector_scout.core.exceptions import BrowserUnavailableError, SelectorScoutError
from selector_scout.core.extractor import ExtractorConfig, SelectorExtractor, extract_selectors

__all__ = [
    "BrowserSession",
    "BrowserUnavailableError",
    "ExtractorConfig",
    "SelectorExtractor",
    "SelectorScoutError",
    "SeleniumSession",
    "create_driver",
    "extract_selectors",
]
