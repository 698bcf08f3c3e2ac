"""
Selector Scout - Page Object Selector Extraction

Inspects a live web page and produces prioritized, deduplicated
selectors grouped by locating strategy, plus a generated page object
mapping for browser-automation test suites.
"""

__version__ = "0.1.0"

from selector_scout.core.extractor import ExtractorConfig, SelectorExtractor, extract_selectors
from selector_scout.layers.locate import ExtractResult

__all__ = [
    "ExtractResult",
    "ExtractorConfig",
    "SelectorExtractor",
    "extract_selectors",
    "__version__",
]
