"""Locate Layer - Selector classification, grouping and naming."""

from selector_scout.layers.locate.aggregator import ExtractResult, aggregate, dedupe
from selector_scout.layers.locate.classifier import (
    SelectorRecord,
    Strategy,
    classify,
    implicit_role,
    normalize_text,
)
from selector_scout.layers.locate.namer import PageObjectBuilder, camel_case

__all__ = [
    "ExtractResult",
    "PageObjectBuilder",
    "SelectorRecord",
    "Strategy",
    "aggregate",
    "camel_case",
    "classify",
    "dedupe",
    "implicit_role",
    "normalize_text",
]
