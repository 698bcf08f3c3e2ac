#!/usr/bin/env python3
"""
Basic Extraction Example
========================

This example demonstrates how Selector Scout inspects a page and
builds a page object from the selectors it finds.

Usage:
    python examples/basic_extraction.py [URL]
"""

import sys

from selector_scout import ExtractorConfig, SelectorExtractor


def main():
    """Extract selectors from a demo page and print the page object."""
    url = sys.argv[1] if len(sys.argv) > 1 else "https://demo.playwright.dev/todomvc/"

    print("=" * 60)
    print("Selector Scout - Basic Extraction Example")
    print("=" * 60)
    print()

    extractor = SelectorExtractor(ExtractorConfig(
        headless=True,
        take_screenshot=False,  # Keep the working directory clean
    ))

    print(f"Target URL: {url}")
    print("Extracting...")
    print("-" * 40)

    result = extractor.extract(url)

    if result.is_empty:
        print("No selectors found (the page may have failed to load).")
        return

    print(f"{len(result.all)} unique selectors")
    for group, selectors in result.groups().items():
        if group != "all":
            print(f"  {group}: {len(selectors)}")

    print()
    print("Page object:")
    for name, selector in result.page_object.items():
        print(f"  {name:<30} {selector}")


if __name__ == "__main__":
    main()
