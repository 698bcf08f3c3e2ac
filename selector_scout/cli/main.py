"""
Selector Scout CLI - Extract selectors and a page object from a URL.
"""

import logging
import sys

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text

from selector_scout import __version__
from selector_scout.core.exceptions import BrowserUnavailableError
from selector_scout.core.extractor import ExtractorConfig, SelectorExtractor
from selector_scout.reporters import ConsoleReporter, write_json_report


@click.command()
@click.version_option(version=__version__, prog_name="selector-scout")
@click.argument('url')
@click.option('--headless/--headed', default=True, help='Run browser in headless mode')
@click.option('--timeout', default=30, type=int, show_default=True,
              help='Page load timeout in seconds')
@click.option('--screenshot-dir', default='.', show_default=True,
              type=click.Path(file_okay=False), help='Directory for the full-page screenshot')
@click.option('--no-screenshot', is_flag=True, help='Skip the full-page screenshot')
@click.option('--output', '-o', default=None, type=click.Path(dir_okay=False),
              help='Also write the JSON result to this file')
@click.option('--no-color', is_flag=True, help='Print plain, uncolored output')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(url, headless, timeout, screenshot_dir, no_screenshot, output, no_color, verbose):
    """
    Extract CSS/accessibility selectors from URL.

    Selectors are grouped by strategy (id, data-testid, name, ARIA role,
    visible text) and named into a page object mapping.

    \b
    Examples:

        selector-scout https://example.com

        selector-scout https://example.com/login --headed -o login.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console(no_color=no_color, highlight=False)
    err_console = Console(stderr=True, no_color=no_color, highlight=False)

    config = ExtractorConfig(
        headless=headless,
        page_load_timeout=timeout,
        screenshot_dir=screenshot_dir,
        take_screenshot=not no_screenshot,
    )
    extractor = SelectorExtractor(config)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            progress.add_task(f"Extracting selectors from {url}...", total=None)
            result = extractor.extract(url)
    except BrowserUnavailableError as e:
        err_console.print(Text(f"Error: {e}", style="red"))
        sys.exit(1)

    if result.is_empty:
        err_console.print("[yellow]No selectors extracted (page may have failed to load).[/yellow]")

    ConsoleReporter(console).report(result, screenshot_path=extractor.last_screenshot_path)

    if output:
        path = write_json_report(result, output)
        err_console.print(f"[dim]Report: {path}[/dim]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
