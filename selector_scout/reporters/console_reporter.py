"""
Console Reporter - Human-readable extraction output.

Prints the grouped selectors and the generated page object as JSON,
colored with rich. A ``Console(no_color=True)`` gives plain text.
"""

from typing import Any, Dict, Optional
import json
import os

from rich.console import Console
from rich.text import Text

from selector_scout.layers.locate import ExtractResult


def _to_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class ConsoleReporter:
    """
    Renders an ExtractResult to a rich Console.

    Example:
        >>> reporter = ConsoleReporter(Console())
        >>> reporter.report(result, screenshot_path="/tmp/screenshot-1.png")
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def report(self, result: ExtractResult, screenshot_path: Optional[str] = None) -> None:
        """Print the screenshot location, grouped selectors and page object."""
        if screenshot_path:
            self._print(f"Screenshot saved to {screenshot_path}", "green")

        groups = {key: list(value) for key, value in result.groups().items()}
        self._print("Extracted selectors grouped by strategy:\n", "blue")
        self._print(_to_json(groups), "yellow")

        self._print("\nGenerated page object:\n", "magenta")
        self._print(_to_json(result.page_object), "cyan")

    def _print(self, message: str, style: str) -> None:
        # Text keeps selector brackets from being read as rich markup
        self.console.print(Text(message, style=style), soft_wrap=True)


def write_json_report(result: ExtractResult, path: str) -> str:
    """
    Write the full result (groups and page object) to a JSON file.

    Returns:
        Absolute path of the written file
    """
    path = os.path.abspath(path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(_to_json(result.to_dict()))
        f.write("\n")
    return path
