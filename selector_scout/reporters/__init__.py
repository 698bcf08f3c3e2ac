"""Reporters - Console and file output for extraction results."""

from selector_scout.reporters.console_reporter import ConsoleReporter, write_json_report

__all__ = ["ConsoleReporter", "write_json_report"]
