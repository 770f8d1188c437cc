"""Reporters for deploy cycle results.

PlainTextReporter uses stdlib only; ConsoleReporter renders with rich.
"""

from bindhook.application.reporters.console import ConsoleConfig, ConsoleReporter
from bindhook.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
