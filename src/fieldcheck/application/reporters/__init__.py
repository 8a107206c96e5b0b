"""Reporter for batch validation results.

ConsoleReporter renders with rich and returns a string.
"""

from fieldcheck.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
