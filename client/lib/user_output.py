"""
User Output Abstraction

Provides a unified interface for user-facing output, separating
user messages from debug logging.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO


class UserOutput:
    """
    Unified handler for user-facing output.

    User messages (results, errors) go to stdout/stderr, debug information
    goes to the logger.

    Usage:
        output = UserOutput()
        output.section("Number 360")
        output.item("LCM", 360)
        output.error("Failed to connect to API")
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        quiet: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize output handler.

        Args:
            stdout: Output stream for normal messages (default: sys.stdout)
            stderr: Output stream for errors (default: sys.stderr)
            quiet: If True, suppress all non-error output
            logger: Optional logger for debug messages
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.quiet = quiet
        self.logger = logger or logging.getLogger(__name__)

    def error(self, message: str, log: bool = True) -> None:
        """Print error message to user (always shown, even in quiet mode)."""
        print(f"Error: {message}", file=self.stderr)
        if log:
            self.logger.error(message)

    def section(self, title: str) -> None:
        """Print a section header."""
        if not self.quiet:
            print(f"\n{title}", file=self.stdout)

    def item(self, label: str, value: Any, indent: int = 2) -> None:
        """Print a labeled item (key-value pair)."""
        if not self.quiet:
            prefix = " " * indent
            print(f"{prefix}{label}: {value}", file=self.stdout)

    def bullet(self, message: str, indent: int = 2) -> None:
        """Print an indented line."""
        if not self.quiet:
            prefix = " " * indent
            print(f"{prefix}{message}", file=self.stdout)

    def json(self, data: Dict[str, Any]) -> None:
        """Print a dictionary as indented JSON."""
        if not self.quiet:
            print(json.dumps(data, indent=2, ensure_ascii=False), file=self.stdout)

    def analysis(self, data: Dict[str, Any], show_exact: bool = False) -> None:
        """
        Print an analysis response, one line per output region.

        Args:
            data: Response from the /analyze endpoint
            show_exact: Print the exact factorial below an abbreviated one
        """
        if self.quiet:
            return
        display = data['display']
        self.section(f"Number {data['number']}")
        for region in ('prime_factors', 'lcm', 'factorial', 'digit_sum', 'perfect_square'):
            self.bullet(display[region])
        if show_exact and display.get('exact_factorial'):
            self.bullet(display['exact_factorial'], indent=4)
