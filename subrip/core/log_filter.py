"""Logging filter for redacting secrets and trimming subtitle payloads in log messages."""

import logging
import re
from typing import Pattern


class SensitiveDataFilter(logging.Filter):
    """Filter to redact sensitive data and shorten oversized arguments.

    Redacts:
    - Service API keys (env assignments, key=value pairs)
    - X-API-Key and Authorization headers
    - Bearer tokens

    Truncates:
    - String arguments longer than ``max_arg_length`` (leftover junk from a
      partially parsed file, raw caption text, uploaded payloads)
    """

    TRUNCATION_MARKER = "...[truncated {count} chars]"

    def __init__(self, max_arg_length: int | None = 200):
        """Initialize filter with redaction patterns.

        Args:
            max_arg_length: Longest string argument kept verbatim; ``None``
                disables truncation
        """
        super().__init__()
        self.max_arg_length = max_arg_length

        # Order matters - more specific patterns should come first
        self.patterns: list[tuple[Pattern, str]] = [
            # Authorization headers with Bearer tokens (must come before generic Bearer pattern)
            (
                re.compile(r"(?i)(Authorization):\s+(Bearer\s+)?([^\s,]+)"),
                r"\1: ***REDACTED***",
            ),
            # X-API-Key headers
            (
                re.compile(r"(?i)(X-API-Key):\s*([^\s,]+)"),
                r"\1: ***REDACTED***",
            ),
            # Environment variable assignments (e.g., API_KEY=abc123)
            (
                re.compile(r"(?i)\b(API_KEY)=([^\s,\)]+)"),
                r"\1=***REDACTED***",
            ),
            # API keys and tokens with key=value format
            (
                re.compile(
                    r"(?i)(api[_-]?key|apikey|token|secret|password)['\"]?\s*[:=]\s*['\"]?([A-Za-z0-9_\-\.]{12,})"
                ),
                r"\1=***REDACTED***",
            ),
            # Bearer tokens (standalone, not in Authorization header)
            (
                re.compile(r"(?i)\bBearer\s+([A-Za-z0-9_\-\.=]+)"),
                r"Bearer ***REDACTED***",
            ),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record by redacting sensitive data.

        Args:
            record: Log record to filter

        Returns:
            True (always pass the record after redaction)
        """
        if record.msg:
            record.msg = self.redact(str(record.msg))

        # Redact args (used in % formatting)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_value(arg) for arg in record.args)

        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)

        return True

    def _redact_value(self, value):
        """Redact and truncate a single value, preserving type for non-strings."""
        if isinstance(value, str):
            return self.truncate(self.redact(value))
        return value

    def truncate(self, text: str) -> str:
        """Shorten text longer than ``max_arg_length``."""
        if self.max_arg_length is None or len(text) <= self.max_arg_length:
            return text
        dropped = len(text) - self.max_arg_length
        return text[: self.max_arg_length] + self.TRUNCATION_MARKER.format(count=dropped)

    def redact(self, text: str) -> str:
        """Apply redaction patterns to text.

        Args:
            text: Text to redact

        Returns:
            Text with sensitive data redacted
        """
        for pattern, replacement in self.patterns:
            text = pattern.sub(replacement, text)
        return text
