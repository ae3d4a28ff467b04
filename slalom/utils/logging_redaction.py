"""
Logging redaction helpers.
Redacts wallet secrets and tokens from log messages.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable


_PATTERNS: Iterable[tuple[re.Pattern, str]] = (
    # Authorization: Bearer <token>
    (re.compile(r"(Bearer\s+)([A-Za-z0-9\-\._]+)"), r"\1[REDACTED]"),
    # Wallet signatures / private keys given as key=value
    (re.compile(r"(?i)(signature|private[_-]?key|secret)\s*[:=]\s*(0x)?([A-Fa-f0-9]{16,})"), r"\1=[REDACTED]"),
    # Mnemonic / seed phrase (quoted word list)
    (re.compile(r"(?i)(mnemonic|seed(?:[_-]?phrase)?)\s*[:=]\s*(['\"]).*?\2"), r"\1=[REDACTED]"),
    # Generic access token key/value
    (re.compile(r"(?i)(access_token|api[_-]?key)\s*[:=]\s*([A-Za-z0-9\-\._]+)"), r"\1=[REDACTED]"),
)


def redact_message(message: str) -> str:
    redacted = message
    for pattern, replacement in _PATTERNS:
        redacted = pattern.sub(replacement, redacted)
    return redacted


class RedactingFilter(logging.Filter):
    """Filter that redacts sensitive data from log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Malformed %-args; let the handler report it
            return True
        record.msg = redact_message(message)
        record.args = ()
        return True


def _has_redactor(filterer: logging.Filterer) -> bool:
    return any(isinstance(existing, RedactingFilter) for existing in filterer.filters)


def install_redaction_filter() -> None:
    # Logger filters do not see records propagated from child loggers,
    # so the root handlers carry the filter as well.
    root = logging.getLogger()
    targets: list[logging.Filterer] = [root, *root.handlers]
    for target in targets:
        if not _has_redactor(target):
            target.addFilter(RedactingFilter())
