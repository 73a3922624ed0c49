"""
Field extraction from free-text device log lines.

Each extraction is an independent pattern match over the raw message; a
miss in one never affects the others and never raises.
"""

from typing import Iterable, List, Optional

from .events import LogExtraction
from .patterns import DURATION_PATTERN, LOG_PREFIX_PATTERN, RELAY_START_PATTERN, RLS_STS_PATTERN


def extract_flag(message: str) -> Optional[bool]:
    """Relay status flag, or None when the line has no rls_sts field."""
    match = RLS_STS_PATTERN.search(message)
    if not match:
        return None
    return match.group(1).lower() == "true"


def _extract_int(pattern, message: str) -> Optional[int]:
    match = pattern.search(message)
    return int(match.group(1), 10) if match else None


def extract_relay_start(message: str) -> Optional[int]:
    return _extract_int(RELAY_START_PATTERN, message)


def extract_relay_duration(message: str) -> Optional[int]:
    return _extract_int(DURATION_PATTERN, message)


def clean_display_message(message: str) -> str:
    """
    Strip a leading ``[timestamp] [LOG]`` prefix for display.

    Lines without the prefix are returned untouched, as is any line
    where nothing would remain after it.
    """
    match = LOG_PREFIX_PATTERN.match(message)
    if not match:
        return message
    cleaned = message[match.end():].strip()
    return cleaned or message


def extract_log_fields(message: str) -> LogExtraction:
    """Extract the relay flag, relay timing and display text from one line."""
    return LogExtraction(
        flag=extract_flag(message),
        relay_start_epoch=extract_relay_start(message),
        relay_duration_seconds=extract_relay_duration(message),
        display_message=clean_display_message(message),
    )


def extract_all(messages: Iterable[str]) -> List[LogExtraction]:
    """Extract fields from every line, preserving input order."""
    return [extract_log_fields(message) for message in messages]
