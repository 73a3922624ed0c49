"""
Human-readable rendering of period durations.
"""

import math
from typing import Optional

from .events import StateDuration

MISSING = "—"


def format_duration(ms: Optional[float]) -> str:
    """Seconds below one minute, otherwise minutes to one decimal."""
    if ms is None:
        return MISSING
    if ms < 60_000:
        return f"{math.floor(ms / 1000 + 0.5)} sec"
    return f"{ms / 60_000:.1f} min"


def describe_state_duration(state: Optional[StateDuration]) -> str:
    """Tooltip suffix such as ``Was ON for: 42 sec`` or ``OFF for: 3.0 min``."""
    if state is None:
        return ""
    prefix = "Was " if state.is_transition else ""
    return f"{prefix}{state.status.label} for: {format_duration(state.duration_ms)}"
