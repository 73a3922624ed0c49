"""
Summary statistics over a device's connection events.
"""

import math
from typing import Dict, List, Optional, Sequence

import numpy as np

from .events import ConnectionEvent, ConnectionStatus, Period, PeriodStats, Summary
from .logging_config import get_logger
from .segments import segment_periods

logger = get_logger(__name__)


def uptime_percent(connected: int, total: int) -> float:
    """Share of connected events, rounded half up to one decimal."""
    if total <= 0:
        return 0.0
    return math.floor(connected / total * 1000 + 0.5) / 10


def _longest(periods: List[Period], status: ConnectionStatus) -> Optional[Period]:
    # Strict comparison: the earliest of equally long periods wins.
    best = None
    for period in periods:
        if period.status != status:
            continue
        if best is None or period.duration_ms > best.duration_ms:
            best = period
    return best


def _longest_streak(periods: List[Period], status: ConnectionStatus) -> int:
    return max((p.event_count for p in periods if p.status == status), default=0)


def compute_summary(events: Sequence[ConnectionEvent]) -> Summary:
    """
    Compute counts, uptime, streaks and longest periods for one device.

    Streaks count consecutive events with the same status, regardless of
    the time between them. Longest periods are measured in elapsed time.
    An empty sequence yields a zero-valued Summary.

    Raises:
        UnsortedEventsError: If the events are not in ascending order.
    """
    events = list(events)
    if not events:
        return Summary()

    periods = segment_periods(events)
    connected = sum(p.event_count for p in periods if p.status == ConnectionStatus.CONNECTED)
    total = len(events)

    summary = Summary(
        total_count=total,
        connected_count=connected,
        disconnected_count=total - connected,
        uptime_percent=uptime_percent(connected, total),
        first_seen=events[0].timestamp,
        last_seen=events[-1].timestamp,
        longest_connected_streak=_longest_streak(periods, ConnectionStatus.CONNECTED),
        longest_disconnected_streak=_longest_streak(periods, ConnectionStatus.DISCONNECTED),
        longest_on_period=_longest(periods, ConnectionStatus.CONNECTED),
        longest_off_period=_longest(periods, ConnectionStatus.DISCONNECTED),
    )
    logger.debug(
        "Summarized %d events: %.1f%% uptime over %d periods",
        total,
        summary.uptime_percent,
        len(periods),
    )
    return summary


def period_statistics(periods: Sequence[Period]) -> Dict[ConnectionStatus, PeriodStats]:
    """
    Per-status duration statistics over segmented periods.

    Statuses with no periods are omitted. Zero-duration trailing periods
    are included as they are returned by the segmenter.
    """
    stats = {}
    for status in ConnectionStatus:
        durations = np.array([p.duration_ms for p in periods if p.status == status], dtype=np.int64)
        if durations.size == 0:
            continue
        stats[status] = PeriodStats(
            status=status,
            count=int(durations.size),
            total_ms=int(durations.sum()),
            mean_ms=float(np.mean(durations)),
            median_ms=float(np.median(durations)),
            max_ms=int(durations.max()),
        )
    return stats
