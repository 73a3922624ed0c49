"""
Segmentation of an event timeline into contiguous ON/OFF periods.

``segment_periods`` is the single segmentation primitive: the summary
engine, the duration chart projection and the tooltip lookups all consume
its output rather than walking the events themselves.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

import numpy as np

from .events import ConnectionEvent, ConnectionStatus, DurationPoint, Period, StateDuration
from .exceptions import ConfigurationError, MixedTimezoneError, UnsortedEventsError
from .logging_config import get_logger

logger = get_logger(__name__)

_MILLISECOND = timedelta(milliseconds=1)


class DurationUnit(str, Enum):
    """Units offered by the period-duration chart."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"

    @property
    def divisor(self) -> int:
        """Milliseconds per unit."""
        return UNIT_DIVISORS[self]


UNIT_DIVISORS = {
    DurationUnit.SECONDS: 1_000,
    DurationUnit.MINUTES: 60_000,
    DurationUnit.HOURS: 3_600_000,
}


def duration_ms(start: datetime, end: datetime) -> int:
    """Whole milliseconds from start to end."""
    return (end - start) // _MILLISECOND


def ensure_ascending(events: Sequence[ConnectionEvent]) -> None:
    """
    Raise UnsortedEventsError unless timestamps never decrease.

    Equal timestamps are allowed; their relative order is kept as given.
    Timestamps must be all naive or all timezone-aware.

    Raises:
        MixedTimezoneError: If naive and aware timestamps are mixed.
        UnsortedEventsError: If a timestamp is earlier than its predecessor.
    """
    if len(events) < 2:
        return
    aware = np.array([e.timestamp.utcoffset() is not None for e in events], dtype=bool)
    mixed = np.flatnonzero(aware != aware[0])
    if mixed.size:
        raise MixedTimezoneError(
            "Event timestamps mix naive and timezone-aware values", index=int(mixed[0])
        )
    epochs = np.array([e.timestamp.timestamp() for e in events], dtype=float)
    backwards = np.flatnonzero(np.diff(epochs) < 0)
    if backwards.size:
        raise UnsortedEventsError(
            "Events must be sorted by ascending timestamp", index=int(backwards[0]) + 1
        )


def _run_bounds(events: Sequence[ConnectionEvent]) -> np.ndarray:
    """Start index of every run, followed by len(events)."""
    connected = np.fromiter(
        (e.status == ConnectionStatus.CONNECTED for e in events), dtype=bool, count=len(events)
    )
    changes = np.flatnonzero(connected[1:] != connected[:-1]) + 1
    return np.concatenate(([0], changes, [len(events)]))


def segment_periods(events: Sequence[ConnectionEvent]) -> List[Period]:
    """
    Partition ascending events into maximal same-status periods.

    A period ends at the timestamp of the first event with a different
    status; the final period ends at the last event's own timestamp. When
    the last event starts a new run by itself, the trailing period has
    zero duration and is still returned.

    Raises:
        MixedTimezoneError: If naive and aware timestamps are mixed.
        UnsortedEventsError: If the events are not in ascending order.
    """
    events = list(events)
    if not events:
        return []
    ensure_ascending(events)

    last = len(events) - 1
    bounds = _run_bounds(events)
    periods = []
    for start_idx, stop_idx in zip(bounds[:-1].tolist(), bounds[1:].tolist()):
        first = events[start_idx]
        closing = events[min(stop_idx, last)]
        periods.append(
            Period(
                start=first.timestamp,
                end=closing.timestamp,
                status=ConnectionStatus(first.status),
                duration_ms=duration_ms(first.timestamp, closing.timestamp),
                event_count=stop_idx - start_idx,
            )
        )

    logger.debug("Segmented %d events into %d periods", len(events), len(periods))
    return periods


def _coerce_unit(unit: Union[DurationUnit, str]) -> DurationUnit:
    try:
        return DurationUnit(unit)
    except ValueError:
        raise ConfigurationError(f"Unknown duration unit: {unit!r}") from None


def _default_label(moment: datetime) -> str:
    return moment.isoformat(sep=" ", timespec="seconds")


def project_durations(
    events: Sequence[ConnectionEvent],
    unit: Union[DurationUnit, str] = DurationUnit.MINUTES,
    label_format: Optional[Callable[[datetime], str]] = None,
) -> List[DurationPoint]:
    """
    Project each period's duration into chart points.

    Args:
        events: Ascending events.
        unit: seconds, minutes or hours.
        label_format: Formats a period's start timestamp. Defaults to
            ``YYYY-MM-DD HH:MM:SS`` in the timestamp's own zone.

    Raises:
        ConfigurationError: If ``unit`` is not a known DurationUnit.
        UnsortedEventsError: If the events are not in ascending order.
    """
    unit = _coerce_unit(unit)
    periods = segment_periods(events)
    if not periods:
        return []

    fmt = label_format or _default_label
    values = np.array([p.duration_ms for p in periods], dtype=float) / unit.divisor
    return [
        DurationPoint(label=fmt(p.start), value=float(v), status=p.status)
        for p, v in zip(periods, values)
    ]


def state_duration_at(events: Sequence[ConnectionEvent], index: int) -> Optional[StateDuration]:
    """
    Time spent in a state as of the event at ``index``.

    At a transition, reports the full length of the period that just
    ended. Otherwise reports the time elapsed since the current period
    began. The first event has no history and yields None.

    Raises:
        IndexError: If ``index`` is outside the sequence.
        UnsortedEventsError: If the events are not in ascending order.
    """
    events = list(events)
    if not 0 <= index < len(events):
        raise IndexError(f"event index {index} out of range for {len(events)} events")
    if index == 0:
        return None

    periods = segment_periods(events)
    offset = 0
    for pos, period in enumerate(periods):
        if index < offset + period.event_count:
            break
        offset += period.event_count

    if index == offset:
        previous = periods[pos - 1]
        return StateDuration(previous.status, previous.duration_ms, is_transition=True)

    elapsed = duration_ms(period.start, events[index].timestamp)
    return StateDuration(period.status, elapsed, is_transition=False)
