"""
Epoch range resolution for connectivity queries.

Maps a named range selector (plus optional custom bounds) onto a concrete
``EpochWindow`` that the data source is queried with. The resolver is a
pure function of its arguments: "now" and the local timezone are always
passed in.
"""

import math
from datetime import datetime, time, timedelta, tzinfo
from enum import Enum
from typing import Optional, Union

from .events import EpochWindow
from .logging_config import get_logger

logger = get_logger(__name__)

LAST_24H_SPAN = timedelta(hours=24)
LAST_7D_SPAN = timedelta(days=7)
CUSTOM_DEFAULT_SPAN = LAST_7D_SPAN


class RangeSelector(str, Enum):
    """Named query ranges offered by the dashboard."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_24H = "last24h"
    LAST_7D = "last7d"
    CUSTOM = "custom"


def to_epoch_seconds(moment: datetime) -> int:
    """Whole epoch seconds, flooring any sub-second part."""
    return math.floor(moment.timestamp())


def _aware(moment: datetime, zone: Optional[tzinfo]) -> datetime:
    # Naive datetimes are local wall time, as datetime.timestamp() treats them.
    if zone is None:
        return moment.astimezone()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.astimezone(zone)


def _local_midnight(moment: datetime, zone: Optional[tzinfo], days_back: int = 0) -> datetime:
    day = moment.date() - timedelta(days=days_back)
    if zone is None:
        # astimezone() on a naive value applies the system offset for that date
        return datetime.combine(day, time(0)).astimezone()
    return datetime.combine(day, time(0), tzinfo=zone)


def parse_iso_timestamp(raw: Optional[str], zone: Optional[tzinfo]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp, returning None when absent or invalid.

    A trailing ``Z`` is accepted as UTC. Naive values are read as wall
    time in ``zone``, or in the system local zone when ``zone`` is None.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Ignoring unparseable timestamp %r", raw)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.astimezone() if zone is None else parsed.replace(tzinfo=zone)
    return parsed


def resolve_epoch_window(
    selector: Union[RangeSelector, str],
    now: datetime,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    tz: Optional[tzinfo] = None,
) -> EpochWindow:
    """
    Resolve a range selector into an epoch-second query window.

    Args:
        selector: One of the RangeSelector values. Anything unrecognized
            falls back to the last-24-hours rule.
        now: Current instant. Naive values are read as system local time.
        date_from: ISO-8601 start, only consulted for ``custom``.
        date_to: ISO-8601 end, only consulted for ``custom``.
        tz: Zone whose midnight bounds ``today`` and ``yesterday``.
            Defaults to the system local zone, with its own offset
            looked up for each midnight so DST switches are honoured.

    Returns:
        EpochWindow with both bounds floored to whole seconds. Custom
        bounds are returned as given, even when inverted.
    """
    try:
        selector = RangeSelector(selector)
    except ValueError:
        logger.warning("Unknown range selector %r, using %s", selector, RangeSelector.LAST_24H.value)
        selector = RangeSelector.LAST_24H

    zone = tz
    current = _aware(now, zone)

    if selector is RangeSelector.TODAY:
        start, end = _local_midnight(current, zone), current
    elif selector is RangeSelector.YESTERDAY:
        start = _local_midnight(current, zone, days_back=1)
        end = _local_midnight(current, zone)
    elif selector is RangeSelector.LAST_7D:
        start, end = current - LAST_7D_SPAN, current
    elif selector is RangeSelector.CUSTOM:
        start = parse_iso_timestamp(date_from, zone) or current - CUSTOM_DEFAULT_SPAN
        end = parse_iso_timestamp(date_to, zone) or current
    else:
        start, end = current - LAST_24H_SPAN, current

    window = EpochWindow(to_epoch_seconds(start), to_epoch_seconds(end))
    logger.debug(
        "Resolved %s to [%d, %d]", selector.value, window.from_epoch_seconds, window.to_epoch_seconds
    )
    return window
