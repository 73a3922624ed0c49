"""
Normalization of raw connection rows and per-serial bookkeeping.

Rows arrive as dictionaries shaped like the upstream export::

    {"serial_no": "SN-001", "device_Id": "ObjectId(64f0...)",
     "con_status": "true", "conn_sts_time": "1700000000",
     "createdAt": "...", "updatedAt": "..."}
"""

import math
from collections import defaultdict
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .events import ConnectionEvent, ConnectionStatus, SerialStats
from .exceptions import DataValidationError
from .logging_config import get_logger
from .patterns import NUMERIC_PATTERN, OBJECT_ID_PATTERN
from .ranges import parse_iso_timestamp

logger = get_logger(__name__)

# Numeric timestamps above these thresholds are epoch milliseconds / seconds
EPOCH_MS_THRESHOLD = 1e12
EPOCH_S_THRESHOLD = 1e9

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _from_number(value: float) -> Optional[datetime]:
    if math.isnan(value) or math.isinf(value):
        return None
    try:
        if value > EPOCH_MS_THRESHOLD:
            return EPOCH + timedelta(milliseconds=value)
        if value > EPOCH_S_THRESHOLD:
            return EPOCH + timedelta(seconds=value)
    except OverflowError:
        logger.debug("Ignoring out-of-range epoch value %r", value)
    return None


def parse_date(raw: Any, tz: tzinfo = timezone.utc) -> Optional[datetime]:
    """
    Parse an ISO string, numeric string or epoch number into a datetime.

    Numbers above 1e12 are read as epoch milliseconds, numbers above 1e9
    as epoch seconds; smaller numbers are rejected. Naive ISO strings are
    read as wall time in ``tz``.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return _from_number(float(raw))

    text = str(raw)
    if NUMERIC_PATTERN.match(text):
        return _from_number(float(text))
    return parse_iso_timestamp(text, tz)


def clean_device_id(raw: Optional[str]) -> str:
    """Unwrap ``ObjectId(...)`` identifiers; otherwise just strip."""
    if not raw:
        return ""
    match = OBJECT_ID_PATTERN.search(raw)
    if match and match.group(1):
        return match.group(1)
    return raw.strip()


def _is_numeric(raw: Any) -> bool:
    if isinstance(raw, bool):
        return False
    if isinstance(raw, (int, float)):
        return True
    return isinstance(raw, str) and NUMERIC_PATTERN.match(raw) is not None


def _status_flag(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw).strip().lower() == "true"


def normalize_record(
    row: Mapping[str, Any], tz: tzinfo = timezone.utc, strict: bool = False
) -> Optional[ConnectionEvent]:
    """
    Convert one raw row into a ConnectionEvent.

    The timestamp comes from ``conn_sts_time``, then ``updatedAt``, then
    ``createdAt``. Rows without a serial or any usable timestamp are
    dropped (None) unless ``strict`` is set.

    Raises:
        DataValidationError: In strict mode, for a row that would be dropped.
    """
    serial = str(row.get("serial_no") or "").strip()
    if not serial:
        if strict:
            raise DataValidationError("Row has no serial number", field="serial_no")
        logger.debug("Dropping row without serial: %r", row)
        return None

    primary = parse_date(row.get("conn_sts_time"), tz)
    timestamp = primary or parse_date(row.get("updatedAt"), tz) or parse_date(row.get("createdAt"), tz)
    if timestamp is None:
        if strict:
            raise DataValidationError(f"Row for {serial} has no usable timestamp", field="conn_sts_time")
        logger.debug("Dropping row for %s without timestamp", serial)
        return None

    raw_epoch = None
    if primary is not None and _is_numeric(row.get("conn_sts_time")):
        raw_epoch = math.floor(primary.timestamp())

    return ConnectionEvent(
        status=ConnectionStatus.from_flag(_status_flag(row.get("con_status"))),
        timestamp=timestamp,
        raw_epoch_seconds=raw_epoch,
        serial=serial,
        device_id=clean_device_id(row.get("device_Id")),
    )


def sort_events(events: Iterable[ConnectionEvent]) -> List[ConnectionEvent]:
    """Stable ascending sort by timestamp."""
    return sorted(events, key=lambda e: e.timestamp)


def normalize_rows(rows: Iterable[Mapping[str, Any]], tz: tzinfo = timezone.utc) -> List[ConnectionEvent]:
    """Normalize rows, drop unusable ones, and sort the rest ascending."""
    events = []
    dropped = 0
    for row in rows:
        event = normalize_record(row, tz)
        if event is None:
            dropped += 1
        else:
            events.append(event)

    if dropped:
        logger.info("Dropped %d of %d rows during normalization", dropped, dropped + len(events))
    return sort_events(events)


def events_for_serial(events: Iterable[ConnectionEvent], serial: str) -> List[ConnectionEvent]:
    return [e for e in events if e.serial == serial]


def filter_by_bounds(
    events: Iterable[ConnectionEvent],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> List[ConnectionEvent]:
    """Keep events with start <= timestamp <= end; missing bounds are open."""
    kept = []
    for event in events:
        if start is not None and event.timestamp < start:
            continue
        if end is not None and event.timestamp > end:
            continue
        kept.append(event)
    return kept


def serial_roster(events: Iterable[ConnectionEvent]) -> List[SerialStats]:
    """Per-serial event counts, sorted by serial."""
    counts: Dict[str, Dict[str, int]] = defaultdict(lambda: {"count": 0, "connected": 0})
    for event in events:
        entry = counts[event.serial]
        entry["count"] += 1
        if event.is_connected:
            entry["connected"] += 1

    return [
        SerialStats(
            serial=serial,
            count=entry["count"],
            connected=entry["connected"],
            disconnected=entry["count"] - entry["connected"],
        )
        for serial, entry in sorted(counts.items())
    ]


def search_roster(roster: Iterable[SerialStats], query: str) -> List[SerialStats]:
    """Case-insensitive substring match on serial; a blank query keeps all."""
    needle = query.strip().lower()
    return [s for s in roster if needle in s.serial.lower()]
