"""
Event and result data classes for connectivity analysis.

Every class here is a frozen dataclass: inputs are never mutated and
results are rebuilt from scratch on each computation, so two runs over the
same events compare equal field for field.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class ConnectionStatus(str, Enum):
    """Binary connectivity state of a device."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @classmethod
    def from_flag(cls, flag: bool) -> "ConnectionStatus":
        return cls.CONNECTED if flag else cls.DISCONNECTED

    @property
    def label(self) -> str:
        """Short ON/OFF label used in tooltips."""
        return "ON" if self is ConnectionStatus.CONNECTED else "OFF"


@dataclass(frozen=True)
class ConnectionEvent:
    """A single timestamped observation of a device's connectivity.

    Attributes:
        status: Connected or disconnected.
        timestamp: When the state was observed.
        raw_epoch_seconds: Source epoch value, when the record carried one.
        serial: Device serial number (opaque grouping key).
        device_id: Device identifier (opaque grouping key).
    """

    status: ConnectionStatus
    timestamp: datetime
    raw_epoch_seconds: Optional[int] = None
    serial: str = ""
    device_id: str = ""

    def __post_init__(self) -> None:
        # Accept plain "connected"/"disconnected" strings from callers.
        object.__setattr__(self, "status", ConnectionStatus(self.status))

    @property
    def is_connected(self) -> bool:
        return self.status == ConnectionStatus.CONNECTED


@dataclass(frozen=True)
class Period:
    """A maximal run of events sharing one status.

    Attributes:
        start: Timestamp of the first event in the run.
        end: Timestamp of the event that ended the run, or of the run's
            own last event when it closes the sequence.
        status: Status held throughout the run.
        duration_ms: Whole milliseconds between start and end.
        event_count: Number of events in the run.
    """

    start: datetime
    end: datetime
    status: ConnectionStatus
    duration_ms: int
    event_count: int = 1


@dataclass(frozen=True)
class Summary:
    """Aggregate statistics over one event sequence."""

    total_count: int = 0
    connected_count: int = 0
    disconnected_count: int = 0
    uptime_percent: float = 0.0
    first_seen: Optional[datetime] = None
    last_seen: Optional[datetime] = None
    longest_connected_streak: int = 0
    longest_disconnected_streak: int = 0
    longest_on_period: Optional[Period] = None
    longest_off_period: Optional[Period] = None


@dataclass(frozen=True)
class EpochWindow:
    """Query window in whole epoch seconds."""

    from_epoch_seconds: int
    to_epoch_seconds: int

    @property
    def span_seconds(self) -> int:
        return self.to_epoch_seconds - self.from_epoch_seconds


@dataclass(frozen=True)
class LogExtraction:
    """Fields pulled out of one raw log line.

    ``flag`` is tri-state: True, False, or None when the line carries no
    relay status.
    """

    flag: Optional[bool]
    relay_start_epoch: Optional[int]
    relay_duration_seconds: Optional[int]
    display_message: str


@dataclass(frozen=True)
class DurationPoint:
    """One bar of the period-duration chart."""

    label: str
    value: float
    status: ConnectionStatus


@dataclass(frozen=True)
class StateDuration:
    """How long a device had been in a state at a given event.

    For a transition event this is the length of the period that just
    ended (``status`` is that period's status); otherwise it is the time
    elapsed in the current period.
    """

    status: ConnectionStatus
    duration_ms: int
    is_transition: bool


@dataclass(frozen=True)
class SerialStats:
    """Event counts for one serial number."""

    serial: str
    count: int
    connected: int
    disconnected: int


@dataclass(frozen=True)
class PeriodStats:
    """Duration statistics over all periods of one status."""

    status: ConnectionStatus
    count: int
    total_ms: int
    mean_ms: float
    median_ms: float
    max_ms: int
