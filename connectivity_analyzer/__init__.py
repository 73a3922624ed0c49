"""
Connectivity Analyzer

Pure analytics over device connectivity events: ON/OFF period
segmentation, uptime and streak summaries, query range resolution, and
field extraction from device log lines.
"""

from .events import (
    ConnectionEvent,
    ConnectionStatus,
    DurationPoint,
    EpochWindow,
    LogExtraction,
    Period,
    PeriodStats,
    SerialStats,
    StateDuration,
    Summary,
)
from .exceptions import (
    ConfigurationError,
    ConnectivityAnalysisError,
    DataValidationError,
    MixedTimezoneError,
    PreconditionViolation,
    UnsortedEventsError,
)
from .formatting import describe_state_duration, format_duration
from .logs import extract_all, extract_log_fields
from .patterns import (
    DURATION_PATTERN,
    LOG_PREFIX_PATTERN,
    OBJECT_ID_PATTERN,
    RELAY_START_PATTERN,
    RLS_STS_PATTERN,
)
from .ranges import RangeSelector, resolve_epoch_window
from .records import (
    filter_by_bounds,
    normalize_record,
    normalize_rows,
    search_roster,
    serial_roster,
    sort_events,
)
from .segments import DurationUnit, project_durations, segment_periods, state_duration_at
from .summary import compute_summary, period_statistics

__all__ = [
    # Data model
    "ConnectionEvent",
    "ConnectionStatus",
    "DurationPoint",
    "EpochWindow",
    "LogExtraction",
    "Period",
    "PeriodStats",
    "SerialStats",
    "StateDuration",
    "Summary",
    # Exceptions
    "ConnectivityAnalysisError",
    "PreconditionViolation",
    "UnsortedEventsError",
    "MixedTimezoneError",
    "DataValidationError",
    "ConfigurationError",
    # Range resolution
    "RangeSelector",
    "resolve_epoch_window",
    # Segmentation and summaries
    "DurationUnit",
    "segment_periods",
    "project_durations",
    "state_duration_at",
    "compute_summary",
    "period_statistics",
    # Log extraction
    "extract_log_fields",
    "extract_all",
    "RLS_STS_PATTERN",
    "RELAY_START_PATTERN",
    "DURATION_PATTERN",
    "LOG_PREFIX_PATTERN",
    "OBJECT_ID_PATTERN",
    # Records
    "normalize_record",
    "normalize_rows",
    "sort_events",
    "filter_by_bounds",
    "serial_roster",
    "search_roster",
    # Formatting
    "format_duration",
    "describe_state_duration",
]

__version__ = "1.0.0"
