"""
Pytest configuration and shared fixtures for connectivity analysis tests.
"""

import pytest
import sys
import os
from datetime import datetime, timedelta, timezone

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from connectivity_analyzer.events import ConnectionEvent, ConnectionStatus

ON = ConnectionStatus.CONNECTED
OFF = ConnectionStatus.DISCONNECTED

BASE = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_events(pairs, base=BASE, serial="SN-001"):
    """Build events from (seconds_offset, status) pairs."""
    return [
        ConnectionEvent(status=status, timestamp=base + timedelta(seconds=offset), serial=serial)
        for offset, status in pairs
    ]


# =============================================================================
# EVENT SEQUENCE FIXTURES
# =============================================================================

@pytest.fixture
def on_off_on_events():
    """ON at 0s, OFF at 10s, ON at 40s."""
    return make_events([(0, ON), (10, OFF), (40, ON)])


@pytest.fixture
def streak_events():
    """ON, ON, OFF, ON, ON, ON one minute apart."""
    statuses = [ON, ON, OFF, ON, ON, ON]
    return make_events([(i * 60, s) for i, s in enumerate(statuses)])


@pytest.fixture
def mixed_events():
    """A longer day of flapping connectivity."""
    return make_events([
        (0, ON),
        (300, ON),
        (600, OFF),
        (900, OFF),
        (1200, OFF),
        (1500, ON),
        (3600, ON),
        (3700, OFF),
        (3800, ON),
    ])


# =============================================================================
# LOG LINE FIXTURES
# =============================================================================

@pytest.fixture
def sample_log_lines():
    """Raw device log lines as returned by the log source."""
    return [
        '[09.12.2025 10:00:00] [LOG] relay update {"rls_sts": true, "relay_start_time": 1700000000, "duration": 45}',
        '[09.12.2025 10:00:05] [LOG]   device booted',
        '[09.12.2025 10:00:07] [log] {"rls_sts": FALSE}',
        'heartbeat ok',
        '[09.12.2025 10:00:09] [LOG]    ',
    ]


# =============================================================================
# RAW ROW FIXTURES
# =============================================================================

@pytest.fixture
def sample_rows():
    """Raw export rows, including ones the normalizer must drop."""
    return [
        {"serial_no": "SN-002", "device_Id": "ObjectId(64f0c2aa)", "con_status": "true",
         "conn_sts_time": "1705320000"},
        {"serial_no": "SN-001", "device_Id": "dev-1", "con_status": True,
         "conn_sts_time": 1705320060},
        {"serial_no": "SN-001", "device_Id": "dev-1", "con_status": "False",
         "conn_sts_time": "1705320120000"},
        {"serial_no": "SN-001", "device_Id": "dev-1", "con_status": " TRUE ",
         "conn_sts_time": "", "updatedAt": "2024-01-15T12:05:00Z"},
        {"serial_no": "  ", "con_status": "true", "conn_sts_time": "1705320000"},
        {"serial_no": "SN-003", "con_status": "true", "conn_sts_time": "42"},
    ]


@pytest.fixture
def build_events():
    """Factory fixture: build_events([(offset_seconds, status), ...])."""
    return make_events
