"""
Regex patterns for log field extraction and record normalization.
"""

import re

# =============================================================================
# LOG LINE FIELDS
# =============================================================================

# Relay status flag: "rls_sts": true / rls_sts=FALSE
RLS_STS_PATTERN = re.compile(r'\brls_sts\b"?\s*[:=]\s*"?(true|false)\b', re.I)

# Relay start epoch: "relay_start_time": 1700000000
RELAY_START_PATTERN = re.compile(r'\brelay_start_time\b"?\s*[:=]\s*"?(-?\d+)\b', re.I)

# Relay duration in seconds: "duration": 45 (not relay_duration or durations)
DURATION_PATTERN = re.compile(r'(?<![\w])duration\b"?\s*[:=]\s*"?(-?\d+)\b', re.I)

# Display prefix: [09.12.2025 10:00:00] [LOG]
LOG_PREFIX_PATTERN = re.compile(r'^\s*\[[^\]]*\]\s*\[LOG\]\s*', re.I)

# =============================================================================
# RAW RECORD FIELDS
# =============================================================================

# Mongo-style id wrapper: ObjectId(64f0c2...)
OBJECT_ID_PATTERN = re.compile(r'ObjectId\((.*?)\)')

# Plain integer or decimal number, possibly signed
NUMERIC_PATTERN = re.compile(r'^\s*[-+]?\d+(?:\.\d+)?\s*$')
