from __future__ import annotations

"""
Domain Constants for Log Target Management.

Centralizes the rollover threshold, archive naming rules and the layout
presets shared by the default and error-report targets.
"""

# -----------------------------------------------------------------------------
# ROLLOVER
# -----------------------------------------------------------------------------
ROLLOVER_LINE_THRESHOLD = 10000
LOG_SUFFIX = ".log"

# Locale date and time, space separated. '/' and ':' are replaced before use.
ARCHIVE_TIMESTAMP_FORMAT = "%x %X"
ARCHIVE_TIMESTAMP_REPLACEMENTS = (("/", "-"), (":", "_"))

# -----------------------------------------------------------------------------
# TARGET PRESETS
# -----------------------------------------------------------------------------
CATCH_ALL_FILTER = "*"

DEFAULT_LAYOUT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %I:%M:%S"
DEFAULT_MIN_LEVEL = "Trace"

ERROR_REPORT_LAYOUT = "%(levelname)s | %(message)s"
ERROR_REPORT_MIN_LEVEL = "Warn"

# -----------------------------------------------------------------------------
# PATHS
# -----------------------------------------------------------------------------
LOGS_SUBDIR = "logs"
TARGETS_CONFIG_FILE = "log_targets.json"

PROGRAMMATIC_CONFIG_MESSAGE = "Using programmatic config"
