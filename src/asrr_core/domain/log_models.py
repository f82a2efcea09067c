from __future__ import annotations

"""
Log Target Data Models.

Defines the severity scale, the immutable target configuration and the
structured results returned by a registration. Severity values are the
native `logging` integers so they can be compared against LogRecords
directly.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from fnmatch import fnmatchcase
from typing import Any, Dict, Optional, Union

from asrr_core.domain.constants import (
    CATCH_ALL_FILTER,
    DEFAULT_LAYOUT,
    DEFAULT_MIN_LEVEL,
)

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


# -----------------------------------------------------------------------------
# SEVERITY
# -----------------------------------------------------------------------------

class Severity(IntEnum):
    """Ordered log severity: Trace < Debug < Info < Warn < Error."""
    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


_SEVERITY_NAMES: Dict[str, Severity] = {
    "Trace": Severity.TRACE,
    "Debug": Severity.DEBUG,
    "Info": Severity.INFO,
    "Warn": Severity.WARN,
    "Error": Severity.ERROR,
}


def parse_severity(value: Union[str, Severity, None]) -> Severity:
    """
    Map a severity name to its Severity member.

    Only the exact names "Trace", "Debug", "Info", "Warn" and "Error" are
    recognized; "warn", "WARNING" or " Info " are not.

    Args:
        value: Severity name, an existing Severity, or None.

    Returns:
        Severity: The matching member. Anything unrecognized yields
        Severity.TRACE, the most verbose level.
    """
    if isinstance(value, Severity):
        return value
    if not isinstance(value, str):
        return Severity.TRACE
    return _SEVERITY_NAMES.get(value, Severity.TRACE)


# -----------------------------------------------------------------------------
# TARGET CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LogTargetConfiguration:
    """
    Immutable description of a named file target.

    Attributes:
        log_name: Unique registration key. Re-registering replaces the target.
        log_file_path: Path of the backing log file.
        log_layout: `logging.Formatter` format string for each line.
        name_filter: Glob matched against logger names ("*" routes everything).
        min_level: Minimum severity name, see `parse_severity`.
        date_format: Optional `datefmt` for the formatter.
        open_on_start_up: UI hint, not used for routing.
        open_on_button: UI hint, not used for routing.
    """
    log_name: str
    log_file_path: str
    log_layout: str = DEFAULT_LAYOUT
    name_filter: str = CATCH_ALL_FILTER
    min_level: str = DEFAULT_MIN_LEVEL
    date_format: Optional[str] = None
    open_on_start_up: bool = False
    open_on_button: bool = False

    @property
    def severity(self) -> Severity:
        return parse_severity(self.min_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_name": self.log_name,
            "log_file_path": self.log_file_path,
            "log_layout": self.log_layout,
            "name_filter": self.name_filter,
            "min_level": self.min_level,
            "date_format": self.date_format,
            "open_on_start_up": self.open_on_start_up,
            "open_on_button": self.open_on_button,
        }


@dataclass(frozen=True)
class RoutingRule:
    """
    Binding of (logger name glob, minimum severity) to a named target.

    Attributes:
        name_filter: fnmatch-style pattern, case sensitive.
        min_level: Lowest severity routed to the target.
        target_name: Name of the registered target receiving the events.
    """
    name_filter: str
    min_level: Severity
    target_name: str

    def matches(self, logger_name: str, levelno: int) -> bool:
        return levelno >= self.min_level and fnmatchcase(logger_name, self.name_filter)


# -----------------------------------------------------------------------------
# RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RolloverResult:
    """
    Outcome of the file preparation step of a registration.

    Attributes:
        path: The target file path.
        created: True if the file did not exist and was created.
        line_count: Lines counted before any archive, None if never counted.
        archive_path: Archive written during this call, if any.
        error: Description of a suppressed filesystem failure.
    """
    path: str
    created: bool = False
    line_count: Optional[int] = None
    archive_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def archived(self) -> bool:
        return self.archive_path is not None

    @property
    def degraded(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class RegistrationResult:
    """Summary of a completed target registration."""
    name: str
    configuration: LogTargetConfiguration
    severity: Severity
    rollover: RolloverResult

    @property
    def degraded(self) -> bool:
        return self.rollover.degraded
