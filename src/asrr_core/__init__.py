from __future__ import annotations

from asrr_core.domain.log_models import (
    LogTargetConfiguration,
    RegistrationResult,
    RolloverResult,
    RoutingRule,
    Severity,
    parse_severity,
)
from asrr_core.log.handler import (
    LogTargetManager,
    add_default_temp_log_target,
    add_error_report_temp_log_target,
    add_log_target,
    get_default_manager,
    remove_log_target,
)
from asrr_core.log.registry import SinkRegistry

__version__ = "1.0.0"

__all__ = [
    "LogTargetConfiguration",
    "LogTargetManager",
    "RegistrationResult",
    "RolloverResult",
    "RoutingRule",
    "Severity",
    "SinkRegistry",
    "add_default_temp_log_target",
    "add_error_report_temp_log_target",
    "add_log_target",
    "get_default_manager",
    "parse_severity",
    "remove_log_target",
]
