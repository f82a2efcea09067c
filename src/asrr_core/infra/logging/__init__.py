from __future__ import annotations

from .core import get_recent_logs
from .handlers import RoutingRuleFilter, create_target_file_handler

__all__ = [
    "RoutingRuleFilter",
    "create_target_file_handler",
    "get_recent_logs",
]
