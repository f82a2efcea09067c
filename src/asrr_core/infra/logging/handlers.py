from __future__ import annotations

"""
Logging Handlers for Named Targets.

Provides the file handler factory used for named targets and the rule
filter that decides which records a target accepts.
"""

import logging
from typing import List, Optional

from asrr_core.domain.log_models import RoutingRule


class RoutingRuleFilter(logging.Filter):
    """
    Accept a record when any bound rule matches its logger name and level.

    The rule list is shared with the registry, so rules added after the
    handler was created apply immediately.
    """

    def __init__(self, rules: List[RoutingRule]) -> None:
        super().__init__()
        self.rules = rules

    def filter(self, record: logging.LogRecord) -> bool:
        return any(rule.matches(record.name, record.levelno) for rule in self.rules)


def create_target_file_handler(
        name: str,
        log_file: str,
        layout: str,
        datefmt: Optional[str] = None,
) -> logging.FileHandler:
    """
    Build the file handler backing a named target.

    The handler opens its file lazily on the first emitted record and
    appends to existing content. Routing filters are attached by the
    registry when the handler is added as a target.

    Args:
        name: Target name, stored as the handler name.
        log_file: Path of the backing file.
        layout: `logging.Formatter` format string.
        datefmt: Optional timestamp format.

    Returns:
        logging.FileHandler: Unfiltered handler.
    """
    fh = logging.FileHandler(log_file, mode="a", encoding="utf-8", delay=True)
    fh.set_name(name)
    fh.setLevel(logging.NOTSET)
    fh.setFormatter(logging.Formatter(layout, datefmt=datefmt))
    return fh
