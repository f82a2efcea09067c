from __future__ import annotations

"""
Log Target Manager.

Registers named file targets on a SinkRegistry. Each registration prepares
the backing file first (directory creation, empty file creation and
line-count based rollover) and then replaces the routing of that name.

File preparation is best-effort: a failure there never prevents the target
from being registered. The failure is reported in the returned
RegistrationResult instead of being raised.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from asrr_core.domain.constants import (
    CATCH_ALL_FILTER,
    DEFAULT_DATE_FORMAT,
    DEFAULT_LAYOUT,
    DEFAULT_MIN_LEVEL,
    ERROR_REPORT_LAYOUT,
    ERROR_REPORT_MIN_LEVEL,
    PROGRAMMATIC_CONFIG_MESSAGE,
    ROLLOVER_LINE_THRESHOLD,
)
from asrr_core.domain.log_models import (
    LogTargetConfiguration,
    RegistrationResult,
    RolloverResult,
    RoutingRule,
)
from asrr_core.infra.fs import (
    archive_file,
    build_archive_path,
    count_lines,
    ensure_file,
    ensure_parent_dir,
    get_default_log_path,
)
from asrr_core.infra.logging.core import get_recent_logs
from asrr_core.infra.logging.handlers import create_target_file_handler
from asrr_core.log.registry import SinkRegistry

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MANAGER
# -----------------------------------------------------------------------------

class LogTargetManager:
    """
    Creates, replaces and removes named file targets.

    Args:
        registry: Routing table the targets are installed on. A registry
            bound to the root logger is created when omitted.
    """

    def __init__(self, registry: Optional[SinkRegistry] = None) -> None:
        self.registry = registry if registry is not None else SinkRegistry()

    def register_target(self, configuration: LogTargetConfiguration) -> RegistrationResult:
        """
        Register (or replace) the target described by `configuration`.

        Steps:
        1. Prepare the backing file, archiving it when it holds more than
           ROLLOVER_LINE_THRESHOLD lines.
        2. Remove any target registered under the same name.
        3. Install a file target plus a rule routing records whose logger
           name matches `name_filter` at or above `min_level`.

        Args:
            configuration: Target description.

        Returns:
            RegistrationResult: Effective configuration and file preparation
            outcome. Filesystem failures show up as `result.degraded`.
        """
        name = configuration.log_name
        rollover = self._prepare_file(configuration.log_file_path)
        severity = configuration.severity
        effective = replace(configuration, open_on_button=True)

        self.registry.remove_target(name)
        handler = create_target_file_handler(
            name,
            configuration.log_file_path,
            configuration.log_layout,
            datefmt=configuration.date_format,
        )
        self.registry.add_target(name, handler)
        self.registry.add_rule(RoutingRule(configuration.name_filter, severity, name))
        self.registry.activate()

        self.registry.get_logger(__name__).debug(PROGRAMMATIC_CONFIG_MESSAGE)

        return RegistrationResult(
            name=name,
            configuration=effective,
            severity=severity,
            rollover=rollover,
        )

    def register_all(self, configurations: Iterable[LogTargetConfiguration]) -> List[RegistrationResult]:
        return [self.register_target(cfg) for cfg in configurations]

    def remove_target(self, name: str) -> bool:
        """Remove a named target. Unknown names are ignored."""
        return self.registry.remove_target(name)

    def create_default_target(self, name: str, log_file_path: Optional[str] = None) -> RegistrationResult:
        """
        Register a catch-all Trace target with the full line layout.

        Args:
            name: Target name.
            log_file_path: Backing file. Defaults to `<user data>/logs/<name>.log`.
        """
        configuration = LogTargetConfiguration(
            log_name=name,
            log_file_path=log_file_path or get_default_log_path(name),
            log_layout=DEFAULT_LAYOUT,
            name_filter=CATCH_ALL_FILTER,
            min_level=DEFAULT_MIN_LEVEL,
            date_format=DEFAULT_DATE_FORMAT,
            open_on_start_up=False,
        )
        return self.register_target(configuration)

    def create_error_report_target(self, name: str, log_file_path: Optional[str] = None) -> RegistrationResult:
        """Register a catch-all Warn target with the short `level | message` layout."""
        configuration = LogTargetConfiguration(
            log_name=name,
            log_file_path=log_file_path or get_default_log_path(name),
            log_layout=ERROR_REPORT_LAYOUT,
            name_filter=CATCH_ALL_FILTER,
            min_level=ERROR_REPORT_MIN_LEVEL,
            open_on_start_up=False,
        )
        return self.register_target(configuration)

    def read_target_tail(self, name: str, n_lines: int = 100) -> str:
        """
        Return the last lines written to a registered target.

        Args:
            name: Target name.
            n_lines: Maximum number of lines.

        Returns:
            str: File tail, or a diagnostic message if unavailable.
        """
        path = self.registry.target_path(name)
        if path is None:
            return f"Log target '{name}' is not registered."

        handler = self.registry.get_target(name)
        if handler is not None:
            handler.flush()
        return get_recent_logs(path, n_lines)

    # -------------------------------------------------------------------------
    # Private Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _prepare_file(path: str) -> RolloverResult:
        """Ensure the file exists and archive it once it is over the threshold."""
        created = False
        line_count: Optional[int] = None
        try:
            ensure_parent_dir(path)
            created = ensure_file(path)
            line_count = count_lines(path)

            if line_count > ROLLOVER_LINE_THRESHOLD:
                archive_path = build_archive_path(path)
                archive_file(path, archive_path)
                logger.debug(f"Archived {line_count} lines of '{path}' to '{archive_path}'")
                return RolloverResult(path, created, line_count, archive_path)

        # Rollover is best-effort; logging setup continues on any failure
        except Exception as e:
            logger.debug(f"Log file preparation failed for '{path}': {e}")
            return RolloverResult(path, created, line_count, error=str(e) or type(e).__name__)

        return RolloverResult(path, created, line_count)


# -----------------------------------------------------------------------------
# PROCESS-WIDE DEFAULT MANAGER
# -----------------------------------------------------------------------------

_default_manager: Optional[LogTargetManager] = None


def get_default_manager() -> LogTargetManager:
    """Return the manager bound to the root logger, creating it on first use."""
    global _default_manager
    if _default_manager is None:
        _default_manager = LogTargetManager()
    return _default_manager


def add_log_target(configuration: LogTargetConfiguration) -> RegistrationResult:
    return get_default_manager().register_target(configuration)


def remove_log_target(name: str) -> bool:
    """Remove a target from the default manager; no-op before any registration."""
    if _default_manager is None:
        return False
    return _default_manager.remove_target(name)


def add_default_temp_log_target(name: str, log_file_path: Optional[str] = None) -> RegistrationResult:
    return get_default_manager().create_default_target(name, log_file_path)


def add_error_report_temp_log_target(name: str, log_file_path: Optional[str] = None) -> RegistrationResult:
    return get_default_manager().create_error_report_target(name, log_file_path)
