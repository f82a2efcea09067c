from __future__ import annotations

"""
Logging Sink Registry.

Holds the live routing table: named file targets and the rules that feed
them. The registry is bound to a host logger (the process root logger by
default) and attaches its targets to it when `activate()` is called.

Registration calls are expected at startup; the registry does no locking.
"""

import logging
from typing import Dict, List, Optional

from asrr_core.domain.log_models import RoutingRule, Severity
from asrr_core.infra.logging.handlers import RoutingRuleFilter

logger = logging.getLogger(__name__)


class SinkRegistry:
    """
    Named targets and routing rules attached to a host logger.

    Args:
        host: Logger that receives every routed record. Child loggers of the
            host propagate into the targets. Defaults to the root logger.
    """

    def __init__(self, host: Optional[logging.Logger] = None) -> None:
        self._host = host if host is not None else logging.getLogger()
        self._targets: Dict[str, logging.Handler] = {}
        self._rules: Dict[str, List[RoutingRule]] = {}
        self._active = False

    # -------------------------------------------------------------------------
    # Targets
    # -------------------------------------------------------------------------

    def add_target(self, name: str, handler: logging.Handler) -> None:
        """
        Store a named target, replacing any previous one with that name.

        The handler gets a filter bound to the target's rule list, so it
        accepts nothing until a rule is added.
        """
        if name in self._targets:
            self.remove_target(name)
        rules: List[RoutingRule] = []
        handler.addFilter(RoutingRuleFilter(rules))
        self._targets[name] = handler
        self._rules[name] = rules

    def remove_target(self, name: str) -> bool:
        """
        Drop a named target together with the rules pointing at it.

        The handler is detached from the host and closed right away.

        Returns:
            bool: False if no target was registered under `name`.
        """
        handler = self._targets.pop(name, None)
        rules = self._rules.pop(name, None)
        if rules is not None:
            rules.clear()
        if handler is None:
            return False

        self._host.removeHandler(handler)
        handler.close()
        logger.debug(f"Removed log target '{name}'")
        return True

    def get_target(self, name: str) -> Optional[logging.Handler]:
        return self._targets.get(name)

    def target_names(self) -> List[str]:
        return list(self._targets)

    def target_path(self, name: str) -> Optional[str]:
        """Return the file path of a file-backed target, if registered."""
        handler = self._targets.get(name)
        return getattr(handler, "baseFilename", None)

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    def rule_list(self, name: str) -> List[RoutingRule]:
        """
        Return the live rule list of a target.

        The same list object is shared with the target's filter; appending
        to it changes routing directly.

        Raises:
            KeyError: If no target is registered under `name`.
        """
        if name not in self._targets:
            raise KeyError(f"Unknown log target: {name}")
        return self._rules[name]

    def add_rule(self, rule: RoutingRule) -> None:
        self.rule_list(rule.target_name).append(rule)

    def rules_for(self, name: str) -> List[RoutingRule]:
        return list(self._rules.get(name, []))

    # -------------------------------------------------------------------------
    # Activation
    # -------------------------------------------------------------------------

    @property
    def host(self) -> logging.Logger:
        return self._host

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        """
        Install the current routing table on the host logger.

        Attaches targets not yet on the host and lowers the host level so
        the most verbose rule can receive its records.
        """
        for handler in self._targets.values():
            if handler not in self._host.handlers:
                self._host.addHandler(handler)

        lowest = lowest_severity([rule for rules in self._rules.values() for rule in rules])
        if lowest is not None:
            current = self._host.level
            if current == logging.NOTSET or current > lowest:
                self._host.setLevel(int(lowest))

        self._active = True

    def get_logger(self, name: str) -> logging.Logger:
        """Return a logger whose records propagate into the host."""
        if self._host is logging.getLogger():
            return logging.getLogger(name)
        return self._host.getChild(name)

    def close(self) -> None:
        """Detach and close every target."""
        for name in list(self._targets):
            self.remove_target(name)
        self._active = False


def lowest_severity(rules: List[RoutingRule]) -> Optional[Severity]:
    """Most verbose severity among `rules`, or None when empty."""
    if not rules:
        return None
    return min(rule.min_level for rule in rules)
