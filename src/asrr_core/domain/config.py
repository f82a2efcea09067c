from __future__ import annotations

"""
Target Configuration Persistence.

Loads and saves log target configurations as JSON. Entries may use the
snake_case field names of LogTargetConfiguration or the PascalCase names
of legacy configuration files (LogName, LogFilePath, ...).
"""

import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from asrr_core.domain.constants import TARGETS_CONFIG_FILE
from asrr_core.domain.log_models import LogTargetConfiguration
from asrr_core.infra.fs import ensure_parent_dir, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
_LEGACY_KEYS: Dict[str, str] = {
    "LogName": "log_name",
    "LogFilePath": "log_file_path",
    "LogLayout": "log_layout",
    "NameFilter": "name_filter",
    "MinLevel": "min_level",
    "DateFormat": "date_format",
    "OpenOnStartUp": "open_on_start_up",
    "OpenOnButton": "open_on_button",
}

_KNOWN_FIELDS = frozenset(_LEGACY_KEYS.values())


def get_default_config_path() -> str:
    return os.path.join(get_user_data_dir(), TARGETS_CONFIG_FILE)


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------
def parse_target_entry(entry: Dict[str, Any]) -> Optional[LogTargetConfiguration]:
    """
    Build a LogTargetConfiguration from a raw JSON object.

    Unknown keys are ignored. Missing optional fields take the dataclass
    defaults.

    Args:
        entry: Raw mapping read from the configuration file.

    Returns:
        Optional[LogTargetConfiguration]: None if `log_name` or
        `log_file_path` is missing or empty.
    """
    values: Dict[str, Any] = {}
    for key, value in entry.items():
        field = _LEGACY_KEYS.get(key, key)
        if field in _KNOWN_FIELDS and value is not None:
            values[field] = value

    if not values.get("log_name") or not values.get("log_file_path"):
        return None

    for flag in ("open_on_start_up", "open_on_button"):
        if flag in values:
            values[flag] = bool(values[flag])

    return LogTargetConfiguration(**values)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_target_configurations(path: Optional[str] = None) -> List[LogTargetConfiguration]:
    """
    Load target configurations from disk.

    Accepts either `{"targets": [...]}` or a bare JSON list.

    Args:
        path: JSON file. Defaults to `<user data dir>/log_targets.json`.

    Returns:
        List[LogTargetConfiguration]: Valid entries, in file order. Empty on
        a missing or corrupted file.
    """
    config_path = path or get_default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Target config not found at '{config_path}'.")
        return []

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load target config: {e}")
        return []

    entries = data.get("targets", []) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        logger.warning("Corrupted target config. Ignoring it.")
        return []

    configurations: List[LogTargetConfiguration] = []
    for index, entry in enumerate(entries):
        cfg = parse_target_entry(entry) if isinstance(entry, dict) else None
        if cfg is None:
            logger.warning(f"Skipping invalid target entry #{index} in '{config_path}'.")
            continue
        configurations.append(cfg)

    return configurations


def save_target_configurations(
        configurations: Iterable[LogTargetConfiguration],
        path: Optional[str] = None,
) -> None:
    """
    Persist target configurations to disk in snake_case form.

    Args:
        configurations: Configurations to write.
        path: JSON file. Defaults to `<user data dir>/log_targets.json`.
    """
    config_path = path or get_default_config_path()
    try:
        ensure_parent_dir(config_path)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump({"targets": [cfg.to_dict() for cfg in configurations]}, f, indent=4)
    except OSError as e:
        logger.error(f"Failed to save target config: {e}")
