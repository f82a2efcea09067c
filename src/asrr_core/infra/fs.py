from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path resolution and file primitives used by the log target
manager: user data directory lookup, parent directory creation, line
counting and timestamped archiving of oversized log files.
"""

import os
import shutil
from datetime import datetime
from typing import Optional

from asrr_core.domain.constants import (
    ARCHIVE_TIMESTAMP_FORMAT,
    ARCHIVE_TIMESTAMP_REPLACEMENTS,
    LOG_SUFFIX,
    LOGS_SUBDIR,
)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ASRR"
UNIX_APP_DIR_NAME = ".asrr"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/ASRR
    - Linux/Mac: ~/.asrr

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_default_log_path(name: str) -> str:
    """
    Build the fallback file location for a named target.

    Args:
        name: Target name, used as the file stem.

    Returns:
        str: `<user data dir>/logs/<name>.log`.
    """
    return os.path.join(get_user_data_dir(), LOGS_SUBDIR, f"{name}{LOG_SUFFIX}")


def build_archive_path(path: str, now: Optional[datetime] = None) -> str:
    """
    Compute the archive name for a log file.

    The locale timestamp is inserted right before the `.log` suffix, with
    '/' and ':' swapped for filename-safe characters:
    `app.log` -> `app10-19-26 15_04_05.log`.

    Args:
        path: Current log file path.
        now: Timestamp to embed. Defaults to the current local time.

    Returns:
        str: Archive path in the same directory as `path`.
    """
    stamp = (now or datetime.now()).strftime(ARCHIVE_TIMESTAMP_FORMAT)
    for old, new in ARCHIVE_TIMESTAMP_REPLACEMENTS:
        stamp = stamp.replace(old, new)

    directory, file_name = os.path.split(path)
    if file_name.endswith(LOG_SUFFIX):
        archive_name = file_name[:-len(LOG_SUFFIX)] + stamp + LOG_SUFFIX
    else:
        stem, ext = os.path.splitext(file_name)
        archive_name = stem + stamp + ext

    return os.path.join(directory, archive_name)

# -----------------------------------------------------------------------------
# FILE PRIMITIVES
# -----------------------------------------------------------------------------

def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)


def ensure_file(path: str) -> bool:
    """
    Create an empty file if none exists.

    Returns:
        bool: True if the file was created by this call.
    """
    if os.path.exists(path):
        return False
    open(path, "a", encoding="utf-8").close()
    return True


def count_lines(path: str) -> int:
    """Count text lines, accepting '\\n', '\\r\\n' and '\\r' terminators."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return sum(1 for _ in f)


def archive_file(path: str, archive_path: str) -> None:
    """
    Move a log file aside and leave an empty file in its place.

    Copies `path` to `archive_path`, deletes the original and recreates it
    empty.

    Raises:
        FileExistsError: If `archive_path` is already taken.
        OSError: On any copy/delete/create failure.
    """
    if os.path.exists(archive_path):
        raise FileExistsError(f"Archive already exists: {archive_path}")

    shutil.copyfile(path, archive_path)
    os.remove(path)
    open(path, "w", encoding="utf-8").close()
