from __future__ import annotations

"""
Log File Reading Utilities.

Reads back what the file targets have written, for viewers that show the
latest entries of a target on demand.
"""

import os


def get_recent_logs(log_path: str, n_lines: int = 100) -> str:
    """
    Extract the terminal tail of a log file.

    Args:
        log_path: File to read.
        n_lines: Maximum number of lines to retrieve from the file end.

    Returns:
        str: Consolidated log tail content, or a diagnostic message.
    """
    if not os.path.exists(log_path):
        return "Log file not found."

    # Use errors='replace' to avoid crashes on partially corrupted log files
    try:
        with open(log_path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
            return "".join(lines[-n_lines:]) if n_lines > 0 else ""
    except OSError as e:
        return f"Error retrieving logs: {e}"
