from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An isolated host logger and registry so routing tests never touch the
   process root logger.
"""

import logging
import os
import sys
import uuid
from typing import Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from asrr_core.log.handler import LogTargetManager  # noqa: E402
from asrr_core.log.registry import SinkRegistry  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def host_logger() -> Generator[logging.Logger, None, None]:
    """
    Provide a uniquely named logger that does not propagate to the root.

    Yields:
        logging.Logger: Host logger for a SinkRegistry.
    """
    host = logging.getLogger(f"asrr_test_{uuid.uuid4().hex[:8]}")
    host.propagate = False
    yield host
    for h in list(host.handlers):
        host.removeHandler(h)
        h.close()


@pytest.fixture
def registry(host_logger: logging.Logger) -> Generator[SinkRegistry, None, None]:
    reg = SinkRegistry(host_logger)
    yield reg
    reg.close()


@pytest.fixture
def manager(registry: SinkRegistry) -> LogTargetManager:
    return LogTargetManager(registry)
