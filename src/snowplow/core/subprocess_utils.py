"""Subprocess execution with error context."""

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from snowplow.core.errors import IoFailure

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute a command to completion, capturing both output streams.

    Unlike subprocess.run(check=True), a non-zero exit is not an error here:
    callers inspect the returncode and stderr themselves.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation, for logs
        cwd: Working directory for command execution
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        IoFailure: If the command cannot be started (binary missing, not executable)
    """
    logger.debug("Running %s to %s", shlex.join(cmd), operation_context)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            **kwargs,
        )
    except OSError as e:
        raise IoFailure("shell", e) from e

    logger.debug("%s exited with status %d", cmd[0], result.returncode)
    return result
