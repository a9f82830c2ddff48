"""Subprocess implementation of the ProcessRunner interface."""

import subprocess

from preview_common.logging import setup_logging

from domain.models import ProcessResult
from exceptions import ToolInvocationError
from infrastructure.interfaces import ProcessRunner

logger = setup_logging()


class SubprocessRunner(ProcessRunner):
    """Runs media tools as child processes with a bounded wait."""

    def __init__(self, timeout_seconds: float):
        self._timeout = timeout_seconds

    def run(self, args: list[str]) -> ProcessResult:
        tool = args[0]
        logger.debug("Running tool", extra={"command": " ".join(args)})
        try:
            completed = subprocess.run(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.error(
                "Tool timed out",
                extra={"tool": tool, "timeout_seconds": self._timeout},
            )
            raise ToolInvocationError(tool, e) from e
        except OSError as e:
            logger.exception("Tool could not be started", extra={"tool": tool})
            raise ToolInvocationError(tool, e) from e

        return ProcessResult(returncode=completed.returncode, stdout=completed.stdout)
