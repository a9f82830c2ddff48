"""Abstract interface for running external command-line tools."""

from abc import ABC, abstractmethod

from domain.models import ProcessResult


class ProcessRunner(ABC):
    """Runs an external tool and captures its standard output."""

    @abstractmethod
    def run(self, args: list[str]) -> ProcessResult:
        """
        Runs a tool to completion with stdin closed and stderr discarded.

        Args:
            args: Full command line, tool path first.

        Returns:
            ProcessResult with the exit code and all bytes written to stdout.
            A non-zero exit code is reported, not raised.

        Raises:
            ToolInvocationError: If the tool cannot be started or does not
                finish within the runner's time limit.
        """
