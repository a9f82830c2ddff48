"""Infrastructure interface exports."""

from preview_common.infrastructure import StorageClient

from infrastructure.interfaces.process_runner import ProcessRunner

__all__ = [
    "ProcessRunner",
    "StorageClient",
]
