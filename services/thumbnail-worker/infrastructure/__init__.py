"""Infrastructure layer exports."""

from infrastructure.local_storage import LocalStorageClient
from infrastructure.minio_storage import MinioStorageClient
from infrastructure.subprocess_runner import SubprocessRunner

__all__ = [
    "LocalStorageClient",
    "MinioStorageClient",
    "SubprocessRunner",
]
