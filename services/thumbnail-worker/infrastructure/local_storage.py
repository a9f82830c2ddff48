"""Local disk implementation of the StorageClient interface."""

import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO

from preview_common import StorageDownloadError, StorageUploadError, setup_logging
from preview_common.infrastructure import StorageClient

logger = setup_logging()


class LocalStorageClient(StorageClient):
    """Stores objects as files under {base_dir}/{bucket}/{object}."""

    def __init__(self, base_dir: str | Path):
        self._base_dir = Path(base_dir).resolve()

    def _object_path(self, bucket_name: str, object_name: str) -> Path:
        bucket_dir = (self._base_dir / bucket_name).resolve()
        path = (bucket_dir / object_name).resolve()
        if bucket_dir not in path.parents:
            raise ValueError(f"Object name '{object_name}' escapes the bucket")
        return path

    @contextmanager
    def open_stream(self, bucket_name: str, object_name: str) -> Iterator[BinaryIO]:
        try:
            stream = self._object_path(bucket_name, object_name).open("rb")
        except (OSError, ValueError) as e:
            logger.exception(
                "Local read failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e

        with stream:
            yield stream

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            path = self._object_path(bucket_name, object_name)
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as f:
                shutil.copyfileobj(data, f)
            logger.info(
                "File written to local storage",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "size": size,
                    "content_type": content_type,
                },
            )
        except (OSError, ValueError) as e:
            logger.exception(
                "Local write failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e
