"""MinIO implementation of the StorageClient interface."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from minio import Minio
from preview_common import StorageDownloadError, StorageUploadError, setup_logging
from preview_common.infrastructure import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Handles file storage operations using MinIO."""

    def __init__(self, client: Minio):
        self._client = client

    @contextmanager
    def open_stream(self, bucket_name: str, object_name: str) -> Iterator[BinaryIO]:
        try:
            response = self._client.get_object(
                bucket_name=bucket_name, object_name=object_name
            )
        except Exception as e:
            logger.exception(
                "MinIO download failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageDownloadError(object_name, e) from e

        logger.info(
            "Object stream opened",
            extra={"bucket_name": bucket_name, "object_name": object_name},
        )
        try:
            yield response
        finally:
            response.close()
            response.release_conn()

    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        try:
            self._client.put_object(
                bucket_name=bucket_name,
                object_name=object_name,
                data=data,
                length=size,
                content_type=content_type,
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "bucket_name": bucket_name,
                    "object_name": object_name,
                    "size": size,
                },
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e
