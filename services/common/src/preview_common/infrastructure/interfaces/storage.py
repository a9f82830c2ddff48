"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for file storage backends."""

    @abstractmethod
    def open_stream(
        self, bucket_name: str, object_name: str
    ) -> AbstractContextManager[BinaryIO]:
        """
        Opens an object for streaming reads.

        Args:
            bucket_name: The storage bucket name.
            object_name: The object path/name in storage.

        Returns:
            A context manager yielding a readable binary stream. The stream
            and any underlying connection are released on exit.

        Raises:
            StorageDownloadError: If the object cannot be opened or read.
        """

    @abstractmethod
    def upload(
        self,
        bucket_name: str,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> None:
        """
        Uploads a file to storage.

        Args:
            bucket_name: The storage bucket name.
            object_name: The destination path/name in storage.
            data: File-like object containing the data.
            size: Size of the file in bytes.
            content_type: MIME type of the file.

        Raises:
            StorageUploadError: If the upload fails.
        """
