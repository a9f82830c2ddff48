"""Copies stored objects to local temp files so media tools can read them by path."""

import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from preview_common.logging import setup_logging

from domain.models import StagePurpose
from exceptions import StagingError
from infrastructure.interfaces import StorageClient

logger = setup_logging()

_CHUNK_SIZE = 1024 * 1024


class TempStager:
    """Materializes an object from storage as a local temp file."""

    def __init__(
        self,
        storage: StorageClient,
        bucket_name: str,
        temp_dir: str | Path,
        prefix: str = "preview",
    ):
        self._storage = storage
        self._bucket_name = bucket_name
        self._temp_dir = Path(temp_dir)
        self._prefix = prefix

    def path_for(self, asset_id: int, purpose: StagePurpose) -> Path:
        """Returns the deterministic temp path for an asset and purpose."""
        name = f"{self._prefix}_{purpose.value}_{asset_id}_{asset_id}.tmp"
        return self._temp_dir / name

    def stage(self, object_name: str, asset_id: int, purpose: StagePurpose) -> Path:
        """
        Streams an object into its temp file.

        The object is copied in chunks so large videos never sit in memory.
        The file only counts as staged once the source stream is exhausted.

        Args:
            object_name: Name of the source object in the bucket.
            asset_id: Owning asset identifier, used in the temp file name.
            purpose: What the staged copy is for.

        Returns:
            Path of the staged file. The caller owns deletion.

        Raises:
            StagingError: If reading the object or writing the file fails.
                No partial file is left behind.
        """
        path = self.path_for(asset_id, purpose)
        try:
            self._temp_dir.mkdir(parents=True, exist_ok=True)
            with self._storage.open_stream(self._bucket_name, object_name) as source:
                with path.open("wb") as target:
                    shutil.copyfileobj(source, target, _CHUNK_SIZE)
        except Exception as e:
            logger.exception(
                "Staging failed",
                extra={
                    "asset_id": asset_id,
                    "object_name": object_name,
                    "temp_path": str(path),
                },
            )
            self.remove(path)
            raise StagingError(object_name, e) from e

        logger.info(
            "Object staged to temp file",
            extra={
                "asset_id": asset_id,
                "purpose": purpose.value,
                "temp_path": str(path),
                "size": path.stat().st_size,
            },
        )
        return path

    @contextmanager
    def staged(
        self, object_name: str, asset_id: int, purpose: StagePurpose
    ) -> Iterator[Path]:
        """Stages an object and deletes the temp file when the block exits."""
        path = self.stage(object_name, asset_id, purpose)
        try:
            yield path
        finally:
            self.remove(path)

    def remove(self, path: Path) -> None:
        """Deletes a temp file, ignoring files that are already gone."""
        try:
            path.unlink()
        except FileNotFoundError:
            return
        logger.debug("Temp file removed", extra={"temp_path": str(path)})
