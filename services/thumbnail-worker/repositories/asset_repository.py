"""Repository for asset and thumbnail records."""

from collections.abc import Iterator
from contextlib import contextmanager

from preview_common.db_models import Asset, Thumbnail
from preview_common.logging import setup_logging

from domain.models import AssetRecord, DerivedThumbnail
from exceptions import PersistenceError

logger = setup_logging()


class AssetRepository:
    """
    Handles database operations for assets and their derived thumbnails.

    Keeps SQL and transaction handling out of the handler layer.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def get_asset(self, asset_id: int) -> AssetRecord | None:
        """
        Loads an asset together with whether it already has a thumbnail.

        Args:
            asset_id: The asset identifier.

        Returns:
            AssetRecord, or None if no asset has that identifier.
        """
        with self._session_factory() as db_session:
            asset = db_session.get(Asset, asset_id)
            if asset is None:
                return None
            return AssetRecord(
                id=asset.id,
                name=asset.name,
                mimetype=asset.mimetype,
                has_thumbnail=asset.thumbnail is not None,
            )

    @staticmethod
    def thumbnail_names(asset_id: int, with_clip: bool) -> tuple[str, str | None]:
        """Returns the object names for an asset's still and clip."""
        clip_name = f".clip-{asset_id}.gif" if with_clip else None
        return f".thumb-{asset_id}.jpg", clip_name

    @contextmanager
    def attach_thumbnail(
        self, asset_id: int, name: str, clip_name: str | None = None
    ) -> Iterator[DerivedThumbnail]:
        """
        Creates the thumbnail record for an asset inside one transaction.

        The row is flushed before the block runs and committed only when the
        block exits cleanly, so work done inside it (uploading the artifacts)
        either lands together with the record or not at all.

        Args:
            asset_id: Owning asset identifier.
            name: Object name of the still image.
            clip_name: Object name of the animated clip, if one was produced.

        Yields:
            DerivedThumbnail with the names stored on the record.

        Raises:
            PersistenceError: If the insert, the block, or the commit fails.
        """
        try:
            with self._session_factory() as db_session:
                thumbnail = Thumbnail(asset_id=asset_id, name=name, gif=clip_name)
                db_session.add(thumbnail)
                db_session.flush()

                yield DerivedThumbnail(
                    asset_id=asset_id,
                    name=thumbnail.name,
                    clip_name=thumbnail.gif,
                )

                db_session.commit()
                logger.info(
                    "Thumbnail record persisted",
                    extra={
                        "asset_id": asset_id,
                        "thumbnail": name,
                        "clip": clip_name,
                    },
                )
        except Exception as e:
            logger.exception(
                "Failed to persist thumbnail", extra={"asset_id": asset_id}
            )
            raise PersistenceError(asset_id, cause=e) from e
