"""Handler that derives preview artifacts for a single asset."""

import io
from concurrent.futures import ThreadPoolExecutor
from contextlib import ExitStack

from preview_common.logging import setup_logging

from domain import (
    AssetRecord,
    ClipExtractor,
    FrameProber,
    PreviewOutcome,
    PreviewResult,
    StagePurpose,
    TempStager,
    ThumbnailExtractor,
)
from exceptions import AssetNotFoundError
from infrastructure.interfaces import StorageClient
from repositories import AssetRepository

logger = setup_logging()


class PreviewHandler:
    """Extracts, records and stores the thumbnail and clip of a video asset."""

    def __init__(
        self,
        repository: AssetRepository,
        storage: StorageClient,
        stager: TempStager,
        prober: FrameProber,
        thumbnail_extractor: ThumbnailExtractor,
        clip_extractor: ClipExtractor,
        bucket_name: str,
    ):
        self._repository = repository
        self._storage = storage
        self._stager = stager
        self._prober = prober
        self._thumbnail_extractor = thumbnail_extractor
        self._clip_extractor = clip_extractor
        self._bucket_name = bucket_name

    def process(self, asset_id: int) -> PreviewResult:
        """
        Runs the preview pipeline for one asset.

        Args:
            asset_id: Identifier of the asset to process.

        Returns:
            PreviewResult describing what was produced, or which skip applied.

        Raises:
            AssetNotFoundError: If the asset does not exist.
            StagingError: If the source object cannot be copied locally.
            ProbeProcessError: If ffprobe fails.
            ProbeParseError: If ffprobe output cannot be parsed.
            ExtractionError: If ffmpeg fails.
            PersistenceError: If the record or an upload fails.
        """
        asset = self._repository.get_asset(asset_id)
        if asset is None:
            raise AssetNotFoundError(asset_id)
        self._log_stage(asset_id, "validated", mimetype=asset.mimetype)

        if not asset.is_video:
            logger.info(
                "Asset is not a video",
                extra={"asset_id": asset_id, "mimetype": asset.mimetype},
            )
            return PreviewResult(
                asset_id=asset_id, outcome=PreviewOutcome.SKIPPED_NOT_VIDEO
            )

        if asset.has_thumbnail:
            logger.info("Thumbnail already exists", extra={"asset_id": asset_id})
            return PreviewResult(
                asset_id=asset_id, outcome=PreviewOutcome.SKIPPED_ALREADY_PROCESSED
            )

        with ExitStack() as staged_files:
            thumb_path = staged_files.enter_context(
                self._stager.staged(asset.name, asset_id, StagePurpose.THUMB)
            )
            gif_path = staged_files.enter_context(
                self._stager.staged(asset.name, asset_id, StagePurpose.GIF)
            )
            self._log_stage(asset_id, "staged")

            with ThreadPoolExecutor(max_workers=2) as pool:
                thumbnail_future = pool.submit(
                    self._thumbnail_extractor.extract, thumb_path
                )
                probe_future = pool.submit(self._prober.probe, gif_path)
                thumbnail = thumbnail_future.result()
                probe = probe_future.result()
            self._log_stage(asset_id, "probed", thumbnail_size=len(thumbnail))

            clip = None
            if probe.clip_frame_count is None:
                logger.info(
                    "Video too short for a clip",
                    extra={"asset_id": asset_id, "fps": probe.fps, "frames": probe.frames},
                )
            else:
                clip = self._clip_extractor.extract(gif_path, probe.clip_frame_count)
                self._log_stage(asset_id, "clip_extracted", clip_size=len(clip))

            result = self._persist(asset, thumbnail, clip)

        self._log_stage(asset_id, "cleaned_up")
        return result

    def _persist(
        self, asset: AssetRecord, thumbnail: bytes, clip: bytes | None
    ) -> PreviewResult:
        """Records the thumbnail and uploads the artifacts in one transaction."""
        name, clip_name = self._repository.thumbnail_names(
            asset.id, with_clip=clip is not None
        )

        with self._repository.attach_thumbnail(asset.id, name, clip_name) as record:
            self._upload(record.name, thumbnail, "image/jpeg")
            if clip is not None:
                self._upload(record.clip_name, clip, "image/gif")

        logger.info(
            "Previews saved",
            extra={
                "asset_id": asset.id,
                "thumbnail": record.name,
                "clip": record.clip_name,
            },
        )
        return PreviewResult(
            asset_id=asset.id,
            outcome=PreviewOutcome.COMPLETED,
            thumbnail_name=record.name,
            clip_name=record.clip_name,
            thumbnail_size=len(thumbnail),
            clip_size=len(clip) if clip is not None else 0,
        )

    def _upload(self, object_name: str, data: bytes, content_type: str) -> None:
        self._storage.upload(
            bucket_name=self._bucket_name,
            object_name=object_name,
            data=io.BytesIO(data),
            size=len(data),
            content_type=content_type,
        )

    def _log_stage(self, asset_id: int, stage: str, **context) -> None:
        logger.debug(
            "Pipeline stage reached",
            extra={"asset_id": asset_id, "stage": stage, **context},
        )
