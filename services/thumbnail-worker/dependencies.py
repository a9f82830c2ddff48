"""Dependency injection configuration for the thumbnail-worker service."""

from contextlib import contextmanager

from preview_common.infrastructure import StorageClient
from preview_common.logging import setup_logging
from preview_common.minio import get_minio_client
from sqlmodel import Session, create_engine

from config import AppConfig, load_config
from domain import ClipExtractor, FrameProber, TempStager, ThumbnailExtractor
from handlers import PreviewHandler
from infrastructure import LocalStorageClient, MinioStorageClient, SubprocessRunner
from repositories import AssetRepository
from worker import Worker

logger = setup_logging()


def get_storage(config: AppConfig) -> StorageClient:
    """Returns the storage client selected by STORAGE_BACKEND."""
    if config.storage.backend == "local":
        return LocalStorageClient(config.storage.local_dir)
    return MinioStorageClient(get_minio_client(config.minio))


def get_repository(config: AppConfig) -> AssetRepository:
    """Returns an asset repository bound to the configured database."""
    engine = create_engine(config.postgres.url)
    logger.info("Database engine created", extra={"host": config.postgres.host})

    @contextmanager
    def session_factory():
        """Creates a database session context manager."""
        with Session(engine) as session:
            yield session

    return AssetRepository(session_factory)


def get_handler(config: AppConfig) -> PreviewHandler:
    """Returns the preview handler with all collaborators wired."""
    storage = get_storage(config)
    runner = SubprocessRunner(config.media.tool_timeout_seconds)
    stager = TempStager(
        storage,
        bucket_name=config.minio.bucket_name,
        temp_dir=config.media.temp_directory,
        prefix=config.media.temp_prefix,
    )
    return PreviewHandler(
        repository=get_repository(config),
        storage=storage,
        stager=stager,
        prober=FrameProber(runner, config.media.ffprobe_path),
        thumbnail_extractor=ThumbnailExtractor(runner, config.media.ffmpeg_path),
        clip_extractor=ClipExtractor(runner, config.media.ffmpeg_path),
        bucket_name=config.minio.bucket_name,
    )


def get_worker(config: AppConfig | None = None) -> Worker:
    """Returns the configured worker."""
    return Worker(get_handler(config or load_config()))
