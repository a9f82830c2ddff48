"""Application configuration loaded from environment variables."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Literal

from preview_common import MinioConfig, PostgresConfig
from pydantic import BaseModel, PositiveInt


class StorageConfig(BaseModel, frozen=True):
    """Object storage backend selection."""

    backend: Literal["minio", "local"] = "minio"
    local_dir: Path = Path("./uploads")


class MediaConfig(BaseModel, frozen=True):
    """Temp staging and external media tool configuration."""

    temp_directory: Path
    temp_prefix: str = "preview"
    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    tool_timeout_seconds: PositiveInt = 300


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    postgres: PostgresConfig
    storage: StorageConfig
    media: MediaConfig


def _tool_path(env_var: str, binary: str) -> str:
    return os.getenv(env_var) or shutil.which(binary) or binary


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("MINIO_BUCKET", "uploads"),
        ),
        postgres=PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", ""),
        ),
        storage=StorageConfig(
            backend=os.getenv("STORAGE_BACKEND", "minio"),
            local_dir=Path(os.getenv("LOCAL_STORAGE_DIR", "./uploads")),
        ),
        media=MediaConfig(
            temp_directory=Path(os.getenv("TEMP_DIRECTORY", tempfile.gettempdir())),
            temp_prefix=os.getenv("TEMP_FILE_PREFIX", "preview"),
            ffmpeg_path=_tool_path("FFMPEG_PATH", "ffmpeg"),
            ffprobe_path=_tool_path("FFPROBE_PATH", "ffprobe"),
            tool_timeout_seconds=int(os.getenv("TOOL_TIMEOUT_SECONDS", "300")),
        ),
    )
