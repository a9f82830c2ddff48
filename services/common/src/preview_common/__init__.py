from preview_common.config import MinioConfig, PostgresConfig
from preview_common.db_models import Asset, Thumbnail
from preview_common.exceptions import StorageDownloadError, StorageUploadError
from preview_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "StorageDownloadError",
    "StorageUploadError",
    "MinioConfig",
    "PostgresConfig",
    "Asset",
    "Thumbnail",
]
