import logging

from minio import Minio

from preview_common.config import MinioConfig

logger = logging.getLogger(__name__)


def get_minio_client(config: MinioConfig) -> Minio:
    """
    Initialize and return a MinIO client from the shared MinIO configuration.

    Args:
        config: Endpoint, credentials and TLS flag for the MinIO server.

    Returns:
        Minio: Configured MinIO client
    """
    try:
        return Minio(
            endpoint=config.endpoint,
            access_key=config.user,
            secret_key=config.password,
            secure=config.secure,
        )
    except Exception:
        logger.exception(
            "MinIO Client Initialization Failed",
            extra={
                "endpoint": config.endpoint,
                "user": config.user,
            },
        )
        raise
