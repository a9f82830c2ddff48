"""Worker that runs the preview pipeline and maps its outcome to an exit status."""

from preview_common import setup_logging

from exceptions import PipelineError
from handlers import PreviewHandler

logger = setup_logging()

EXIT_OK = 0
EXIT_FAILED = 1


class Worker:
    """Processes exactly one asset per invocation."""

    def __init__(self, handler: PreviewHandler):
        self._handler = handler

    def run(self, asset_id: int) -> int:
        """Processes an asset and returns the process exit status."""
        logger.info("Worker started", extra={"asset_id": asset_id})

        try:
            result = self._handler.process(asset_id)
        except PipelineError as e:
            logger.exception(
                "Preview generation failed",
                extra={"asset_id": asset_id, "stage": e.stage, "error": str(e)},
            )
            return EXIT_FAILED
        except Exception:
            logger.exception(
                "Preview generation failed unexpectedly",
                extra={"asset_id": asset_id},
            )
            return EXIT_FAILED

        logger.info(
            "Worker finished",
            extra={
                "asset_id": asset_id,
                "outcome": result.outcome.value,
                "thumbnail": result.thumbnail_name,
                "clip": result.clip_name,
            },
        )
        return EXIT_OK
