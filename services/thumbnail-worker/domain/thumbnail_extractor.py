"""Single-frame still image extraction."""

from pathlib import Path

from preview_common.logging import setup_logging

from exceptions import ExtractionError, ToolInvocationError
from infrastructure.interfaces import ProcessRunner

logger = setup_logging()


class ThumbnailExtractor:
    """Pulls the first video frame as an MJPEG image."""

    codec = "mjpeg"

    def __init__(self, runner: ProcessRunner, ffmpeg_path: str = "ffmpeg"):
        self._runner = runner
        self._ffmpeg_path = ffmpeg_path

    def build_args(self, video_path: str | Path) -> list[str]:
        return [
            self._ffmpeg_path,
            "-i", str(video_path),
            "-frames:v", "1",
            "-f", self.codec,
            "pipe:1",
        ]

    def extract(self, video_path: str | Path) -> bytes:
        """
        Extracts one frame from a staged video.

        Stdout is drained to end-of-stream, so a frame flushed across several
        pipe reads still comes back whole.

        Raises:
            ExtractionError: If ffmpeg cannot run, exits non-zero, or
                produces no image data.
        """
        try:
            result = self._runner.run(self.build_args(video_path))
        except ToolInvocationError as e:
            raise ExtractionError(str(video_path), self.codec, cause=e) from e

        if not result.ok:
            raise ExtractionError(
                str(video_path), self.codec, f"ffmpeg exited with {result.returncode}"
            )
        if not result.stdout:
            raise ExtractionError(str(video_path), self.codec, "no image data")

        logger.info(
            "Thumbnail extracted",
            extra={"video_path": str(video_path), "size": len(result.stdout)},
        )
        return result.stdout
