"""Animated preview clip extraction."""

from pathlib import Path

from preview_common.logging import setup_logging

from exceptions import ExtractionError, ToolInvocationError
from infrastructure.interfaces import ProcessRunner

logger = setup_logging()


class ClipExtractor:
    """Encodes a fixed number of frames as an animated GIF."""

    codec = "gif"

    def __init__(self, runner: ProcessRunner, ffmpeg_path: str = "ffmpeg"):
        self._runner = runner
        self._ffmpeg_path = ffmpeg_path

    def build_args(self, video_path: str | Path, frame_count: int) -> list[str]:
        return [
            self._ffmpeg_path,
            "-i", str(video_path),
            "-frames:v", str(frame_count),
            "-f", self.codec,
            "pipe:1",
        ]

    def extract(self, video_path: str | Path, frame_count: int) -> bytes:
        """
        Extracts a clip of exactly frame_count frames.

        Args:
            video_path: Path to a staged video file.
            frame_count: Number of frames to encode, from ProbeResult.

        Returns:
            The whole GIF as produced on stdout.

        Raises:
            ValueError: If frame_count is less than 1.
            ExtractionError: If ffmpeg cannot run or exits non-zero.
        """
        if frame_count < 1:
            raise ValueError(f"frame_count must be at least 1, got {frame_count}")

        try:
            result = self._runner.run(self.build_args(video_path, frame_count))
        except ToolInvocationError as e:
            raise ExtractionError(str(video_path), self.codec, cause=e) from e

        if not result.ok:
            raise ExtractionError(
                str(video_path), self.codec, f"ffmpeg exited with {result.returncode}"
            )

        logger.info(
            "Clip extracted",
            extra={
                "video_path": str(video_path),
                "frame_count": frame_count,
                "size": len(result.stdout),
            },
        )
        return result.stdout
