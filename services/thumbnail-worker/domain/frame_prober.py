"""Frame rate and frame count probing for staged videos."""

from pathlib import Path

from preview_common.logging import setup_logging

from domain.models import ProbeResult
from exceptions import ProbeParseError, ProbeProcessError, ToolInvocationError
from infrastructure.interfaces import ProcessRunner

logger = setup_logging()


class FrameProber:
    """Runs ffprobe against the first video stream of a file."""

    def __init__(self, runner: ProcessRunner, ffprobe_path: str = "ffprobe"):
        self._runner = runner
        self._ffprobe_path = ffprobe_path

    def build_args(self, video_path: str | Path) -> list[str]:
        # r_frame_rate precedes nb_read_frames in the stream section. Escaping is
        # off so the "/" inside the rate is not quoted and the line reads
        # num/den/count.
        return [
            self._ffprobe_path,
            "-v", "error",
            "-select_streams", "v:0",
            "-count_frames",
            "-show_entries", "stream=r_frame_rate,nb_read_frames",
            "-of", "csv=p=0:s=/:e=none",
            str(video_path),
        ]

    def probe(self, video_path: str | Path) -> ProbeResult:
        """
        Probes a video file for its frame rate and decodable frame count.

        Args:
            video_path: Path to a staged video file.

        Returns:
            ProbeResult for the first video stream.

        Raises:
            ProbeProcessError: If ffprobe cannot run or exits non-zero.
            ProbeParseError: If the output is not a rate/count line.
        """
        try:
            result = self._runner.run(self.build_args(video_path))
        except ToolInvocationError as e:
            raise ProbeProcessError(str(video_path), cause=e) from e

        if not result.ok:
            logger.error(
                "ffprobe exited abnormally",
                extra={"video_path": str(video_path), "returncode": result.returncode},
            )
            raise ProbeProcessError(str(video_path), returncode=result.returncode)

        probe = self.parse_output(result.stdout.decode("utf-8", errors="replace"))
        logger.info(
            "Video probed",
            extra={
                "video_path": str(video_path),
                "fps": probe.fps,
                "frames": probe.frames,
                "clip_frame_count": probe.clip_frame_count,
            },
        )
        return probe

    @staticmethod
    def parse_output(output: str) -> ProbeResult:
        """
        Parses a "rate/count" probe line.

        Thousands separators and CSV quoting are stripped from every field, so
        '"30/1"/300' reads the same as 30/1/300. A three-field "num/den/count"
        line carries the rate as a fraction, which is rounded to whole frames
        per second.
        """
        line = next((ln.strip() for ln in output.splitlines() if ln.strip()), "")
        fields = [f.replace(",", "").strip().strip('"') for f in line.split("/")]

        if len(fields) not in (2, 3):
            raise ProbeParseError(output, f"expected 2 or 3 fields, got {len(fields)}")
        try:
            values = [int(f) for f in fields]
        except ValueError as e:
            raise ProbeParseError(output, "non-numeric field") from e

        if len(values) == 2:
            fps, frames = values
        else:
            numerator, denominator, frames = values
            if denominator == 0:
                raise ProbeParseError(output, "zero frame rate denominator")
            fps = round(numerator / denominator)

        return ProbeResult(fps=fps, frames=frames)
