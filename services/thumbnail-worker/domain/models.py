"""Domain models for the thumbnail-worker service."""

from enum import Enum

from pydantic import BaseModel

CLIP_SAMPLE_WINDOW_SECONDS = 5


class StagePurpose(str, Enum):
    """What a staged temp file is used for."""

    THUMB = "thumb"
    GIF = "gif"


class PreviewOutcome(str, Enum):
    """Terminal outcome of a successful pipeline run."""

    COMPLETED = "completed"
    SKIPPED_NOT_VIDEO = "skipped_not_video"
    SKIPPED_ALREADY_PROCESSED = "skipped_already_processed"


class AssetRecord(BaseModel, frozen=True):
    """The parts of an asset the pipeline reads."""

    id: int
    name: str
    mimetype: str
    has_thumbnail: bool = False

    @property
    def is_video(self) -> bool:
        return self.mimetype.startswith("video/")


class DerivedThumbnail(BaseModel, frozen=True):
    """Object names assigned to an asset's preview artifacts."""

    asset_id: int
    name: str
    clip_name: str | None = None


class ProcessResult(BaseModel, frozen=True):
    """Exit status and captured stdout of an external tool run."""

    returncode: int
    stdout: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProbeResult(BaseModel, frozen=True):
    """Frame rate and decoded frame count of the first video stream."""

    fps: int
    frames: int

    @property
    def clip_frame_count(self) -> int | None:
        """
        Number of frames to request for the preview clip.

        One output frame per five seconds of source video. Returns None when
        the video is shorter than that window, or has no usable frame rate.
        """
        window = self.fps * CLIP_SAMPLE_WINDOW_SECONDS
        if self.fps <= 0 or window > self.frames:
            return None
        return self.frames // window


class PreviewResult(BaseModel, frozen=True):
    """Result of processing a single asset."""

    asset_id: int
    outcome: PreviewOutcome
    thumbnail_name: str | None = None
    clip_name: str | None = None
    thumbnail_size: int = 0
    clip_size: int = 0
