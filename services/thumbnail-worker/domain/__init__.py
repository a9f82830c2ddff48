"""Domain layer exports."""

from domain.clip_extractor import ClipExtractor
from domain.frame_prober import FrameProber
from domain.models import (
    AssetRecord,
    DerivedThumbnail,
    PreviewOutcome,
    PreviewResult,
    ProbeResult,
    ProcessResult,
    StagePurpose,
)
from domain.temp_stager import TempStager
from domain.thumbnail_extractor import ThumbnailExtractor

__all__ = [
    "AssetRecord",
    "DerivedThumbnail",
    "PreviewOutcome",
    "PreviewResult",
    "ProbeResult",
    "ProcessResult",
    "StagePurpose",
    "ClipExtractor",
    "FrameProber",
    "TempStager",
    "ThumbnailExtractor",
]
