"""Shared test fixtures for all tests."""

import io
import os
from contextlib import contextmanager
from pathlib import Path

# Importing main loads ddtrace.auto; keep the tracer from reaching for an agent.
os.environ.setdefault("DD_TRACE_ENABLED", "false")
os.environ.setdefault("DD_INSTRUMENTATION_TELEMETRY_ENABLED", "false")
os.environ.setdefault("DD_REMOTE_CONFIGURATION_ENABLED", "false")

import pytest
from preview_common import StorageDownloadError, StorageUploadError
from preview_common.db_models import Asset, Thumbnail
from preview_common.infrastructure import StorageClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from domain import (
    ClipExtractor,
    FrameProber,
    ProcessResult,
    TempStager,
    ThumbnailExtractor,
)
from handlers import PreviewHandler
from infrastructure.interfaces import ProcessRunner
from repositories import AssetRepository

BUCKET = "uploads"
VIDEO_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"\x01" * 4096
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x02" * 512 + b"\xff\xd9"
GIF_BYTES = b"GIF89a" + b"\x03" * 2048


# ── Fakes ──────────────────────────────────────────────────────────────────

class FakeRunner(ProcessRunner):
    """Answers tool invocations by tool (ffprobe) or output codec (ffmpeg)."""

    def __init__(self, responses: dict | None = None):
        self.responses = responses or {}
        self.calls: list[list[str]] = []
        self.inputs_existed: list[bool] = []

    def run(self, args: list[str]) -> ProcessResult:
        self.calls.append(args)
        if "ffprobe" in args[0]:
            key, input_path = "ffprobe", args[-1]
        else:
            key, input_path = args[args.index("-f") + 1], args[args.index("-i") + 1]
        self.inputs_existed.append(_exists(input_path))

        response = self.responses[key]
        if isinstance(response, Exception):
            raise response
        return response

    def calls_for(self, key: str) -> list[list[str]]:
        if key == "ffprobe":
            return [c for c in self.calls if "ffprobe" in c[0]]
        return [c for c in self.calls if "-f" in c and c[c.index("-f") + 1] == key]


def _exists(path: str) -> bool:
    return Path(path).exists()


class FakeStorage(StorageClient):
    """In-memory object store keyed by (bucket, object name)."""

    def __init__(self, objects: dict | None = None):
        self.objects = dict(objects or {})
        self.uploads: list[dict] = []
        self.failing_uploads: set[str] = set()

    @contextmanager
    def open_stream(self, bucket_name, object_name):
        if (bucket_name, object_name) not in self.objects:
            raise StorageDownloadError(object_name)
        yield io.BytesIO(self.objects[(bucket_name, object_name)])

    def upload(self, bucket_name, object_name, data, size, content_type):
        if object_name in self.failing_uploads:
            raise StorageUploadError(object_name)
        payload = data.read()
        self.objects[(bucket_name, object_name)] = payload
        self.uploads.append(
            {
                "bucket_name": bucket_name,
                "object_name": object_name,
                "size": size,
                "content_type": content_type,
                "data": payload,
            }
        )


# ── Database Fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    @contextmanager
    def factory():
        with Session(engine) as session:
            yield session

    return factory


@pytest.fixture
def repository(session_factory) -> AssetRepository:
    return AssetRepository(session_factory)


@pytest.fixture
def add_asset(session_factory):
    """Inserts an asset (optionally with an existing thumbnail) and returns its id."""

    def _add(
        name: str = "video.mp4",
        mimetype: str = "video/mp4",
        with_thumbnail: bool = False,
    ) -> int:
        with session_factory() as db_session:
            asset = Asset(name=name, mimetype=mimetype, size=len(VIDEO_BYTES))
            db_session.add(asset)
            db_session.commit()
            db_session.refresh(asset)
            if with_thumbnail:
                db_session.add(
                    Thumbnail(asset_id=asset.id, name=f".thumb-{asset.id}.jpg")
                )
                db_session.commit()
            return asset.id

    return _add


@pytest.fixture
def thumbnails(session_factory):
    """Returns all thumbnail rows currently stored."""

    def _all() -> list[Thumbnail]:
        with session_factory() as db_session:
            rows = db_session.exec(select(Thumbnail)).all()
            for row in rows:
                db_session.expunge(row)
            return rows

    return _all


# ── Pipeline Fixtures ──────────────────────────────────────────────────────

@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage({(BUCKET, "video.mp4"): VIDEO_BYTES})


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(
        {
            "ffprobe": ProcessResult(returncode=0, stdout=b"30/1/900\n"),
            "mjpeg": ProcessResult(returncode=0, stdout=JPEG_BYTES),
            "gif": ProcessResult(returncode=0, stdout=GIF_BYTES),
        }
    )


@pytest.fixture
def temp_dir(tmp_path):
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def stager(storage, temp_dir) -> TempStager:
    return TempStager(storage, BUCKET, temp_dir, prefix="preview")


@pytest.fixture
def handler(repository, storage, stager, runner) -> PreviewHandler:
    return PreviewHandler(
        repository=repository,
        storage=storage,
        stager=stager,
        prober=FrameProber(runner, "ffprobe"),
        thumbnail_extractor=ThumbnailExtractor(runner, "ffmpeg"),
        clip_extractor=ClipExtractor(runner, "ffmpeg"),
        bucket_name=BUCKET,
    )
