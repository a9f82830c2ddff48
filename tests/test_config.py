"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config import load_config


def test_defaults(monkeypatch):
    for var in ["MINIO_BUCKET", "STORAGE_BACKEND", "TEMP_FILE_PREFIX", "TOOL_TIMEOUT_SECONDS"]:
        monkeypatch.delenv(var, raising=False)

    config = load_config()

    assert config.minio.bucket_name == "uploads"
    assert config.storage.backend == "minio"
    assert config.media.temp_prefix == "preview"
    assert config.media.tool_timeout_seconds == 300


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE_BACKEND", "local")
    monkeypatch.setenv("LOCAL_STORAGE_DIR", str(tmp_path))
    monkeypatch.setenv("TEMP_DIRECTORY", str(tmp_path / "tmp"))
    monkeypatch.setenv("FFMPEG_PATH", "/opt/ffmpeg/bin/ffmpeg")
    monkeypatch.setenv("FFPROBE_PATH", "/opt/ffmpeg/bin/ffprobe")
    monkeypatch.setenv("TOOL_TIMEOUT_SECONDS", "45")
    monkeypatch.setenv("POSTGRES_USER", "zip")
    monkeypatch.setenv("POSTGRES_PASSWORD", "line")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_PORT", "5433")
    monkeypatch.setenv("POSTGRES_DB", "assets")

    config = load_config()

    assert config.storage.backend == "local"
    assert config.storage.local_dir == tmp_path
    assert config.media.temp_directory == Path(tmp_path / "tmp")
    assert config.media.ffmpeg_path == "/opt/ffmpeg/bin/ffmpeg"
    assert config.media.ffprobe_path == "/opt/ffmpeg/bin/ffprobe"
    assert config.media.tool_timeout_seconds == 45
    assert config.postgres.url == "postgresql+psycopg://zip:line@db:5433/assets"


def test_unknown_storage_backend_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "ftp")
    with pytest.raises(ValidationError):
        load_config()


def test_non_positive_timeout_rejected(monkeypatch):
    monkeypatch.setenv("TOOL_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        load_config()
