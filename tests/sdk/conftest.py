"""Shared fixtures for notary SDK tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.sdk.fakes import FakeClock, FakeUploader, RecordingSigner


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def signer() -> RecordingSigner:
    return RecordingSigner()


@pytest.fixture
def uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def artifact_path(tmp_path: Path) -> Path:
    path = tmp_path / "app.zip"
    path.write_bytes(b"PK\x03\x04" + bytes(range(256)) * 64)
    return path
