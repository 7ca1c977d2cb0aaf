"""Shared fixtures for image files and output directories."""

from __future__ import annotations

import pytest

from tests.helpers import PNG_BYTES, RecordingTransport


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def source_png(tmp_path):
    path = tmp_path / "source.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def source_jpg(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return path


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out
