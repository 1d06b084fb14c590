# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import pytest

from byteme.common import settings as settings_mod

# Minimal headers that signature sniffing recognizes.
PNG_HEADER = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
JPEG_HEADER = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 32
WAV_HEADER = b"RIFF\x24\x00\x00\x00WAVEfmt " + b"\x00" * 32
PDF_HEADER = b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n" + b"\x00" * 16
PLAIN_TEXT = b"just some notes, nothing binary here\n"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Every test sees settings built from its own environment."""
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture()
def headers() -> SimpleNamespace:
    return SimpleNamespace(
        png=PNG_HEADER, jpeg=JPEG_HEADER, wav=WAV_HEADER, pdf=PDF_HEADER, text=PLAIN_TEXT,
    )


@pytest.fixture()
def make_file(tmp_path) -> Callable[..., Path]:
    def _make(name: str, content: bytes = PLAIN_TEXT) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(content)
        return p

    return _make
