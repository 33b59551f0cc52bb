from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest
from PIL import ExifTags, Image

from framer.config import AppConfig, get_config
from framer.models.image_model import SourceImage

PHOTO_COLOR = (200, 40, 40, 255)


def make_source(width: int = 120, height: int = 80, capture_date: Optional[datetime] = None) -> SourceImage:
    return SourceImage.from_pil(Image.new("RGBA", (width, height), PHOTO_COLOR), capture_date=capture_date)


def write_jpeg(path: Path, size=(64, 48), exif_date: Optional[str] = None) -> Path:
    image = Image.new("RGB", size, PHOTO_COLOR[:3])
    if exif_date is None:
        image.save(path, "JPEG")
    else:
        exif = Image.Exif()
        exif[ExifTags.Base.DateTime] = exif_date
        image.save(path, "JPEG", exif=exif)
    return path


@pytest.fixture
def source() -> SourceImage:
    return make_source()


@pytest.fixture
def dated_source() -> SourceImage:
    return make_source(capture_date=datetime(2024, 7, 15, 10, 30))


@pytest.fixture
def app_config(tmp_path, monkeypatch) -> AppConfig:
    monkeypatch.setenv("FRAMER_LIBRARY_DIR", str(tmp_path / "library"))
    monkeypatch.setenv("FRAMER_FONTS_DIR", str(tmp_path / "fonts"))
    get_config.cache_clear()
    yield get_config()
    get_config.cache_clear()
