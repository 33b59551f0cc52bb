from datetime import datetime

import pytest
from PIL import ExifTags, Image

from framer.services.image_service import ImageService

from conftest import write_jpeg


def test_load_image_reads_capture_date(tmp_path):
    path = write_jpeg(tmp_path / "dated.jpg", size=(64, 48), exif_date="2024:07:15 09:30:00")
    source = ImageService().load_image(path)

    assert source.size == (64, 48)
    assert source.pil_image.mode == "RGBA"
    assert source.capture_date == datetime(2024, 7, 15, 9, 30)
    assert source.path == path
    assert source.size_bytes == path.stat().st_size


def test_load_image_without_exif(tmp_path):
    source = ImageService().load_image(write_jpeg(tmp_path / "plain.jpg"))
    assert source.capture_date is None


def test_unparsable_exif_date_is_ignored():
    exif = Image.Exif()
    exif[ExifTags.Base.DateTime] = "sometime in July"
    assert ImageService().capture_date_from_exif(exif) is None


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageService().load_image(tmp_path / "nope.jpg")


def test_truncated_jpeg(tmp_path):
    path = tmp_path / "cut.jpg"
    Image.effect_noise((640, 480), 64).convert("RGB").save(path, "JPEG")
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 3])
    with pytest.raises(ValueError):
        ImageService().load_image(path)


def test_not_an_image(tmp_path):
    path = tmp_path / "notes.jpg"
    path.write_text("definitely not a jpeg")
    with pytest.raises(ValueError):
        ImageService().load_image(path)
