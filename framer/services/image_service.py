"""Загрузка фотографий с диска и извлечение даты съёмки из EXIF.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- Отсутствие EXIF не ошибка: дата просто остаётся `None`.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import ExifTags, Image, ImageOps, UnidentifiedImageError

from framer.models.image_model import SourceImage

logger = logging.getLogger(__name__)

EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"


class ImageService:
    def load_image(self, file_path: str | Path) -> SourceImage:
        """Загружает фотографию с диска и возвращает её вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `SourceImage` c `PIL.Image.Image` (в режиме RGBA, с учётом EXIF-ориентации),
            размерами, датой съёмки и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as raw:
                capture_date = self.read_capture_date(raw)
                oriented = ImageOps.exif_transpose(raw)
                pil_image = oriented.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc
        except OSError as exc:
            # e.g. "image file is truncated" while decoding the pixel data
            raise ValueError(f"Не удалось прочитать изображение {path}: {exc}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug("Loaded %s (%dx%d), capture date: %s", path, width, height, capture_date)
        return SourceImage(
            pil_image=pil_image,
            width=width,
            height=height,
            capture_date=capture_date,
            path=path,
            size_bytes=size_bytes,
        )

    def read_capture_date(self, image: Image.Image) -> Optional[datetime]:
        """Возвращает DateTimeOriginal (или DateTime) из EXIF, либо `None`."""
        try:
            exif = image.getexif()
        except Exception as exc:  # битый EXIF-блок не должен ломать загрузку
            logger.debug("Unreadable EXIF block: %s", exc)
            return None
        return self.capture_date_from_exif(exif)

    def capture_date_from_exif(self, exif: Image.Exif) -> Optional[datetime]:
        raw = exif.get_ifd(ExifTags.IFD.Exif).get(ExifTags.Base.DateTimeOriginal)
        if not raw:
            raw = exif.get(ExifTags.Base.DateTime)
        if not raw:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("ascii", errors="ignore")
        try:
            return datetime.strptime(str(raw).strip("\x00 "), EXIF_DATE_FORMAT)
        except ValueError:
            logger.debug("Unparsable EXIF date: %r", raw)
            return None
