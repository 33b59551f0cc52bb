"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image

from framer.models.frame_settings import FrameSettings


@dataclass(frozen=True)
class SourceImage:
    """Неизменяемая модель исходной фотографии и её метаданные.

    Fields:
        pil_image: Загруженное изображение PIL (RGBA).
        width: Ширина, px.
        height: Высота, px.
        capture_date: Дата съёмки из EXIF, если есть.
        path: Путь к исходному файлу, если изображение загружено с диска.
        size_bytes: Размер файла, если доступен.
    """
    pil_image: Image.Image
    width: int
    height: int
    capture_date: Optional[datetime] = None
    path: Optional[Path] = None
    size_bytes: Optional[int] = None

    @classmethod
    def from_pil(cls, image: Image.Image, capture_date: Optional[datetime] = None) -> "SourceImage":
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        width, height = rgba.size
        return cls(pil_image=rgba, width=width, height=height, capture_date=capture_date)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class Rect:
    """Прямоугольник в координатах итогового холста."""
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class FramedCanvas:
    """Результат отрисовки рамки.

    `photo_rect` задан только для стиля instagram: это область, куда легло фото,
    она нужна для привязки подписи. `degraded` выставляется, если холст не удалось
    выделить и вместо результата возвращена пустая заглушка.
    """
    image: Image.Image
    photo_rect: Optional[Rect] = None
    degraded: bool = False


@dataclass(frozen=True)
class ComposedImage:
    """Итоговое изображение вместе с подписью и настройками, по которым оно собрано."""
    image: Image.Image
    caption: str
    settings: FrameSettings

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size
